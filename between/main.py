from __future__ import annotations

import logging
import os

from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.responses import JSONResponse

from .alphabet import DEFAULT_CHARS, Alphabet
from .models import Item, ItemCreate, ItemList, ItemMove, ItemOut, ListCreate, ListOut
from .schemas import AlphabetOut, BetweenIn, ErrorEnvelope, Health, KeyIn, KeyOut, ValidOut, Version
from .storage import ItemNotFound, ListNotFound, NoSortKey, Storage

ALPHABET_CHARS = os.getenv("BETWEEN_ALPHABET", DEFAULT_CHARS)
LOG_LEVEL = os.getenv("BETWEEN_LOG_LEVEL", "INFO")
VERSION = "1.0.0"

logging.getLogger("between").setLevel(LOG_LEVEL.upper())
logger = logging.getLogger(__name__)

alphabet = Alphabet(ALPHABET_CHARS)
storage = Storage(alphabet)

app = FastAPI(title="Between API", version=VERSION)


# === Helpers ===


def list_out(item_list: ItemList) -> ListOut:
    return ListOut(
        id=item_list.id,
        name=item_list.name,
        createdAt=item_list.created_at,
        updatedAt=item_list.updated_at,
        version=item_list.version,
        itemsCount=len(item_list.items),
    )


def item_out(item: Item) -> ItemOut:
    return ItemOut(
        id=item.id,
        listId=item.list_id,
        value=item.value,
        sortKey=item.sort_key,
        createdAt=item.created_at,
        updatedAt=item.updated_at,
        version=item.version,
    )


def error_response(status_code: int, code: str, message: str, details: dict | None = None) -> JSONResponse:
    envelope = ErrorEnvelope(code=code, message=message, details=details)
    return JSONResponse(status_code=status_code, content={"error": envelope.model_dump()})


@app.exception_handler(ListNotFound)
def list_not_found(request: Request, exc: ListNotFound) -> JSONResponse:
    return error_response(404, "not_found", "list not found", {"listId": exc.args[0]})


@app.exception_handler(ItemNotFound)
def item_not_found(request: Request, exc: ItemNotFound) -> JSONResponse:
    return error_response(404, "not_found", "item not found", {"itemId": exc.args[0]})


@app.exception_handler(NoSortKey)
def no_sort_key(request: Request, exc: NoSortKey) -> JSONResponse:
    logger.info("no sort key between %r and %r", exc.left, exc.right)
    return error_response(409, "no_sort_key", str(exc), {"left": exc.left, "right": exc.right})


# === Health & metadata ===


@app.get("/v1/health", response_model=Health)
def health() -> Health:
    return Health()


@app.get("/v1/version", response_model=Version)
def version() -> Version:
    return Version(version=VERSION)


@app.get("/v1/alphabet", response_model=AlphabetOut)
def get_alphabet() -> AlphabetOut:
    return AlphabetOut(symbols=list(alphabet.symbols), low=alphabet.low, high=alphabet.high)


# === Key endpoints ===


@app.post("/v1/keys:between", response_model=KeyOut)
def keys_between(payload: BetweenIn) -> KeyOut:
    return KeyOut(key=alphabet.between(payload.this, payload.that))


@app.post("/v1/keys:after", response_model=KeyOut)
def keys_after(payload: KeyIn) -> KeyOut:
    return KeyOut(key=alphabet.after(payload.key))


@app.post("/v1/keys:before", response_model=KeyOut)
def keys_before(payload: KeyIn) -> KeyOut:
    return KeyOut(key=alphabet.before(payload.key))


@app.post("/v1/keys:validate", response_model=ValidOut)
def keys_validate(payload: KeyIn) -> ValidOut:
    return ValidOut(valid=alphabet.valid(payload.key))


# === List endpoints ===


@app.post("/v1/lists", response_model=ListOut, status_code=201)
def create_list(payload: ListCreate):
    return list_out(storage.create_list(payload.name))


@app.get("/v1/lists", response_model=dict)
def list_lists():
    return {"lists": [list_out(l) for l in storage.list_lists()]}


@app.get("/v1/lists/{list_id}", response_model=dict)
def get_list(list_id: str, response: Response):
    item_list = storage.get_list(list_id)
    response.headers["ETag"] = f'"{item_list.version}"'
    return {
        "list": list_out(item_list),
        "items": [item_out(i) for i in storage.ordered_items(item_list)],
    }


@app.delete("/v1/lists/{list_id}", status_code=204)
def delete_list(list_id: str):
    storage.delete_list(list_id)
    return Response(status_code=204)


# === Item endpoints ===


@app.post("/v1/lists/{list_id}/items", response_model=ItemOut, status_code=201)
def create_item(list_id: str, payload: ItemCreate):
    item_list = storage.get_list(list_id)
    item = storage.create_item(item_list, payload.value, payload.afterItemId, payload.beforeItemId)
    return item_out(item)


@app.post("/v1/lists/{list_id}/items/{item_id}:move", response_model=ItemOut)
def move_item(list_id: str, item_id: str, payload: ItemMove):
    item_list = storage.get_list(list_id)
    item = storage.get_item(item_list, item_id)
    if payload.expectedVersion is not None and payload.expectedVersion != item.version:
        raise HTTPException(status_code=412, detail="precondition_failed")
    item = storage.move_item(item_list, item, payload.afterItemId, payload.beforeItemId)
    return item_out(item)


@app.delete("/v1/lists/{list_id}/items/{item_id}", status_code=204)
def delete_item(list_id: str, item_id: str):
    item_list = storage.get_list(list_id)
    storage.delete_item(item_list, item_id)
    return Response(status_code=204)
