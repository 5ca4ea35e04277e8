from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Optional

from pydantic import BaseModel, Field


# === Domain objects used by the in-memory store ===


@dataclass
class Item:
    id: str
    list_id: str
    value: str
    sort_key: str
    created_at: datetime
    updated_at: datetime
    version: int = 0


@dataclass
class ItemList:
    id: str
    name: str
    created_at: datetime
    updated_at: datetime
    version: int = 0
    items: Dict[str, Item] = field(default_factory=dict)


# === API Schemas ===


class ListCreate(BaseModel):
    name: str = Field(min_length=1, max_length=140)


class ListOut(BaseModel):
    id: str
    name: str
    createdAt: datetime
    updatedAt: datetime
    version: int
    itemsCount: int


class ItemCreate(BaseModel):
    value: str = Field(min_length=1, max_length=2000)
    afterItemId: Optional[str] = None
    beforeItemId: Optional[str] = None


class ItemMove(BaseModel):
    afterItemId: Optional[str] = None
    beforeItemId: Optional[str] = None
    expectedVersion: Optional[int] = None


class ItemOut(BaseModel):
    id: str
    listId: str
    value: str
    sortKey: str
    createdAt: datetime
    updatedAt: datetime
    version: int
