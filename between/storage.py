from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Dict, List, Optional

from .alphabet import Alphabet, init
from .lexorank import midpoint
from .models import Item, ItemList

logger = logging.getLogger(__name__)


class ListNotFound(KeyError):
    pass


class ItemNotFound(KeyError):
    pass


class NoSortKey(Exception):
    """Raised when no key exists between the requested neighbours."""

    def __init__(self, left: Optional[str], right: Optional[str]) -> None:
        super().__init__(f"no sort key between {left!r} and {right!r}")
        self.left = left
        self.right = right


class Storage:
    """In-memory store for ordered lists of items."""

    def __init__(self, alphabet: Optional[Alphabet] = None) -> None:
        self.alphabet = alphabet or init()
        self.lists: Dict[str, ItemList] = {}

    # === List operations ===
    def create_list(self, name: str) -> ItemList:
        now = datetime.now(timezone.utc)
        item_list = ItemList(
            id=str(uuid.uuid4()),
            name=name.strip(),
            created_at=now,
            updated_at=now,
            version=1,
        )
        self.lists[item_list.id] = item_list
        logger.debug("created list %s", item_list.id)
        return item_list

    def list_lists(self) -> List[ItemList]:
        return sorted(self.lists.values(), key=lambda l: (l.created_at, l.id))

    def get_list(self, list_id: str) -> ItemList:
        try:
            return self.lists[list_id]
        except KeyError:
            raise ListNotFound(list_id) from None

    def delete_list(self, list_id: str) -> None:
        self.get_list(list_id)
        del self.lists[list_id]
        logger.debug("deleted list %s", list_id)

    # === Item operations ===
    def get_item(self, item_list: ItemList, item_id: str) -> Item:
        try:
            return item_list.items[item_id]
        except KeyError:
            raise ItemNotFound(item_id) from None

    def ordered_items(self, item_list: ItemList) -> List[Item]:
        return sorted(item_list.items.values(), key=lambda i: (i.sort_key, i.created_at, i.id))

    def sort_key_for(
        self,
        item_list: ItemList,
        after_id: Optional[str],
        before_id: Optional[str],
        moving_id: Optional[str] = None,
    ) -> str:
        """Sort key placing an item after ``after_id`` and before ``before_id``.

        With neither neighbour given the key goes after the current last item.
        With one neighbour given the other side is the item adjacent to it.
        ``moving_id`` is left out of the neighbour lookup.
        """
        left = self.get_item(item_list, after_id).sort_key if after_id else None
        right = self.get_item(item_list, before_id).sort_key if before_id else None
        if not (after_id and before_id):
            others = [i.sort_key for i in self.ordered_items(item_list) if i.id != moving_id]
            if not (after_id or before_id):
                left = others[-1] if others else None
            elif after_id:
                right = next((k for k in others if k > left), None)
            else:
                left = next((k for k in reversed(others) if k < right), None)
        sort_key = midpoint(self.alphabet, left, right)
        if sort_key is None:
            logger.debug("no sort key in list %s between %r and %r", item_list.id, left, right)
            raise NoSortKey(left, right)
        return sort_key

    def create_item(
        self,
        item_list: ItemList,
        value: str,
        after_id: Optional[str] = None,
        before_id: Optional[str] = None,
    ) -> Item:
        now = datetime.now(timezone.utc)
        sort_key = self.sort_key_for(item_list, after_id, before_id)
        item = Item(
            id=str(uuid.uuid4()),
            list_id=item_list.id,
            value=value,
            sort_key=sort_key,
            created_at=now,
            updated_at=now,
            version=1,
        )
        item_list.items[item.id] = item
        item_list.version += 1
        item_list.updated_at = now
        logger.debug("created item %s in list %s at %r", item.id, item_list.id, sort_key)
        return item

    def move_item(
        self,
        item_list: ItemList,
        item: Item,
        after_id: Optional[str],
        before_id: Optional[str],
    ) -> Item:
        item.sort_key = self.sort_key_for(item_list, after_id, before_id, moving_id=item.id)
        now = datetime.now(timezone.utc)
        item.updated_at = now
        item.version += 1
        item_list.version += 1
        item_list.updated_at = now
        logger.debug("moved item %s in list %s to %r", item.id, item_list.id, item.sort_key)
        return item

    def delete_item(self, item_list: ItemList, item_id: str) -> None:
        self.get_item(item_list, item_id)
        del item_list.items[item_id]
        item_list.version += 1
        item_list.updated_at = datetime.now(timezone.utc)
