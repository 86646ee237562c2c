"""List operations.

Lists grow at the tail and pop from the tail (stack order). push() creates
a missing list on the fly with no expiration, while create_list() refuses to
touch a key that already exists.
"""

from __future__ import annotations

from typing import List, Optional

from memstore.data_type.item import ListItem
from memstore.data_type.kvstore import KVStore, _check_key, _check_value
from memstore.data_type.ttl import TTL, expires_at_for
from memstore.errors import EmptyCollectionError, NotFoundError, TypeMismatchError


class ListCommands(KVStore):
    def create_list(self, key: str, ttl: TTL = None) -> bool:
        _check_key(key)
        with self._lock:
            now = self._clock()
            if self._lookup(key, now) is not None:
                return False
            self._data[key] = ListItem(expires_at=expires_at_for(ttl, now))
            return True

    def get_list(self, key: str) -> List[str]:
        _check_key(key)
        with self._lock:
            return self._live_list(key).snapshot()

    def push(self, key: str, value: str) -> bool:
        _check_key(key)
        _check_value(value)
        with self._lock:
            item = self._lookup(key, self._clock())
            if item is None:
                self._data[key] = ListItem(values=[value])
                return True
            if not isinstance(item, ListItem):
                return False
            item.append(value)
            return True

    def pop(self, key: str) -> Optional[str]:
        """Remove and return the last element, or None if there is none."""
        _check_key(key)
        with self._lock:
            item = self._lookup(key, self._clock())
            if not isinstance(item, ListItem) or not item:
                return None
            return item.pop_last()

    def pop_or_raise(self, key: str) -> str:
        """Like pop(), but report why nothing could be popped.

        Raises NotFoundError, TypeMismatchError or EmptyCollectionError.
        """
        _check_key(key)
        with self._lock:
            item = self._live_list(key)
            if not item:
                raise EmptyCollectionError(f"list {key!r} is empty")
            return item.pop_last()

    def _live_list(self, key: str) -> ListItem:
        # Caller must hold self._lock
        item = self._lookup(key, self._clock())
        if item is None:
            raise NotFoundError(f"key {key!r} not found")
        if not isinstance(item, ListItem):
            raise TypeMismatchError(f"key {key!r} holds a {item.kind.value}, not a list")
        return item
