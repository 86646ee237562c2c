"""Scalar string operations."""

from __future__ import annotations

from typing import List, Optional, Tuple, Union

from memstore.data_type.item import Kind, ListItem, StringItem
from memstore.data_type.kvstore import KVStore, _check_key, _check_value
from memstore.data_type.ttl import TTL, expires_at_for


class StringCommands(KVStore):
    def set(self, key: str, value: str, ttl: TTL = None) -> bool:
        # Overwrites unconditionally, whatever kind the key held before
        _check_key(key)
        _check_value(value)
        with self._lock:
            now = self._clock()
            self._data[key] = StringItem(expires_at=expires_at_for(ttl, now), value=value)
            return True

    def get(self, key: str) -> Optional[Tuple[Union[str, List[str]], Kind]]:
        """Return (value, kind) for a live key, None otherwise.

        List values come back as a copy.
        """
        _check_key(key)
        with self._lock:
            item = self._lookup(key, self._clock())
            if item is None:
                return None
            if isinstance(item, ListItem):
                return item.snapshot(), item.kind
            return item.value, item.kind

    def update(self, key: str, value: str) -> bool:
        _check_key(key)
        _check_value(value)
        with self._lock:
            item = self._lookup(key, self._clock())
            if not isinstance(item, StringItem):
                return False
            item.value = value
            return True
