"""Key space shared by every value kind.

KVStore owns the key -> item map and the single lock that guards it. Every
public operation takes the lock for its full check-then-act sequence. An
item found expired during a lookup is deleted on the spot; the periodic
sweep removes the ones nobody reads.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Dict, List, Optional

from memstore.data_type.item import Item, Kind
from memstore.data_type.ttl import NO_EXPIRY, TTL, expires_at_for

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


def _check_key(key: str) -> None:
    if not isinstance(key, str):
        raise TypeError(f"key must be str, got {type(key).__name__}")
    if not key:
        raise ValueError("key must not be empty")


def _check_value(value: str) -> None:
    if not isinstance(value, str):
        raise TypeError(f"value must be str, got {type(value).__name__}")


class KVStore:
    def __init__(self, clock: Clock = time.monotonic) -> None:
        self._data: Dict[str, Item] = {}
        self._lock = threading.Lock()
        self._clock = clock

    def _lookup(self, key: str, now: float) -> Optional[Item]:
        # Caller must hold self._lock
        item = self._data.get(key)
        if item is None:
            return None
        if item.is_expired(now):
            del self._data[key]
            logger.debug("key %r expired on access", key)
            return None
        return item

    def remove(self, key: str) -> bool:
        _check_key(key)
        with self._lock:
            return self._data.pop(key, None) is not None

    def get_ttl(self, key: str) -> Optional[float]:
        """Return remaining seconds, NO_EXPIRY, or None for a missing key."""
        _check_key(key)
        with self._lock:
            now = self._clock()
            item = self._lookup(key, now)
            if item is None:
                return None
            if item.expires_at is None:
                return NO_EXPIRY
            return item.expires_at - now

    def set_ttl(self, key: str, ttl: TTL) -> bool:
        _check_key(key)
        with self._lock:
            now = self._clock()
            item = self._lookup(key, now)
            if item is None:
                return False
            item.expires_at = expires_at_for(ttl, now)
            return True

    def kind(self, key: str) -> Optional[Kind]:
        _check_key(key)
        with self._lock:
            item = self._lookup(key, self._clock())
            return item.kind if item is not None else None

    def keys(self) -> List[str]:
        with self._lock:
            now = self._clock()
            return [k for k, item in self._data.items() if not item.is_expired(now)]

    def sweep(self) -> int:
        """Delete every expired item and return how many were removed."""
        with self._lock:
            now = self._clock()
            expired = [k for k, item in self._data.items() if item.is_expired(now)]
            for k in expired:
                del self._data[k]
            logger.debug("sweep removed %d keys, %d remaining", len(expired), len(self._data))
            return len(expired)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str) or not key:
            return False
        with self._lock:
            return self._lookup(key, self._clock()) is not None

    def __len__(self) -> int:
        # Raw entry count; may include expired items the sweep has not reached
        with self._lock:
            return len(self._data)
