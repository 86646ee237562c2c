"""Background removal of expired keys.

The sweeper wakes every `interval` seconds and asks the store to drop all
expired items. A stop request is observed between cycles, never in the
middle of a sweep.
"""

from __future__ import annotations

import logging
import math
import threading
from typing import Optional, Protocol

logger = logging.getLogger(__name__)


class Sweepable(Protocol):
    def sweep(self) -> int: ...


class Sweeper(threading.Thread):
    def __init__(self, store: Sweepable, *, interval: float) -> None:
        if not math.isfinite(interval) or interval <= 0:
            raise ValueError(f"sweep interval must be positive and finite, got {interval!r}")
        super().__init__(name="memstore-sweeper", daemon=True)
        self._store = store
        self._interval = float(interval)
        self._stop_event = threading.Event()

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def stopping(self) -> bool:
        return self._stop_event.is_set()

    def run(self) -> None:
        logger.info("sweeper started, interval=%.3fs", self._interval)
        # wait() returns True once stop() has been requested
        while not self._stop_event.wait(self._interval):
            try:
                self._store.sweep()
            except Exception:
                logger.exception("sweep failed")
        logger.info("sweeper stopped")

    def stop(self, timeout: Optional[float] = None) -> None:
        self._stop_event.set()
        if self.is_alive() and threading.current_thread() is not self:
            self.join(timeout)
