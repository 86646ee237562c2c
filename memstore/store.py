"""Public in-memory key-value engine.

Store combines the string and list operations over one key space guarded by
a single lock, and owns the background sweeper that clears expired keys.

    with Store(sweep_interval=30) as store:
        store.set("greeting", "hello", ttl=60)
        store.push("jobs", "a")
        store.pop("jobs")
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Optional

from memstore import config
from memstore.data_type.kvstore import Clock
from memstore.data_type.lists import ListCommands
from memstore.data_type.strings import StringCommands
from memstore.sweeper import Sweeper

logger = logging.getLogger(__name__)


class Store(StringCommands, ListCommands):
    def __init__(
        self,
        *,
        sweep_interval: Optional[float] = config.SWEEP_INTERVAL,
        clock: Clock = time.monotonic,
    ) -> None:
        super().__init__(clock=clock)
        self._sweep_interval = sweep_interval
        self._sweeper: Optional[Sweeper] = None
        self._lifecycle_lock = threading.Lock()

    @property
    def sweeper(self) -> Optional[Sweeper]:
        return self._sweeper

    def start(self) -> "Store":
        """Start the background sweeper. Does nothing if it is disabled or running."""
        with self._lifecycle_lock:
            if not self._sweep_interval or self._sweep_interval <= 0:
                return self
            previous = self._sweeper
            if previous is not None and previous.is_alive():
                if not previous.stopping:
                    return self
                # Only one sweeper may run; wait out the one still shutting down
                previous.join()
            self._sweeper = Sweeper(self, interval=self._sweep_interval)
            self._sweeper.start()
            return self

    def stop(self, timeout: Optional[float] = config.SWEEP_JOIN_TIMEOUT) -> None:
        with self._lifecycle_lock:
            sweeper = self._sweeper
            if sweeper is None:
                return
            sweeper.stop(timeout)
            if sweeper.is_alive():
                # Keep the reference so start() cannot launch a second sweeper
                logger.warning("sweeper did not stop within %ss", timeout)
                return
            self._sweeper = None

    def __enter__(self) -> "Store":
        return self.start()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
