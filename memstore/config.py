"""Environment-driven defaults for the store.

MEMSTORE_SWEEP_INTERVAL sets how often expired keys are swept (seconds,
0 disables the background sweep) and MEMSTORE_SWEEP_JOIN_TIMEOUT bounds how
long Store.stop() waits for the sweeper thread.
"""

from __future__ import annotations

import math
import os


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        value = float(raw.strip())
    except ValueError:
        return default
    return value if math.isfinite(value) else default


SWEEP_INTERVAL = _env_float("MEMSTORE_SWEEP_INTERVAL", 30.0)
SWEEP_JOIN_TIMEOUT = _env_float("MEMSTORE_SWEEP_JOIN_TIMEOUT", 5.0)
