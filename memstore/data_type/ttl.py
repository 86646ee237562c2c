"""TTL helpers shared by the store and by callers that accept TTLs as text."""

from __future__ import annotations

import math
from datetime import timedelta
from typing import Optional, Union

from memstore.errors import InvalidArgumentError

TTL = Union[int, float, timedelta, None]

# Returned by get_ttl for keys that never expire
NO_EXPIRY = -1.0


def to_seconds(ttl: TTL) -> float:
    if ttl is None:
        return 0.0
    if isinstance(ttl, timedelta):
        ttl = ttl.total_seconds()
    if isinstance(ttl, bool) or not isinstance(ttl, (int, float)):
        raise TypeError(f"ttl must be seconds or a timedelta, got {type(ttl).__name__}")
    seconds = float(ttl)
    if not math.isfinite(seconds):
        raise ValueError(f"ttl must be finite, got {seconds!r}")
    return seconds


def expires_at_for(ttl: TTL, now: float) -> Optional[float]:
    # A TTL of zero or less means "never expires"
    seconds = to_seconds(ttl)
    if seconds <= 0:
        return None
    return now + seconds


def parse_ttl(raw: Optional[str]) -> Optional[int]:
    """Parse a TTL given as whole seconds in text form.

    Empty or missing input means no TTL. Anything that is not a
    non-negative integer raises InvalidArgumentError.
    """
    if raw is None:
        return None
    raw = raw.strip()
    if not raw:
        return None
    try:
        seconds = int(raw)
    except ValueError:
        raise InvalidArgumentError(f"invalid ttl value: {raw!r}") from None
    if seconds < 0:
        raise InvalidArgumentError(f"invalid ttl value: {raw!r}")
    return seconds
