"""Stored item variants.

An item is either a scalar string or an ordered list of strings, plus an
optional expiration deadline on the store's monotonic clock.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import ClassVar, List, Optional


class Kind(enum.Enum):
    STRING = "string"
    LIST = "list"


@dataclass(slots=True)
class Item:
    # None means the item never expires
    expires_at: Optional[float] = None

    kind: ClassVar[Kind]

    def is_expired(self, now: float) -> bool:
        return self.expires_at is not None and now >= self.expires_at


@dataclass(slots=True)
class StringItem(Item):
    value: str = ""

    kind: ClassVar[Kind] = Kind.STRING


@dataclass(slots=True)
class ListItem(Item):
    values: List[str] = field(default_factory=list)

    kind: ClassVar[Kind] = Kind.LIST

    def __len__(self) -> int:
        return len(self.values)

    def append(self, value: str) -> None:
        self.values.append(value)

    def pop_last(self) -> str:
        return self.values.pop()

    def snapshot(self) -> List[str]:
        return list(self.values)
