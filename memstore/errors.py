from __future__ import annotations


class StoreError(Exception):
    """Base error for the key-value store."""


class NotFoundError(StoreError):
    """Raised when a key is absent or has expired."""


class TypeMismatchError(StoreError):
    """Raised when a key holds a different kind than the operation requires."""


class InvalidArgumentError(StoreError):
    """Raised when caller input such as a TTL is malformed."""


class EmptyCollectionError(StoreError):
    """Raised when popping from a list with no elements."""
