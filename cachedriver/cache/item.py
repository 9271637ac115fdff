"""
Cache Item Module

The value object returned by cache reads.
"""

from typing import Any, Optional


class CacheItem:
    """
    A key with an optional cached value.

    An item starts out as a miss. It becomes a hit once set_value() is
    called, even if the stored value is falsy. Check has_value before
    reading value.

    Attributes:
        key: The cache key (read-only)
        value: The cached payload, None for a miss
    """

    def __init__(self, key: str):
        if not isinstance(key, str) or not key:
            raise ValueError("Cache item key must be a non-empty string")

        self._key = key
        self._value: Optional[Any] = None
        self._hit = False

    @property
    def key(self) -> str:
        return self._key

    @property
    def value(self) -> Optional[Any]:
        return self._value

    @property
    def has_value(self) -> bool:
        """True if a value has been set on this item."""
        return self._hit

    def is_hit(self) -> bool:
        return self._hit

    def set_value(self, value: Any) -> "CacheItem":
        """Store a value and mark the item as a hit."""
        self._value = value
        self._hit = True
        return self

    def __repr__(self) -> str:
        if self._hit:
            return f"CacheItem(key={self._key!r}, value={self._value!r})"
        return f"CacheItem(key={self._key!r}, miss)"
