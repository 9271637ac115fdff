"""
Cache Base Module

Defines the interface every cache driver implements, plus option
storage and batch helpers built on the single-key operations.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, Mapping, Optional

from .item import CacheItem


class Cache(ABC):
    """
    Abstract cache driver.

    Subclasses provide the five single-key operations. Options are copied
    at construction so later changes to the caller's mapping have no
    effect; use set_option() to change them on the instance.
    """

    def __init__(self, options: Optional[Mapping[str, Any]] = None):
        self._options: Dict[str, Any] = dict(options or {})

    def get_option(self, name: str, default: Any = None) -> Any:
        """Get an option value, or default if it is not set."""
        return self._options.get(name, default)

    def set_option(self, name: str, value: Any) -> "Cache":
        """Set an option value. Returns self for chaining."""
        self._options[name] = value
        return self

    @abstractmethod
    def get(self, key: str) -> CacheItem:
        """Get the cache item for a key. A miss is an item without a value."""

    @abstractmethod
    def set(self, key: str, value: Any, ttl: Optional[int] = None) -> bool:
        """Store a value, optionally expiring after ttl seconds."""

    @abstractmethod
    def remove(self, key: str) -> bool:
        """Remove a key. Returns True if an entry was removed."""

    @abstractmethod
    def exists(self, key: str) -> bool:
        """Check whether a key is present."""

    @abstractmethod
    def clear(self) -> bool:
        """Remove every entry."""

    def get_multiple(self, keys: Iterable[str]) -> Dict[str, CacheItem]:
        """Get cache items for several keys, keyed by cache key."""
        return {key: self.get(key) for key in keys}

    def set_multiple(self, items: Mapping[str, Any], ttl: Optional[int] = None) -> bool:
        """
        Store several values with the same ttl.

        Stops at the first failed write, so entries after it are not
        attempted.

        Returns:
            True if every write succeeded
        """
        for key, value in items.items():
            if not self.set(key, value, ttl):
                return False
        return True

    def remove_multiple(self, keys: Iterable[str]) -> bool:
        """
        Remove several keys.

        Every key is attempted even after a failure.

        Returns:
            True if every key was removed
        """
        results = [self.remove(key) for key in keys]
        return all(results)
