"""Cache module for the cache driver."""

from .base import Cache
from .exceptions import CacheConnectionError, CacheError, UnsupportedBackendError
from .item import CacheItem
from .redis_driver import RedisCache

__all__ = [
    "Cache",
    "CacheConnectionError",
    "CacheError",
    "CacheItem",
    "RedisCache",
    "UnsupportedBackendError",
]
