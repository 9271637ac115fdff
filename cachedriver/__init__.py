"""
Cache Driver: Redis-backed cache items

A small cache driver that stores, reads, expires and invalidates
entries on a remote Redis server behind a uniform cache item interface.
"""

from .cache import (
    Cache,
    CacheConnectionError,
    CacheError,
    CacheItem,
    RedisCache,
    UnsupportedBackendError,
)

__version__ = "1.0.0"

__all__ = [
    "Cache",
    "CacheConnectionError",
    "CacheError",
    "CacheItem",
    "RedisCache",
    "UnsupportedBackendError",
]
