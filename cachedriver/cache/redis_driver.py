"""
Redis Cache Driver

Maps the cache operations onto Redis commands:

    get(key)             -> GET key
    set(key, value)      -> SET key value
    set(key, value, ttl) -> SET key value EX ttl
    remove(key)          -> DEL key
    exists(key)          -> EXISTS key
    clear()              -> FLUSHALL

The connection is opened lazily by the first operation and reused for
the lifetime of the driver instance. There is no reconnect: once the
first connect has failed, every later operation raises the same
CacheConnectionError without creating another client. Create a new
driver to try again.

Command failures are soft: a Redis error from any of the operations
above is logged and reported as False (or a miss for get). Only
construction and connection failures raise.

Values are returned as bytes unless the decode_responses option is
set, in which case a stored value that is not valid UTF-8 reads as a
miss.

Note that clear() flushes every database on the server, including keys
this driver never wrote.
"""

import logging
import math
import threading
from typing import Any, Mapping, Optional

from ..config.settings import settings
from ..network.address import AddressKind, classify_address, format_network_url
from .base import Cache
from .exceptions import CacheConnectionError, UnsupportedBackendError
from .item import CacheItem

try:
    import redis

    HAS_REDIS = True
except ImportError:
    redis = None
    HAS_REDIS = False

logger = logging.getLogger(__name__)


def _as_bool(value: Any) -> bool:
    """Interpret an option value, accepting "true"/"false" strings."""
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return bool(value)


class RedisCache(Cache):
    """
    Cache driver backed by a Redis server.

    Recognized options:
        host: IP address, "localhost", or a unix socket path
              (also accepted as "redis.host")
        port: TCP port, ignored for unix sockets (also "redis.port")
        decode_responses: Return str instead of bytes from get()
                          (bool or "true"/"false")

    Missing options fall back to the values in settings. Options are read
    once, on the first connect.

    A single instance is not meant to be shared between threads. The lazy
    connect itself is locked so two threads racing on the first operation
    still end up with one connection.
    """

    def __init__(self, options: Optional[Mapping[str, Any]] = None):
        super().__init__(options)

        if not HAS_REDIS:
            raise UnsupportedBackendError("Redis not supported.")

        self._client = None
        self._connect_error: Optional[CacheConnectionError] = None
        self._lock = threading.Lock()

    @property
    def connected(self) -> bool:
        """True once a connection has been established."""
        return self._client is not None and self._connect_error is None

    def _connection_option(self, name: str, default: Any) -> Any:
        value = self.get_option(name)
        if value is None:
            value = self.get_option(f"redis.{name}")
        return default if value is None else value

    def connect(self) -> None:
        """
        Connect to the Redis server if no connection exists yet.

        Raises:
            CacheConnectionError: If the server cannot be reached, on the
                first attempt and on every call after it
        """
        if self._client is not None and self._connect_error is None:
            return

        with self._lock:
            if self._connect_error is not None:
                raise self._connect_error
            if self._client is not None:
                return

            host = str(self._connection_option("host", settings.REDIS_HOST))
            port = int(self._connection_option("port", settings.REDIS_PORT))
            decode_responses = _as_bool(
                self._connection_option("decode_responses", settings.DECODE_RESPONSES)
            )

            if classify_address(host) is AddressKind.NETWORK:
                # Port goes in the URL and as a keyword; both must agree
                self._client = redis.Redis.from_url(
                    format_network_url(host, port),
                    port=port,
                    decode_responses=decode_responses,
                )
                target = f"{host}:{port}"
            else:
                self._client = redis.Redis(
                    unix_socket_path=host,
                    decode_responses=decode_responses,
                )
                port = None
                target = host

            try:
                self._client.ping()
            except redis.exceptions.RedisError as exc:
                logger.error(f"Could not connect to Redis at {target}: {exc}")
                self._connect_error = CacheConnectionError(
                    message=f"Could not connect to Redis at {target}",
                    host=host,
                    port=port,
                    original_error=exc,
                )
                raise self._connect_error from exc

            logger.info(f"Connected to Redis at {target}")

    def _command(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """Run a client command, returning None if it fails."""
        self.connect()

        try:
            return getattr(self._client, name)(*args, **kwargs)
        except redis.exceptions.RedisError as exc:
            logger.warning(f"Redis {name.upper()} failed: {exc}")
        except UnicodeDecodeError as exc:
            logger.warning(f"Redis {name.upper()} returned undecodable data: {exc}")
        return None

    def get(self, key: str) -> CacheItem:
        item = CacheItem(key)
        value = self._command("get", key)

        if value is not None:
            item.set_value(value)

        return item

    def set(self, key: str, value: Any, ttl: Optional[float] = None) -> bool:
        """
        Store a value, optionally expiring after ttl seconds.

        The value and its expiry are written by a single SET command, so a
        key is never left behind without the requested ttl. A ttl of None
        or 0 stores the value without expiry. Fractional ttls are rounded
        up to whole seconds.
        """
        if ttl:
            return bool(self._command("set", key, value, ex=int(math.ceil(ttl))))
        return bool(self._command("set", key, value))

    def remove(self, key: str) -> bool:
        return bool(self._command("delete", key))

    def exists(self, key: str) -> bool:
        return bool(self._command("exists", key))

    def clear(self) -> bool:
        """Flush every key on the server. Not scoped to this driver."""
        return bool(self._command("flushall"))
