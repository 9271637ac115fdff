"""
Pytest Configuration and Fixtures

This module provides shared fixtures and configuration for all tests.

Unit tests never talk to a real server. The fake_server fixture swaps
redis.Redis for an in-memory test double that answers the handful of
commands the driver issues and records every call it receives.
"""

import time
from typing import Any, Dict, List, Optional, Tuple

import pytest
import redis

from cachedriver.cache.redis_driver import RedisCache
from cachedriver.protocol.parser import ProtocolParser


# ============================================================================
# Redis Test Double
# ============================================================================

class FakeRedisServer:
    """
    In-memory stand-in for a Redis server.

    Storage format: key -> (value, expiration_timestamp)
    expiration_timestamp = 0 means no expiration

    Attributes:
        clients: Every client handle created against this server
        connections: Number of successful connection handshakes (PING)
        commands: Log of (command, args) tuples, in call order
        reachable: When False, PING fails with a connection error
        failing: Command names that fail with a server error
    """

    def __init__(self):
        self._store: Dict[str, Tuple[Any, float]] = {}
        self.clients: List["FakeRedis"] = []
        self.connections = 0
        self.commands: List[Tuple[str, tuple]] = []
        self.reachable = True
        self.failing: set = set()

    def call(self, name: str, *args: Any) -> None:
        """Record a command and raise if it is configured to fail."""
        self.commands.append((name, args))

        if name == "ping" and not self.reachable:
            raise redis.exceptions.ConnectionError("Error 111 connecting. Connection refused.")
        if name in self.failing:
            raise redis.exceptions.ResponseError(f"{name.upper()} failed")

    def command_names(self) -> List[str]:
        return [name for name, _ in self.commands]

    def read(self, key: str) -> Optional[Any]:
        if key not in self._store:
            return None

        value, expires_at = self._store[key]
        if expires_at and expires_at <= time.time():
            # Lazy expiration
            self._store.pop(key, None)
            return None
        return value

    def write(self, key: str, value: Any, ttl: Optional[int] = None) -> None:
        expires_at = time.time() + ttl if ttl else 0
        self._store[key] = (value, expires_at)

    def delete(self, key: str) -> bool:
        if self.read(key) is None:
            return False
        self._store.pop(key, None)
        return True

    def flush(self) -> None:
        self._store.clear()


class FakeRedis:
    """Client double mirroring the redis.Redis methods the driver calls."""

    server: FakeRedisServer = None

    def __init__(self, **kwargs: Any):
        self.url: Optional[str] = None
        self.kwargs = kwargs
        self.decode_responses = kwargs.get("decode_responses", False)
        self.server.clients.append(self)

    @classmethod
    def from_url(cls, url: str, **kwargs: Any) -> "FakeRedis":
        client = cls(**kwargs)
        client.url = url
        return client

    def ping(self) -> bool:
        self.server.call("ping")
        self.server.connections += 1
        return True

    def get(self, key: str) -> Optional[Any]:
        self.server.call("get", key)
        value = self.server.read(key)
        if value is not None and self.decode_responses:
            # Raises UnicodeDecodeError for binary payloads, like redis-py
            return value.decode("utf-8")
        return value

    def set(self, key: str, value: Any, ex: Optional[int] = None) -> bool:
        self.server.call("set", key, value, ex)
        if ex is not None and not isinstance(ex, int):
            raise redis.exceptions.DataError("ex must be datetime.timedelta or int")
        # Values travel as bytes, the way redis-py encodes them
        if not isinstance(value, bytes):
            value = str(value).encode("utf-8")
        self.server.write(key, value, ex)
        return True

    def delete(self, *keys: str) -> int:
        self.server.call("delete", *keys)
        return sum(1 for key in keys if self.server.delete(key))

    def exists(self, *keys: str) -> int:
        self.server.call("exists", *keys)
        return sum(1 for key in keys if self.server.read(key) is not None)

    def flushall(self) -> bool:
        self.server.call("flushall")
        self.server.flush()
        return True


# ============================================================================
# Driver Fixtures
# ============================================================================

@pytest.fixture
def fake_server(monkeypatch) -> FakeRedisServer:
    """Install the Redis test double and return its server state."""
    server = FakeRedisServer()

    class BoundFakeRedis(FakeRedis):
        pass

    BoundFakeRedis.server = server
    monkeypatch.setattr(redis, "Redis", BoundFakeRedis)
    return server


@pytest.fixture
def cache(fake_server: FakeRedisServer) -> RedisCache:
    """Create a driver pointed at the test double on 127.0.0.1:6379."""
    return RedisCache({"host": "127.0.0.1", "port": 6379, "decode_responses": False})


@pytest.fixture
def parser() -> ProtocolParser:
    """Create a ProtocolParser instance."""
    return ProtocolParser()


# ============================================================================
# Pytest Configuration
# ============================================================================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
