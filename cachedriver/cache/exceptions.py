"""
Cache Driver Exceptions

Construction and connection failures are raised with these types.
Failures of individual cache commands are not raised; the driver
reports them through its boolean results instead.
"""

from typing import Any, Dict, Optional


class CacheError(Exception):
    """Base exception for cache driver errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class UnsupportedBackendError(CacheError):
    """Raised at construction when the Redis client library is unavailable."""


class CacheConnectionError(CacheError, ConnectionError):
    """Raised when the connection to the cache server cannot be established."""

    def __init__(
        self,
        message: str = "Cache connection failed",
        host: Optional[str] = None,
        port: Optional[int] = None,
        original_error: Optional[Exception] = None,
    ):
        details: Dict[str, Any] = {}
        if host:
            details["host"] = host
        if port:
            details["port"] = port
        if original_error:
            details["original_error"] = str(original_error)
            details["original_error_type"] = type(original_error).__name__

        super().__init__(message=message, details=details)
        if original_error:
            self.__cause__ = original_error
