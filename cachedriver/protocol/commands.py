"""
Client Command and Response Definitions

This module defines the data structures for commands typed into the
interactive client and the responses printed back.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Union


class CommandType(Enum):
    """Enumeration of supported command types."""
    GET = auto()
    SET = auto()
    DELETE = auto()
    EXISTS = auto()
    CLEAR = auto()
    QUIT = auto()
    UNKNOWN = auto()


class ResponseStatus(Enum):
    """Enumeration of response statuses."""
    OK = "OK"
    ERROR = "ERROR"


@dataclass
class Command:
    """
    Represents a parsed client command.

    Attributes:
        type: The type of command
        key: The key for the operation (empty for CLEAR and QUIT)
        value: The value for SET operations (empty for other operations)
        ttl: Time-to-live in seconds for SET operations (0 = no expiration)
        raw: The original raw command string
    """
    type: CommandType
    key: str = ""
    value: str = ""
    ttl: int = 0
    raw: str = ""

    @property
    def is_valid(self) -> bool:
        """Check if the command is valid for its type."""
        if self.type == CommandType.UNKNOWN:
            return False
        if self.type in (CommandType.CLEAR, CommandType.QUIT):
            return True
        if self.type in (CommandType.GET, CommandType.DELETE, CommandType.EXISTS):
            return bool(self.key)
        if self.type == CommandType.SET:
            return bool(self.key) and bool(self.value)
        return False


@dataclass
class Response:
    """
    Represents a client response.

    Attributes:
        status: OK or ERROR
        message: Response message or error description
        value: The value returned (for GET operations)
    """
    status: ResponseStatus
    message: str = ""
    value: Optional[Union[str, bytes]] = None

    @property
    def ok(self) -> bool:
        return self.status == ResponseStatus.OK

    @classmethod
    def success(cls, message: str = "", value: Optional[str] = None) -> "Response":
        """Create a successful response."""
        return cls(status=ResponseStatus.OK, message=message, value=value)

    @classmethod
    def error(cls, message: str) -> "Response":
        """Create an error response."""
        return cls(status=ResponseStatus.ERROR, message=message)

    @classmethod
    def stored(cls, stored: bool) -> "Response":
        """Create the response for SET operations."""
        return cls.success(message="stored") if stored else cls.error("not stored")

    @classmethod
    def deleted(cls, deleted: bool) -> "Response":
        """Create the response for DELETE operations."""
        return cls.success(message="deleted") if deleted else cls.key_not_found()

    @classmethod
    def cleared(cls, cleared: bool) -> "Response":
        """Create the response for CLEAR operations."""
        return cls.success(message="cleared") if cleared else cls.error("not cleared")

    @classmethod
    def key_not_found(cls) -> "Response":
        """Create a 'key not found' error response."""
        return cls.error(message="key not found")

    @classmethod
    def exists_response(cls, exists: bool) -> "Response":
        """Create an EXISTS response."""
        return cls.success(message="1" if exists else "0")

    @classmethod
    def value_response(cls, value: Union[str, bytes]) -> "Response":
        """Create a GET response with a value."""
        return cls.success(value=value)
