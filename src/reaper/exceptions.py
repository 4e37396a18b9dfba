"""Reaper client exceptions.

All exceptions inherit from ReaperError for easy catching. Each carries
the name of the operation that raised it and an ErrorKind.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Broad classification of a failure."""

    OTHER = "other"
    INVALID = "invalid operation"
    IO = "I/O error"


class ReaperError(Exception):
    """Base exception for all Reaper client errors."""

    kind: ErrorKind = ErrorKind.OTHER

    def __init__(self, message: str, *, op: str = "", response: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.op = op
        self.response = response

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, op={self.op!r})"


class ConfigurationError(ReaperError):
    """Missing or invalid client configuration.

    Usually the reaper host: pass --host or set REAPER_HOST.
    """

    kind = ErrorKind.INVALID


class ValidationError(ReaperError, ValueError):
    """A flag value is missing or could not be parsed."""

    kind = ErrorKind.INVALID


class TransportError(ReaperError):
    """The request never got a response (connection refused, DNS, timeout)."""

    kind = ErrorKind.IO

    def __init__(self, op: str, cause: Exception) -> None:
        super().__init__(str(cause) or cause.__class__.__name__, op=op)
        self.cause = cause


class ServerRejectedError(ReaperError):
    """The server answered with an unexpected status code.

    The message is the raw response body.
    """

    kind = ErrorKind.IO

    def __init__(self, op: str, status_code: int, body: str, *, response: Any = None) -> None:
        super().__init__(body or f"HTTP {status_code}", op=op, response=response)
        self.status_code = status_code
        self.body = body


class DecodeError(ReaperError):
    """The response body is not the JSON shape we expected."""

    kind = ErrorKind.IO

    def __init__(self, op: str, cause: Exception, *, response: Any = None) -> None:
        super().__init__(f"malformed server response: {cause}", op=op, response=response)
        self.cause = cause
