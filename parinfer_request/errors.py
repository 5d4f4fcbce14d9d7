"""Exception types raised while turning process input into a request.

Every failure in this package is recoverable: callers get one of these and
decide how to report it and which exit code to use.
"""

from __future__ import annotations

from typing import Any


class RequestError(RuntimeError):
    """Base class for all request construction failures."""


class ArgumentError(RequestError):
    """Unknown flag, missing flag value or stray positional argument."""


class InvalidValueError(RequestError):
    def __init__(self, field: str, value: str, reason: str | None = None) -> None:
        message = f"invalid value for {field}: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.field = field
        self.value = value


class MissingEnvError(RequestError):
    def __init__(self, variable: str) -> None:
        super().__init__(f"required environment variable {variable} is not set")
        self.variable = variable


class InputReadError(RequestError):
    """Standard input could not be read to completion."""


class RequestDecodeError(RequestError):
    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []
