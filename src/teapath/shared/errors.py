"""
Summary: Closed error taxonomy raised by path operations.
Why: Callers branch on a stable kind instead of parsing OS messages.
"""

from __future__ import annotations

from enum import Enum
from typing import ClassVar, NoReturn


class ErrorKind(str, Enum):
    """Stable identifiers for every failure the path layer can raise."""

    INVALID_PATH = "invalid-path"
    NOT_FOUND = "not-found"
    ALREADY_EXISTS = "already-exists"
    UNEXPECTED_OS_FAILURE = "unexpected-os-failure"


# starting at 3 to stay clear of shell-reserved exit codes
_CODES: dict[ErrorKind, str] = {
    ErrorKind.INVALID_PATH: "teapath-003",
    ErrorKind.NOT_FOUND: "teapath-004",
    ErrorKind.ALREADY_EXISTS: "teapath-005",
    ErrorKind.UNEXPECTED_OS_FAILURE: "teapath-006",
}


class PathError(Exception):
    """Base class for all path failures.

    Attributes:
        kind: Tag identifying the failure family.
        path: String form of the path the operation targeted, if any.
        errno: OS error number when the failure originated in an OS call.
    """

    kind: ClassVar[ErrorKind]

    def __init__(self, message: str, *, path: str | None = None, errno: int | None = None) -> None:
        super().__init__(message)
        self.path = path
        self.errno = errno

    def code(self) -> str:
        """Return the stable user-facing code for this failure."""

        return _CODES[self.kind]

    def title(self) -> str:
        if self.path is None:
            return self.kind.value
        return f"{self.kind.value}: {self.path}"


class InvalidPathError(PathError, ValueError):
    """Input was empty or not an absolute path."""

    kind = ErrorKind.INVALID_PATH


class NotFoundError(PathError):
    """No filesystem entry exists where one was required."""

    kind = ErrorKind.NOT_FOUND


class AlreadyExistsError(PathError):
    """Destination exists and the caller did not ask to overwrite it."""

    kind = ErrorKind.ALREADY_EXISTS


class UnexpectedOSError(PathError):
    """Any other OS-level failure."""

    kind = ErrorKind.UNEXPECTED_OS_FAILURE


def panic(message: str | None = None) -> NoReturn:
    """Raise a ``RuntimeError`` for states that should be unreachable."""

    raise RuntimeError(message or "panic")


__all__ = [
    "AlreadyExistsError",
    "ErrorKind",
    "InvalidPathError",
    "NotFoundError",
    "PathError",
    "UnexpectedOSError",
    "panic",
]
