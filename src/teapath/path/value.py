"""
Summary: Immutable, normalized, always-absolute path value.
Why: Every other path component builds on one validated string representation.
"""

from __future__ import annotations

import os
import posixpath
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Self

from teapath.shared.errors import InvalidPathError

if TYPE_CHECKING:
    from teapath.path.path import Path

SEPARATOR = "/"


def normalize(raw: str) -> str:
    """Collapse ``.``, ``..`` and duplicate separators of an absolute path.

    Args:
        raw: Absolute POSIX path string.

    Returns:
        str: Canonical form; ``..`` above the root stays at the root.
    """
    normalized = posixpath.normpath(raw)
    # POSIX lets normpath keep a leading "//"; we never do.
    if normalized.startswith("//"):
        normalized = SEPARATOR + normalized.lstrip(SEPARATOR)
    return normalized


class PathValue(ABC):
    """Absolute filesystem path compared by exact string.

    Two values naming the same entry through different strings (a symlink and
    its target, differently cased names on case-insensitive filesystems) are
    not equal.
    """

    __slots__ = ("string",)

    string: str

    def __init__(self, input: str | os.PathLike[str] | PathValue) -> None:
        if isinstance(input, PathValue):
            string = input.string
        else:
            raw = os.fspath(input) if isinstance(input, os.PathLike) else input
            if not isinstance(raw, str) or not raw or raw[0] != SEPARATOR:
                raise InvalidPathError(f"invalid absolute path: {raw!r}", path=str(raw))
            string = normalize(raw)
        object.__setattr__(self, "string", string)

    @classmethod
    def abs(cls, input: str | os.PathLike[str] | PathValue) -> Self | None:
        """Construct like ``cls(input)`` but return ``None`` for invalid input."""

        try:
            return cls(input)
        except InvalidPathError:
            return None

    @abstractmethod
    def _derive(self, string: str) -> Path:
        """Build the value returned by derivations such as ``parent``."""

    def eq(self, that: PathValue) -> bool:
        return self.string == that.string

    def neq(self, that: PathValue) -> bool:
        return self.string != that.string

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathValue):
            return NotImplemented
        return self.string == other.string

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, PathValue):
            return NotImplemented
        return self.string != other.string

    def __hash__(self) -> int:
        return hash(self.string)

    def __str__(self) -> str:
        return self.string

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.string!r})"

    def __fspath__(self) -> str:
        return self.string


__all__ = ["PathValue", "SEPARATOR", "normalize"]
