# Where: teapath.shared.__init__
# What: Provide a concise import surface for error types and value helpers.
# Why: Encourage consistent reuse of shared helpers across the package.

"""Shared cross-cutting utilities exposed at the package level."""

from .errors import (
    AlreadyExistsError,
    ErrorKind,
    InvalidPathError,
    NotFoundError,
    PathError,
    UnexpectedOSError,
    panic,
)
from .misc import chuzzle, compact, flatmap, swallow, uniq

__all__ = [
    "AlreadyExistsError",
    "ErrorKind",
    "InvalidPathError",
    "NotFoundError",
    "PathError",
    "UnexpectedOSError",
    "chuzzle",
    "compact",
    "flatmap",
    "panic",
    "swallow",
    "uniq",
]
