"""
Summary: Single boundary where OSError is converted into tagged path errors.
Why: Downstream code matches on error kinds, never on OS messages.
"""

from __future__ import annotations

import errno as errno_codes
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Final

from teapath.shared.errors import NotFoundError, PathError, UnexpectedOSError

# errnos meaning "nothing usable lives at this path"
MISSING_ERRNOS: Final[frozenset[int]] = frozenset(
    {
        errno_codes.ENOENT,
        errno_codes.ENOTDIR,
        errno_codes.ELOOP,
        errno_codes.ENAMETOOLONG,
    }
)


def is_missing(exc: OSError) -> bool:
    """Return whether ``exc`` reports that the entry does not exist."""

    return exc.errno in MISSING_ERRNOS


def translate(exc: OSError, *, operation: str, path: str, missing_is_not_found: bool = False) -> PathError:
    """Convert ``exc`` into the matching ``PathError``.

    Args:
        exc: Error raised by the OS call.
        operation: Short name of the attempted operation, used in the message.
        path: Path the operation targeted.
        missing_is_not_found: Map missing-entry errnos to ``NotFoundError``
            instead of ``UnexpectedOSError``.

    Returns:
        PathError: Tagged error carrying the original errno.
    """
    reason = exc.strerror or exc.__class__.__name__
    message = f"{operation} failed for {path}: {reason}"
    if missing_is_not_found and is_missing(exc):
        return NotFoundError(message, path=path, errno=exc.errno)
    return UnexpectedOSError(message, path=path, errno=exc.errno)


@contextmanager
def os_call(operation: str, path: str, *, missing_is_not_found: bool = False) -> Iterator[None]:
    """Run the enclosed OS calls, re-raising any ``OSError`` as a ``PathError``."""

    try:
        yield
    except OSError as exc:
        raise translate(
            exc,
            operation=operation,
            path=path,
            missing_is_not_found=missing_is_not_found,
        ) from exc


__all__ = ["MISSING_ERRNOS", "is_missing", "os_call", "translate"]
