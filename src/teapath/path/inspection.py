"""
Summary: Read-only filesystem queries returning the path itself or None.
Why: Chainable lookups like ``path.is_file() or fallback`` read better than bools.
"""

from __future__ import annotations

import errno as errno_codes
import os
import stat
from typing import TYPE_CHECKING, Self

from .navigation import NavigatorMixin
from .oscall import is_missing, translate

if TYPE_CHECKING:
    from .path import Path

_ANY_EXECUTE_BIT = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


class InspectorMixin(NavigatorMixin):
    """Queries against the live filesystem.

    Missing entries (including dangling symlinks and non-directory parents)
    yield ``None``. Any other OS failure, such as permission denied, raises
    ``UnexpectedOSError`` so it is never mistaken for absence.
    """

    __slots__ = ()

    def _stat(self, *, follow_symlinks: bool = True) -> os.stat_result | None:
        try:
            return os.stat(self.string, follow_symlinks=follow_symlinks)
        except OSError as exc:
            if is_missing(exc):
                return None
            raise translate(exc, operation="stat", path=self.string) from exc

    def exists(self) -> Self | None:
        return self if self._stat() is not None else None

    def is_file(self) -> Self | None:
        """Return ``self`` if this names a regular file, following symlinks."""

        info = self._stat()
        if info is not None and stat.S_ISREG(info.st_mode):
            return self
        return None

    def is_directory(self) -> Self | None:
        """Return ``self`` if this names a directory, following symlinks."""

        info = self._stat()
        if info is not None and stat.S_ISDIR(info.st_mode):
            return self
        return None

    def is_symlink(self) -> Self | None:
        """Return ``self`` if the entry itself is a symlink (not resolved)."""

        info = self._stat(follow_symlinks=False)
        if info is not None and stat.S_ISLNK(info.st_mode):
            return self
        return None

    def is_executable_file(self) -> Self | None:
        """Return ``self`` for regular files with any execute bit set."""

        info = self._stat()
        if info is None or not stat.S_ISREG(info.st_mode):
            return None
        return self if info.st_mode & _ANY_EXECUTE_BIT else None

    def is_readable_file(self) -> Self | None:
        # no access(2) check; a file that exists is assumed readable
        return self.is_file()

    def is_empty(self) -> Self | None:
        """Return ``self`` for an existing directory with no entries."""

        try:
            with os.scandir(self.string) as entries:
                for _ in entries:
                    return None
        except OSError as exc:
            if is_missing(exc):
                return None
            raise translate(exc, operation="scandir", path=self.string) from exc
        return self

    def compact(self) -> Self | None:
        return self.exists()

    def readlink(self) -> Path:
        """Resolve one symlink hop on the final path component.

        Symlinks in earlier components are left alone and the result may
        itself be a symlink. A dangling symlink still resolves to its
        destination.

        Returns:
            Path: The link destination (relative targets are joined onto
            ``parent()``), or this path when the entry is not a symlink.

        Raises:
            NotFoundError: Nothing exists at this path.
            UnexpectedOSError: Any other OS failure.
        """
        try:
            target = os.readlink(self.string)
        except OSError as exc:
            if exc.errno == errno_codes.EINVAL:
                # present, but not a symlink
                return self._derive(self.string)
            raise translate(
                exc,
                operation="readlink",
                path=self.string,
                missing_is_not_found=True,
            ) from exc
        return self.parent().join(target)

    def realpath(self) -> Path:
        """Fully resolve every symlink via the OS.

        Raises:
            NotFoundError: Some component along the way does not exist.
        """
        try:
            resolved = os.path.realpath(self.string, strict=True)
        except OSError as exc:
            raise translate(
                exc,
                operation="realpath",
                path=self.string,
                missing_is_not_found=True,
            ) from exc
        return self._derive(resolved)


__all__ = ["InspectorMixin"]
