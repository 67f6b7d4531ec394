"""
Summary: State-changing filesystem operations with explicit overwrite policies.
Why: Centralize move/copy/remove/write semantics so callers never guess idempotence.
"""

from __future__ import annotations

import errno
import json as jsonlib
import logging
import os
import shutil
from typing import TYPE_CHECKING, Any, Self

from teapath.shared.errors import AlreadyExistsError, UnexpectedOSError

from .oscall import os_call
from .value import PathValue
from .walking import WalkerMixin

if TYPE_CHECKING:
    from .path import Path

logger = logging.getLogger("teapath")


class MutatorMixin(WalkerMixin):
    """Mutating operations. OS failures surface as ``UnexpectedOSError``."""

    __slots__ = ()

    def _occupied(self) -> bool:
        # a dangling symlink still occupies its name
        return self.exists() is not None or self.is_symlink() is not None

    def mv(
        self,
        *,
        to: PathValue | None = None,
        into: PathValue | None = None,
        force: bool = False,
    ) -> Path:
        """Move this entry.

        Args:
            to: Exact destination path.
            into: Destination directory; the entry keeps its basename.
            force: Remove an existing destination first. The removal and the
                rename are two separate calls, so a crash in between loses
                the destination without the source having moved.

        Returns:
            Path: The destination.

        Raises:
            ValueError: Neither or both of ``to`` and ``into`` were given.
            AlreadyExistsError: The destination exists and ``force`` is unset.
        """
        if to is not None and into is None:
            destination = self._derive(to.string)
        elif into is not None and to is None:
            destination = self._derive(into.string).join(self.basename())
        else:
            raise ValueError("mv() takes exactly one of `to` or `into`")

        if destination._occupied():
            if not force:
                raise AlreadyExistsError(f"file exists: {destination}", path=destination.string)
            with os_call("unlink", destination.string):
                os.unlink(destination.string)

        with os_call("rename", self.string):
            os.rename(self.string, destination.string)
        logger.debug("moved %s -> %s", self, destination)
        return destination

    def cp(self, *, into: PathValue) -> Path:
        """Copy file content and permission bits into ``into``, overwriting."""

        destination = self._derive(into.string).join(self.basename())
        with os_call("copy", self.string):
            _ = shutil.copy(self.string, destination.string)
        logger.debug("copied %s -> %s", self, destination)
        return destination

    def rm(self, *, recursive: bool = False) -> None:
        """Remove this entry; does nothing when there is nothing to remove.

        Directories are removed with ``rmdir`` (so they must be empty) unless
        ``recursive`` is set. Symlinks are removed, never their targets.
        """
        if not self._occupied():
            return
        with os_call("remove", self.string):
            if self.is_symlink() is None and self.is_directory() is not None:
                if recursive:
                    shutil.rmtree(self.string)
                else:
                    os.rmdir(self.string)
            else:
                os.unlink(self.string)
        logger.debug("removed %s", self)

    def mkdir(self, *, parents: bool = False) -> Self:
        """Create this directory; a no-op when it already is one.

        Args:
            parents: Create missing ancestors too. Without it a missing
                parent raises ``UnexpectedOSError``.
        """
        if self.is_directory() is not None:
            return self
        with os_call("mkdir", self.string):
            if parents:
                os.makedirs(self.string, exist_ok=True)
            else:
                os.mkdir(self.string)
        logger.debug("created directory %s", self)
        return self

    def write(
        self,
        *,
        text: str | None = None,
        json: Any = None,
        indent: int | None = None,
        force: bool = False,
    ) -> Self:
        """Write ``text``, or ``json`` serialized with ``indent``, to this file.

        Raises:
            ValueError: Neither or both of ``text`` and ``json`` were given.
            AlreadyExistsError: The file exists and ``force`` is unset.
            UnexpectedOSError: This path is a directory.
        """
        if (text is None) == (json is None):
            raise ValueError("write() takes exactly one of `text` or `json`")
        if self._occupied():
            if not force:
                raise AlreadyExistsError(f"file exists: {self}", path=self.string)
            if self.is_symlink() is None and self.is_directory() is not None:
                raise UnexpectedOSError(
                    f"write: is a directory: {self}", path=self.string, errno=errno.EISDIR
                )
            self.rm()
        content = text if text is not None else jsonlib.dumps(json, indent=indent)
        with os_call("write", self.string):
            with open(self.string, "w", encoding="utf-8") as handle:
                _ = handle.write(content)
        logger.debug("wrote %d characters to %s", len(content), self)
        return self

    def touch(self) -> Self:
        """Create an empty file, replacing whatever file was there."""

        return self.write(text="", force=True)

    def chmod(self, mode: int) -> Self:
        with os_call("chmod", self.string):
            os.chmod(self.string, mode)
        return self

    def symlink(self, *, to: PathValue) -> Path:
        """Create a symlink at ``to`` that points at this path.

        Returns:
            Path: The new link, ``to``.
        """
        link = self._derive(to.string)
        with os_call("symlink", link.string):
            os.symlink(self.string, link.string)
        logger.debug("linked %s -> %s", link, self)
        return link


__all__ = ["MutatorMixin"]
