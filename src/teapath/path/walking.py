"""
Summary: Lazy single-level listing and depth-first traversal of directories.
Why: Callers stream entries without holding more than one directory handle open.
"""

from __future__ import annotations

import asyncio
import os
from collections.abc import AsyncIterator, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from .inspection import InspectorMixin
from .oscall import is_missing, os_call

if TYPE_CHECKING:
    from .path import Path

DirectoryKey = tuple[int, int]


class EntryKind(str, Enum):
    """Entry type as reported by the OS, without following the final symlink."""

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"


@dataclass(slots=True, frozen=True)
class DirEntry:
    """A child path paired with its entry kind."""

    path: Path
    kind: EntryKind

    def is_file(self) -> bool:
        return self.kind is EntryKind.FILE

    def is_directory(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    def is_symlink(self) -> bool:
        return self.kind is EntryKind.SYMLINK


def _classify(entry: os.DirEntry[str]) -> EntryKind:
    if entry.is_symlink():
        return EntryKind.SYMLINK
    if entry.is_dir(follow_symlinks=False):
        return EntryKind.DIRECTORY
    if entry.is_file(follow_symlinks=False):
        return EntryKind.FILE
    return EntryKind.OTHER


class _Scanner:
    """One open directory handle producing ``DirEntry`` values.

    ``next_entry`` also reports the identity of child directories (symlinked
    ones included) so the walker can decide whether to expand them.
    """

    def __init__(self, directory: Path) -> None:
        self.directory = directory
        with os_call("scandir", directory.string):
            self._handle = os.scandir(directory.string)

    def next_entry(self) -> tuple[DirEntry, DirectoryKey | None] | None:
        with os_call("scandir", self.directory.string):
            raw = next(self._handle, None)
            if raw is None:
                return None
            kind = _classify(raw)
            key = _expandable_key(raw)
        return DirEntry(path=self.directory.join(raw.name), kind=kind), key

    def close(self) -> None:
        self._handle.close()


def _expandable_key(entry: os.DirEntry[str]) -> DirectoryKey | None:
    """Identity of the directory behind ``entry``, or None if it is not one."""

    try:
        if not entry.is_dir():
            return None
        info = entry.stat()
    except OSError as exc:
        # broken or self-referencing symlinks
        if is_missing(exc):
            return None
        raise
    return info.st_dev, info.st_ino


def _directory_key(directory: Path) -> DirectoryKey:
    with os_call("stat", directory.string):
        info = os.stat(directory.string)
    return info.st_dev, info.st_ino


def _should_expand(entry: DirEntry, key: DirectoryKey | None, visited: set[DirectoryKey]) -> bool:
    """Decide whether the walker descends into ``entry`` and record its key.

    Real directories occur once in a tree and are always expanded. A
    symlinked directory is expanded only when its target has not been seen,
    which bounds the walk when links form cycles.
    """
    if key is None:
        return False
    if entry.kind is EntryKind.DIRECTORY:
        visited.add(key)
        return True
    if key in visited:
        return False
    visited.add(key)
    return True


class WalkerMixin(InspectorMixin):
    """Directory iteration.

    Sync generators release their handle on exhaustion, on ``close()`` and
    when garbage collected. For the async variants, wrap the iterator in
    ``contextlib.aclosing`` when breaking out early to release the handle
    immediately rather than at event-loop shutdown.
    """

    __slots__ = ()

    def ls(self) -> Iterator[DirEntry]:
        """Yield one entry per child; re-reads the directory on every call."""

        scanner = _Scanner(self._derive(self.string))
        try:
            while (item := scanner.next_entry()) is not None:
                yield item[0]
        finally:
            scanner.close()

    def walk(self) -> Iterator[DirEntry]:
        """Depth-first traversal yielding every descendant, never this path.

        All children of a directory are yielded before any of them is
        expanded. Real directories are always expanded. Directories reached
        through symlinks are expanded too, unless their target was already
        seen during this walk, so symlink cycles terminate.
        """
        root = self._derive(self.string)
        visited: set[DirectoryKey] = {_directory_key(root)}
        stack: list[Path] = [root]
        while stack:
            scanner = _Scanner(stack.pop())
            try:
                while (item := scanner.next_entry()) is not None:
                    entry, key = item
                    yield entry
                    if _should_expand(entry, key, visited):
                        stack.append(entry.path)
            finally:
                scanner.close()

    async def als(self) -> AsyncIterator[DirEntry]:
        """Async ``ls``; directory reads run in a worker thread."""

        scanner = await asyncio.to_thread(_Scanner, self._derive(self.string))
        try:
            while (item := await asyncio.to_thread(scanner.next_entry)) is not None:
                yield item[0]
        finally:
            scanner.close()

    async def awalk(self) -> AsyncIterator[DirEntry]:
        """Async ``walk`` with the same ordering and cycle handling."""

        root = self._derive(self.string)
        visited: set[DirectoryKey] = {await asyncio.to_thread(_directory_key, root)}
        stack: list[Path] = [root]
        while stack:
            scanner = await asyncio.to_thread(_Scanner, stack.pop())
            try:
                while (item := await asyncio.to_thread(scanner.next_entry)) is not None:
                    entry, key = item
                    yield entry
                    if _should_expand(entry, key, visited):
                        stack.append(entry.path)
            finally:
                scanner.close()


__all__ = ["DirEntry", "EntryKind", "WalkerMixin"]
