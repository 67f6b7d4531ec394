"""
Summary: Async whole-file and line-oriented reads.
Why: File reads are suspension points; blocking I/O runs off the event loop.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from typing import IO

from .mutation import MutatorMixin
from .oscall import os_call


class ContentMixin(MutatorMixin):
    __slots__ = ()

    def _read_text(self) -> str:
        with os_call("read", self.string, missing_is_not_found=True):
            with open(self.string, encoding="utf-8") as handle:
                return handle.read()

    def _open(self) -> IO[str]:
        with os_call("open", self.string, missing_is_not_found=True):
            return open(self.string, encoding="utf-8", newline=None)

    def _readline(self, handle: IO[str]) -> str:
        with os_call("read", self.string):
            return handle.readline()

    async def read(self) -> str:
        """Return the whole file decoded as UTF-8.

        Raises:
            NotFoundError: The file does not exist.
        """
        return await asyncio.to_thread(self._read_text)

    async def read_lines(self) -> AsyncIterator[str]:
        """Yield each line without its line terminator.

        The file is closed once iteration finishes or the generator is closed.
        """
        handle = await asyncio.to_thread(self._open)
        try:
            while line := await asyncio.to_thread(self._readline, handle):
                yield line.removesuffix("\n")
        finally:
            handle.close()


__all__ = ["ContentMixin"]
