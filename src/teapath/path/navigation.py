"""
Summary: Pure path algebra over PathValue (parent, join, split, relative).
Why: Keep string-only derivations apart from anything that touches the disk.
"""

from __future__ import annotations

import posixpath
import re
from typing import TYPE_CHECKING, Final

from .value import SEPARATOR, PathValue

if TYPE_CHECKING:
    from .path import Path

_COMPOUND_EXTENSION: Final[re.Pattern[str]] = re.compile(r"\.tar\.\w+$")


class NavigatorMixin(PathValue):
    """Derivations that never consult the filesystem."""

    __slots__ = ()

    def parent(self) -> Path:
        """Return the parent directory; the root is its own parent."""

        return self._derive(posixpath.dirname(self.string))

    def join(self, *components: str) -> Path:
        """Join ``components`` onto this path and normalize the result.

        Falsy components are skipped. An absolute component discards
        everything accumulated before it, since joining an absolute path
        onto another is usually a bug in the calling code.

        Returns:
            Path: The joined path, or ``self`` when nothing was joined.
        """
        joined = self.string
        touched = False
        for component in components:
            if not component:
                continue
            touched = True
            if component.startswith(SEPARATOR):
                joined = component
            else:
                joined = f"{joined}{SEPARATOR}{component}"
        if not touched:
            return self._derive(self.string)
        return self._derive(joined)

    def __truediv__(self, component: str) -> Path:
        return self.join(component)

    def split(self) -> tuple[Path, str]:
        return self.parent(), self.basename()

    def basename(self) -> str:
        return posixpath.basename(self.string)

    def extname(self) -> str:
        """Return the file extension including its leading period.

        ``.tar.<ext>`` archives report the compound suffix.
        """
        match = _COMPOUND_EXTENSION.search(self.string)
        if match:
            return match.group(0)
        return posixpath.splitext(self.string)[1]

    def components(self) -> list[str]:
        return [part for part in self.string.split(SEPARATOR) if part]

    def relative(self, *, to: NavigatorMixin) -> str:
        """Compute the relative path that leads from ``to`` to this path.

        Args:
            to: Base directory the result is relative to.

        Returns:
            str: ``/``-joined components; empty when both paths are equal.

        Example:
            ``Path("/tmp/a/b/c.txt").relative(to=Path("/tmp/a/x/y"))`` is
            ``"../../b/c.txt"``.
        """
        path_parts = [SEPARATOR, *self.components()]
        base_parts = [SEPARATOR, *to.components()]

        if _is_within(self.string, to.string):
            return SEPARATOR.join(path_parts[len(base_parts):])

        common = 0
        for ours, theirs in zip(path_parts, base_parts):
            if ours != theirs:
                break
            common += 1

        rel_parts = [".."] * (len(base_parts) - common)
        rel_parts.extend(path_parts[common:])
        return SEPARATOR.join(rel_parts)


def _is_within(path: str, base: str) -> bool:
    # component-wise prefix: "/tmp/ab" is not within "/tmp/a"
    if base == SEPARATOR or path == base:
        return True
    return path.startswith(base + SEPARATOR)


__all__ = ["NavigatorMixin"]
