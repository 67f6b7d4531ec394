"""Install prefix: the root every package is installed beneath."""

from __future__ import annotations

import os

from teapath.config import Config
from teapath.path import Path


class Prefix(Path):
    """A ``Path`` naming the install prefix, with well-known subdirectories."""

    __slots__ = ("www",)

    www: Path

    def __init__(self, prefix: str | os.PathLike[str] | Path) -> None:
        super().__init__(prefix)
        object.__setattr__(self, "www", self.join("tea.xyz", "var", "www"))


def use_prefix(config: Config | None = None) -> Prefix:
    """Return the configured prefix."""

    return Prefix((config or Config.load()).prefix)


__all__ = ["Prefix", "use_prefix"]
