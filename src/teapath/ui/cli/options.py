"""Command line argument options."""

from dataclasses import dataclass
from typing import Literal, final

from teapath.path import Path


@final
@dataclass(slots=True)
class ListArgs:
    """Arguments for the ``ls`` and ``walk`` subcommands."""

    command: Literal["ls", "walk"]
    path: Path


@final
@dataclass(slots=True)
class RelativeArgs:
    """Arguments for the ``relative`` subcommand."""

    command: Literal["relative"]
    target: Path
    base: Path


@final
@dataclass(slots=True)
class InfoArgs:
    """Arguments for the ``info`` subcommand."""

    command: Literal["info"]
    path: Path


@final
@dataclass(slots=True)
class MktempArgs:
    """Arguments for the ``mktemp`` subcommand."""

    command: Literal["mktemp"]
    prefix: str | None
    dir: Path | None


@final
@dataclass(slots=True)
class HostArgs:
    command: Literal["host"]


CLIArgs = ListArgs | RelativeArgs | InfoArgs | MktempArgs | HostArgs

__all__ = ["CLIArgs", "HostArgs", "InfoArgs", "ListArgs", "MktempArgs", "RelativeArgs"]
