"""Command line interface for teapath."""

from __future__ import annotations

from collections.abc import Sequence
from typing import final

from rich.console import Console

from teapath.config import ConfigError
from teapath.path import DirEntry, Path
from teapath.platform.host import UnsupportedArchitectureError, host
from teapath.platform.logging import logger
from teapath.shared.errors import PathError
from teapath.ui.cli.options import CLIArgs, HostArgs, InfoArgs, ListArgs, MktempArgs, RelativeArgs
from teapath.ui.cli.parser import ArgumentParser


@final
class CommandProcessor:
    """Run one parsed subcommand and report its outcome."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def process_command(self, args_list: Sequence[str] | None = None) -> int:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            int: Process exit code.
        """
        try:
            args = ArgumentParser.process_args(args_list)
            self._dispatch(args)
            return 0
        except KeyboardInterrupt:
            logger.info("operation cancelled by user")
            return 130
        except PathError as exc:
            logger.error("%s (%s)", exc, exc.code())
            return 1
        except (ConfigError, UnsupportedArchitectureError) as exc:
            logger.error("%s", exc)
            return 1

    def _dispatch(self, args: CLIArgs) -> None:
        if isinstance(args, ListArgs):
            entries = args.path.ls() if args.command == "ls" else args.path.walk()
            for entry in entries:
                self._print_entry(entry, base=args.path)
        elif isinstance(args, RelativeArgs):
            self.console.print(args.target.relative(to=args.base) or ".", highlight=False)
        elif isinstance(args, InfoArgs):
            self._print_info(args.path)
        elif isinstance(args, MktempArgs):
            self.console.print(Path.mktemp(prefix=args.prefix, dir=args.dir).string, highlight=False)
        else:
            assert isinstance(args, HostArgs)
            self.console.print(host().target, highlight=False)

    def _print_entry(self, entry: DirEntry, *, base: Path) -> None:
        suffix = "/" if entry.is_directory() else ""
        self.console.print(f"{entry.path.relative(to=base)}{suffix}", highlight=False, markup=False)

    def _print_info(self, path: Path) -> None:
        checks = {
            "exists": path.exists(),
            "file": path.is_file(),
            "directory": path.is_directory(),
            "symlink": path.is_symlink(),
            "executable": path.is_executable_file(),
        }
        self.console.print(path.pretty_local_string(), highlight=False, markup=False)
        for label, result in checks.items():
            self.console.print(f"  {label}: {'yes' if result is not None else 'no'}", highlight=False)
        if path.extname():
            self.console.print(f"  extension: {path.extname()}", highlight=False, markup=False)
        if checks["symlink"] is not None:
            self.console.print(f"  target: {path.readlink()}", highlight=False, markup=False)


def main(args_list: Sequence[str] | None = None) -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success).
    """
    return CommandProcessor().process_command(args_list)


__all__ = ["CommandProcessor", "main"]
