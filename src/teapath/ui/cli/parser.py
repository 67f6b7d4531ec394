"""Command line argument parser."""

import argparse
import logging
from collections.abc import Sequence
from typing import final

from teapath.config import Config
from teapath.config.paths import from_user_input
from teapath.platform.logging import setup_logger
from teapath.ui.cli.options import CLIArgs, HostArgs, InfoArgs, ListArgs, MktempArgs, RelativeArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="teapath",
            description="Inspect and traverse filesystem paths.",
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument("--verbose", action="store_true", help="Show debug output")
        _ = verbosity.add_argument("--quiet", action="store_true", help="Only show errors")

        subparsers = parser.add_subparsers(dest="command", required=True)

        ls_parser = subparsers.add_parser("ls", help="List the direct children of a directory")
        _ = ls_parser.add_argument("path", metavar="PATH")

        walk_parser = subparsers.add_parser("walk", help="List every descendant of a directory")
        _ = walk_parser.add_argument("path", metavar="PATH")

        relative_parser = subparsers.add_parser("relative", help="Print TARGET relative to BASE")
        _ = relative_parser.add_argument("target", metavar="TARGET")
        _ = relative_parser.add_argument("--to", dest="base", metavar="BASE", help="Defaults to the cwd")

        info_parser = subparsers.add_parser("info", help="Describe a filesystem entry")
        _ = info_parser.add_argument("path", metavar="PATH")

        mktemp_parser = subparsers.add_parser("mktemp", help="Create a temporary directory")
        _ = mktemp_parser.add_argument("--prefix", help="Directory name prefix")
        _ = mktemp_parser.add_argument("--dir", help="Parent directory, created if missing")

        _ = subparsers.add_parser("host", help="Print the platform-architecture target")

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments and configure logging.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Typed arguments for the selected subcommand.
        """
        parsed_args = ArgumentParser.create_parser().parse_args(args_list)

        configuration = Config.load()
        if parsed_args.quiet:
            console_level = logging.ERROR
        elif parsed_args.verbose:
            console_level = logging.DEBUG
        else:
            console_level = configuration.console_level
        _ = setup_logger(log_file=configuration.log_file, console_level=console_level)

        command: str = parsed_args.command
        if command in {"ls", "walk"}:
            return ListArgs(command=command, path=from_user_input(parsed_args.path))  # type: ignore[arg-type]
        if command == "relative":
            base = from_user_input(parsed_args.base) if parsed_args.base else from_user_input(".")
            return RelativeArgs(command="relative", target=from_user_input(parsed_args.target), base=base)
        if command == "info":
            return InfoArgs(command="info", path=from_user_input(parsed_args.path))
        if command == "mktemp":
            directory = from_user_input(parsed_args.dir) if parsed_args.dir else None
            return MktempArgs(command="mktemp", prefix=parsed_args.prefix, dir=directory)
        return HostArgs(command="host")


__all__ = ["ArgumentParser"]
