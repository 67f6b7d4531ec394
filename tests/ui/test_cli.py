"""Tests for CLI functionality."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from io import StringIO

import pytest
from pytest_mock import MockerFixture
from rich.console import Console

from teapath import Path
from teapath.platform.host import Host
from teapath.ui.cli import CommandProcessor


@pytest.fixture
def output() -> StringIO:
    return StringIO()


@pytest.fixture
def processor(output: StringIO) -> Iterator[CommandProcessor]:
    """Create a processor that renders into ``output``.

    Yields:
        CommandProcessor: Processor with an in-memory console.
    """
    yield CommandProcessor(console=Console(file=output, width=200))
    logger = logging.getLogger("teapath")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()


def _lines(output: StringIO) -> list[str]:
    return output.getvalue().splitlines()


def test_ls_prints_children(processor: CommandProcessor, output: StringIO, root: Path) -> None:
    _ = root.join("sub").mkdir()
    _ = root.join("file.txt").touch()

    assert processor.process_command(["ls", root.string]) == 0
    assert sorted(_lines(output)) == ["file.txt", "sub/"]


def test_walk_prints_descendants(processor: CommandProcessor, output: StringIO, root: Path) -> None:
    _ = root.join("sub", "deeper").mkdir(parents=True)
    _ = root.join("sub", "deeper", "leaf").touch()

    assert processor.process_command(["walk", root.string]) == 0
    assert sorted(_lines(output)) == ["sub/", "sub/deeper/", "sub/deeper/leaf"]


def test_relative_resolves_arguments_against_cwd(
    processor: CommandProcessor, output: StringIO, root: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(root.string)

    assert processor.process_command(["relative", "a/b/c.txt", "--to", "a/x/y"]) == 0
    assert _lines(output) == ["../../b/c.txt"]


def test_relative_of_equal_paths_prints_dot(processor: CommandProcessor, output: StringIO, root: Path) -> None:
    assert processor.process_command(["relative", root.string, "--to", root.string]) == 0
    assert _lines(output) == ["."]


def test_info_reports_symlink_target(processor: CommandProcessor, output: StringIO, root: Path) -> None:
    target = root.join("archive.tar.gz").touch()
    link = target.symlink(to=root.join("link"))

    assert processor.process_command(["info", link.string]) == 0

    lines = _lines(output)
    assert "  symlink: yes" in lines
    assert "  file: yes" in lines
    assert f"  target: {target}" in lines


def test_mktemp_creates_directory(processor: CommandProcessor, output: StringIO, root: Path) -> None:
    parent = root.join("tmp")

    assert processor.process_command(["mktemp", "--prefix", "cli-", "--dir", parent.string]) == 0

    created = Path(_lines(output)[0])
    assert created.parent() == parent
    assert created.is_directory() == created


def test_host_prints_target(processor: CommandProcessor, output: StringIO, mocker: MockerFixture) -> None:
    _ = mocker.patch("teapath.ui.cli.cli.host", return_value=Host(platform="linux", arch="aarch64"))

    assert processor.process_command(["host"]) == 0
    assert _lines(output) == ["linux-aarch64"]


def test_path_errors_exit_with_code_one(
    processor: CommandProcessor, root: Path, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.ERROR, logger="teapath")

    assert processor.process_command(["ls", root.join("missing").string]) == 1
    assert any("teapath-006" in message for message in caplog.messages)


def test_keyboard_interrupt_exits_130(processor: CommandProcessor, mocker: MockerFixture, root: Path) -> None:
    _ = mocker.patch.object(CommandProcessor, "_dispatch", side_effect=KeyboardInterrupt)

    assert processor.process_command(["ls", root.string]) == 130
