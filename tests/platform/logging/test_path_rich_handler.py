"""Tests for the ``PathRichHandler`` path formatting utilities."""

from __future__ import annotations

import logging
from io import StringIO
from typing import Any

import pytest
from rich.console import Console
from rich.text import Text

from teapath import Path
from teapath.platform.logging import PathRichHandler, setup_logger


def _make_handler() -> PathRichHandler:
    """Create a handler instance with an in-memory console."""

    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return PathRichHandler(console=console)


def _build_record(level: int = logging.INFO, **extras: Any) -> logging.LogRecord:
    record = logging.LogRecord(
        name="teapath",
        level=level,
        pathname="test",
        lineno=0,
        msg="",
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_home_directory_renders_as_tilde() -> None:
    handler = _make_handler()
    source = Path.home().join("projects", "tea")

    rendered = handler.render_message(_build_record(), f"moved {source} -> /opt/tea")
    assert isinstance(rendered, Text)

    assert rendered.plain == "moved ~/projects/tea -> /opt/tea"


def test_deep_paths_are_truncated() -> None:
    handler = _make_handler()

    rendered = handler.render_message(_build_record(), "removed /a/b/c/d/e/f.txt")
    assert isinstance(rendered, Text)

    assert rendered.plain == "removed /…/c/d/e/f.txt"


def test_extra_path_and_level_prefix() -> None:
    handler = _make_handler()
    record = _build_record(level=logging.ERROR, path="/srv/data")

    rendered = handler.render_message(record, "write failed")
    assert isinstance(rendered, Text)

    assert rendered.plain == "error: write failed @ /srv/data"


def test_non_path_slashes_are_left_alone() -> None:
    handler = _make_handler()

    rendered = handler.render_message(_build_record(), "ratio 3/4 and ~/x")
    assert isinstance(rendered, Text)

    assert rendered.plain == "ratio 3/4 and ~/x"


def test_setup_logger_attaches_console_and_file_handlers(root: Path) -> None:
    log_file = root.join("logs", "teapath.log")
    console = Console(file=StringIO())

    logger = setup_logger(log_file=log_file, console_level=logging.WARNING, console=console)
    try:
        logger.debug("debug goes to the file only")
        for handler in logger.handlers:
            handler.flush()

        assert [type(handler).__name__ for handler in logger.handlers] == [
            "PathRichHandler",
            "RotatingFileHandler",
        ]
        assert log_file.is_file() == log_file
        with open(log_file, encoding="utf-8") as handle:
            assert "debug goes to the file only" in handle.read()
    finally:
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()


@pytest.fixture(autouse=True)
def _restore_logger_level() -> Any:
    logger = logging.getLogger("teapath")
    level = logger.level
    yield None
    logger.setLevel(level)
