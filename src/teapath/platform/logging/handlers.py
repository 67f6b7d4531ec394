"""Rich console handler that renders filesystem paths compactly.

Where: platform/logging/handlers.py
What: Collapse the home directory to ``~``, truncate deep paths and colour separators.
Why: Keep log lines about filesystem mutations readable in narrow terminals.
"""

from __future__ import annotations

import logging
import re
from typing import Any, ClassVar

from typing_extensions import override

from rich.console import ConsoleRenderable
from rich.style import Style
from rich.text import Text
from rich.logging import RichHandler

from teapath.path import Path
from teapath.shared.errors import PathError


class PathRichHandler(RichHandler):
    """Rich handler that styles absolute paths found in log messages."""

    _PATH_PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"(?<![\w~.])/[^\s:;,'\"()]*")
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4
    _LEVEL_STYLES: ClassVar[dict[int, str]] = {
        logging.WARNING: "yellow",
        logging.ERROR: "red",
        logging.CRITICAL: "bold red",
    }

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with compact defaults.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        # paths may contain "[" which markup would swallow
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    def format_path(self, raw_path: str) -> Text:
        """Format an absolute path string for display.

        Args:
            raw_path: Path as it appeared in the message.

        Returns:
            Text: ``~``-collapsed, truncated and styled path.
        """
        path = Path.abs(raw_path)
        if path is None:
            return Text(raw_path)

        try:
            display = path.pretty_string()
        except PathError:
            display = path.string

        anchor = "~/" if display.startswith("~/") else "/"
        body_parts = [part for part in display.removeprefix(anchor).split("/") if part]
        if display == "~":
            anchor, body_parts = "~", []

        if len(body_parts) > self._PATH_SEGMENT_LIMIT:
            body_parts = ["…", *body_parts[-self._PATH_SEGMENT_LIMIT:]]
        return self._style_path_string(anchor + "/".join(body_parts))

    @staticmethod
    def _style_path_string(path_string: str) -> Text:
        text = Text()
        for char in path_string:
            if char in {"/", "…", "~"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render ``message`` with every absolute path styled."""

        text = Text()
        level_color = self._LEVEL_STYLES.get(record.levelno)
        if level_color is not None:
            _ = text.append(f"{record.levelname.lower()}: ", style=Style.parse(level_color))

        cursor = 0
        for match in self._PATH_PATTERN.finditer(message):
            _ = text.append(message[cursor:match.start()])
            _ = text.append_text(self.format_path(match.group(0)))
            cursor = match.end()
        _ = text.append(message[cursor:])

        extra_path = getattr(record, "path", None)
        if extra_path is not None:
            _ = text.append(" @ ")
            _ = text.append_text(self.format_path(str(extra_path)))
        return text


__all__ = ["PathRichHandler"]
