"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Configure handlers on the shared ``teapath`` logger on demand.
Why: Importing the library must not attach handlers; entry points opt in.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from typing import Final

from rich.console import Console

from teapath.path import Path

from .handlers import PathRichHandler

LOGGER_NAME: Final[str] = "teapath"

logger: Final[logging.Logger] = logging.getLogger(LOGGER_NAME)


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    console: Console | None = None,
) -> logging.Logger:
    """Set up and configure the package logger.

    Args:
        log_file: Path to the log file. If None, only console logging is enabled.
        console_level: Logging level for console output. Defaults to INFO.
        file_level: Logging level for file output. Defaults to DEBUG.
        console: Rich console to render to; stderr when omitted.

    Returns:
        logging.Logger: Configured logger instance.
    """
    logger.setLevel(logging.DEBUG)

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    file_formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    console_handler = PathRichHandler(console=console or Console(stderr=True, soft_wrap=True))
    console_handler.setLevel(console_level)
    logger.addHandler(console_handler)

    if log_file is not None:
        os.makedirs(log_file.parent().string, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file.string,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    return logger


__all__ = ["LOGGER_NAME", "logger", "setup_logger"]
