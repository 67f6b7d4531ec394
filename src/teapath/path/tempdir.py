"""
Summary: Creation of uniquely named temporary directories.
Why: Delegate uniqueness to the OS while keeping Path in and out.
"""

from __future__ import annotations

import logging
import os
import tempfile
from typing import TYPE_CHECKING

from .oscall import os_call

if TYPE_CHECKING:
    from .path import Path

logger = logging.getLogger("teapath")


def make_temp_directory(*, prefix: str | None = None, dir: Path | None = None) -> str:
    """Create a temporary directory and return its absolute path string.

    Args:
        prefix: Leading part of the generated directory name.
        dir: Parent directory, created with its ancestors if missing.
            Defaults to the system temporary directory.

    Returns:
        str: Absolute path of the created directory.
    """
    parent: str | None = None
    if dir is not None:
        parent = dir.mkdir(parents=True).string
    with os_call("mkdtemp", parent or tempfile.gettempdir()):
        created = tempfile.mkdtemp(prefix=prefix, dir=parent)
    created = os.path.abspath(created)
    logger.debug("created temporary directory %s", created)
    return created


__all__ = ["make_temp_directory"]
