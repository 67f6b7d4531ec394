"""Shared path utilities for configuration locations.

Policy:
- Config: ``$XDG_CONFIG_HOME/teapath/config.toml``, falling back to
  ``~/.config/teapath/config.toml``.
- Prefix: ``~/.tea`` unless overridden by ``TEA_PREFIX`` or the config file.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from typing import Final

from teapath.path import Path

ENV_PREFIX: Final[str] = "TEA_PREFIX"
ENV_CONFIG_HOME: Final[str] = "XDG_CONFIG_HOME"


def from_user_input(raw: str | os.PathLike[str]) -> Path:
    """Turn a user-supplied location into an absolute ``Path``.

    ``~`` expands to the home directory and relative input is taken relative
    to the current working directory.
    """
    expanded = os.path.expanduser(os.fspath(raw))
    if os.path.isabs(expanded):
        return Path(expanded)
    return Path.cwd().join(expanded)


def resolve_overridable_path(
    *,
    explicit_path: str | os.PathLike[str] | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a location honoring explicit and environment overrides."""

    if explicit_path is not None and os.fspath(explicit_path).strip():
        return from_user_input(explicit_path)

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = (mapping.get(env_var) or "").strip()
        if candidate:
            return from_user_input(candidate)

    return default_factory()


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the path of the TOML config file."""

    config_home = resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=ENV_CONFIG_HOME,
        default_factory=lambda: Path.home().join(".config"),
    )
    return config_home.join("teapath", "config.toml")


def default_prefix() -> Path:
    return Path.home().join(".tea")


__all__ = [
    "ENV_CONFIG_HOME",
    "ENV_PREFIX",
    "default_config_path",
    "from_user_input",
    "default_prefix",
    "resolve_overridable_path",
]
