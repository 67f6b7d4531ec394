"""Configuration management for teapath."""

from __future__ import annotations

import logging
import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar

from teapath.path import Path
from teapath.shared.errors import PathError

from .paths import ENV_PREFIX, from_user_input, default_config_path, default_prefix, resolve_overridable_path

logger = logging.getLogger("teapath")

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class ConfigError(Exception):
    """Raised when the configuration file cannot be parsed or validated."""


@dataclass(slots=True, frozen=True)
class Config:
    """Runtime configuration."""

    # Root of installed packages
    prefix: Path

    # Log file path (console only when unset)
    log_file: Path | None = None

    # Console log level name
    log_level: str = "INFO"

    _instance: ClassVar[Config | None] = None

    @property
    def console_level(self) -> int:
        return logging.getLevelNamesMapping()[self.log_level]

    @classmethod
    def load(cls, config_file: Path | None = None, env: Mapping[str, str] | None = None) -> Config:
        """Load configuration, caching the result.

        Args:
            config_file: TOML file to read. Defaults to ``default_config_path()``.
            env: Environment mapping; ``os.environ`` when omitted.

        Returns:
            Config: Loaded configuration; defaults when the file is absent.

        Raises:
            ConfigError: The file is not valid TOML or holds invalid values.
        """
        if cls._instance is not None:
            return cls._instance

        mapping = env if env is not None else os.environ
        source = config_file or default_config_path(mapping)
        raw = cls._read(source)

        instance = cls._from_mapping(raw, mapping)
        if raw:
            logger.debug("configuration loaded from %s", source)

        cls._instance = instance
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance so the next ``load`` rereads the file."""

        cls._instance = None

    @staticmethod
    def _read(source: Path) -> dict[str, Any]:
        try:
            if source.is_file() is None:
                return {}
            with open(source, "rb") as handle:
                return tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"invalid TOML in {source}: {exc}") from exc
        except (OSError, PathError) as exc:
            raise ConfigError(f"cannot read {source}: {exc}") from exc

    @classmethod
    def _from_mapping(cls, raw: Mapping[str, Any], env: Mapping[str, str]) -> Config:
        prefix_value = raw.get("prefix")
        log_file_value = raw.get("log_file")
        log_level = str(raw.get("log_level", "INFO")).upper()

        for key, value in (("prefix", prefix_value), ("log_file", log_file_value)):
            if value is not None and not isinstance(value, str):
                raise ConfigError(f"`{key}` must be a string")
        if log_level not in _LOG_LEVELS:
            raise ConfigError(f"unknown log_level: {log_level}")

        prefix = resolve_overridable_path(
            explicit_path=None,
            env=env,
            env_var=ENV_PREFIX,
            default_factory=lambda: from_user_input(prefix_value) if prefix_value else default_prefix(),
        )
        log_file = from_user_input(log_file_value) if log_file_value else None
        return cls(prefix=prefix, log_file=log_file, log_level=log_level)


__all__ = ["Config", "ConfigError"]
