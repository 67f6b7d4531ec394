"""Configuration loading and well-known locations."""

from .config import Config, ConfigError
from .paths import default_config_path, default_prefix, resolve_overridable_path

__all__ = ["Config", "ConfigError", "default_config_path", "default_prefix", "resolve_overridable_path"]
