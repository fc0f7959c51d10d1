"""Configuration loading and persistence."""

from tracksplit.config.config import Config, ConfigError
from tracksplit.config.paths import default_config_path

__all__ = ["Config", "ConfigError", "default_config_path"]
