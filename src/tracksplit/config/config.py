"""Configuration management for tracksplit."""

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from tracksplit.config.paths import default_config_path
from tracksplit.platform.logging import logger

FFMPEG_BINARY_DEFAULT = "ffmpeg"
EYED3_BINARY_DEFAULT = "eyeD3"
TAGGER_DEFAULT = "eyed3"


class ConfigError(Exception):
    """Raised when the configuration file cannot be parsed."""


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Rotating log file; console-only logging when unset
    log_file: Path | None = _path_field()

    # External collaborators
    ffmpeg_binary: str = FFMPEG_BINARY_DEFAULT
    eyed3_binary: str = EYED3_BINARY_DEFAULT

    # Tagging backend: "eyed3" (child process) or "mutagen" (in-process)
    tagger: str = TAGGER_DEFAULT

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "Config":
        """Build a configuration from parsed TOML, ignoring unknown keys."""

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))

        values = {key: value for key, value in data.items() if key in known}
        for key in ("log_file", "ffmpeg_binary", "eyed3_binary", "tagger"):
            if key in values and not isinstance(values[key], str):
                raise ConfigError(f"{key} must be a string")
        return cls(**values)

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file.

        A missing file yields the defaults; nothing is written.

        Args:
            config_file: Explicit file to read. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object.

        Raises:
            ConfigError: If the file exists but is not valid TOML.
        """
        if cls._instance is not None and config_file in (None, cls._loaded_from):
            return cls._instance

        source = config_file or default_config_path()

        if source.exists():
            try:
                with open(source, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.error("Failed to load configuration: %s", e)
                raise ConfigError(f"invalid configuration file {source}: {e}") from e

            instance = cls.from_mapping(config_dict)
            logger.debug("Configuration loaded from %s", source)
        else:
            instance = cls()
            logger.debug("No configuration file at %s; using defaults", source)

        cls._instance = instance
        cls._loaded_from = source
        return instance


__all__ = [
    "Config",
    "ConfigError",
    "EYED3_BINARY_DEFAULT",
    "FFMPEG_BINARY_DEFAULT",
    "TAGGER_DEFAULT",
]
