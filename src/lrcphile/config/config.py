"""Configuration management for lrcphile."""

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from lrcphile.config.paths import default_config_path
from lrcphile.platform.logging import logger


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

    # Directory scanned when no path is given on the command line
    music_dir: Path | None = _path_field()

    # Log file path
    log_file: Path | None = _path_field()

    # Lyrics database settings
    service_url: str | None = None
    concurrency_limit: int | None = None
    request_timeout: float | None = None

    _instance: ClassVar["Config | None"] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata.

        Only fields flagged with ``metadata={"path": True}`` by
        ``_path_field`` are converted; empty strings become ``None``.
        """
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                stripped = value.strip()
                setattr(self, f.name, Path(stripped).expanduser() if stripped else None)

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file.

        A missing file yields the defaults; loading never writes to disk.

        Args:
            config_file: Explicit file to read. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object.

        Raises:
            tomllib.TOMLDecodeError: If the file exists but is not valid TOML.
        """
        if cls._instance is not None and config_file is None:
            return cls._instance

        target = config_file or default_config_path()

        if not target.exists():
            logger.debug("No configuration file at %s; using defaults", target)
            instance = cls()
        else:
            try:
                with open(target, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.error("Failed to load configuration: %s", e)
                raise

            known = {f.name for f in fields(cls)}
            unknown = sorted(key for key in config_dict if key not in known)
            if unknown:
                logger.warning(
                    "Ignoring unknown configuration keys in %s: %s",
                    target,
                    ", ".join(unknown),
                )
            instance = cls(**{key: value for key, value in config_dict.items() if key in known})
            logger.debug("Configuration loaded from %s", target)

        if config_file is None:
            cls._instance = instance
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached configuration so the next load re-reads the file."""

        cls._instance = None


__all__ = ["Config"]
