"""Configuration persistence manager."""

import json
import logging
from dataclasses import asdict, fields
from pathlib import Path
from typing import Any

from lexiview.exceptions import ConfigError

from .config import LexiviewConfig, create_default_config

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manager for configuration persistence.

    Saves and loads the user configuration to/from a JSON file in the
    user's home directory. Falls back to the default configuration if the
    file doesn't exist or is invalid.
    """

    CONFIG_FILE = Path.home() / ".lexiview" / "config.json"

    @classmethod
    def save_config(cls, config: LexiviewConfig, path: Path | None = None) -> None:
        """Save configuration to JSON file.

        Args:
            config: Configuration to save
            path: Optional file path (defaults to CONFIG_FILE)

        Raises:
            ConfigError: If unable to create directory or write file
        """
        target = path or cls.CONFIG_FILE
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with target.open("w", encoding="utf-8") as f:
                json.dump(asdict(config), f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Could not write config file {target}: {e}") from e

    @classmethod
    def load_config(cls, path: Path | None = None) -> LexiviewConfig:
        """Load configuration from JSON file.

        Args:
            path: Optional file path (defaults to CONFIG_FILE)

        Returns:
            Loaded configuration, or default configuration if file doesn't exist

        Note:
            If the file exists but is invalid, falls back to default configuration
            and logs a warning.
        """
        source = path or cls.CONFIG_FILE
        if not source.exists():
            return create_default_config()

        try:
            with source.open("r", encoding="utf-8") as f:
                config_dict = json.load(f)

            if not isinstance(config_dict, dict):
                raise ValueError("top-level JSON value is not an object")

            return LexiviewConfig(**cls._known_fields(config_dict))

        except (json.JSONDecodeError, TypeError, ValueError) as e:
            logger.warning(f"Invalid config file, using defaults: {e}")
            return create_default_config()

    @classmethod
    def config_exists(cls, path: Path | None = None) -> bool:
        """Check if configuration file exists."""
        return (path or cls.CONFIG_FILE).exists()

    @classmethod
    def delete_config(cls, path: Path | None = None) -> None:
        """Delete the configuration file.

        This forces the application to use default configuration on next load.
        """
        target = path or cls.CONFIG_FILE
        if target.exists():
            target.unlink()

    @staticmethod
    def _known_fields(data: dict[str, Any]) -> dict[str, Any]:
        """Drop keys that are not LexiviewConfig fields."""
        names = {f.name for f in fields(LexiviewConfig)}
        unknown = sorted(set(data) - names)
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {', '.join(unknown)}")
        return {key: value for key, value in data.items() if key in names}
