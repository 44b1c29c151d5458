"""Configuration management for Lexiview."""

from .config import LexiviewConfig, create_default_config
from .config_manager import ConfigManager

__all__ = ["LexiviewConfig", "ConfigManager", "create_default_config"]
