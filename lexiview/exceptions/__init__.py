"""Custom exceptions for Lexiview."""

from .base import ConfigError, LexiviewException
from .lookup import WordLookupError
from .navigation import NavigationDirection, NoHistoryError

__all__ = [
    "LexiviewException",
    "ConfigError",
    "WordLookupError",
    "NoHistoryError",
    "NavigationDirection",
]
