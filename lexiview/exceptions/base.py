"""Base exception classes for Lexiview."""


class LexiviewException(Exception):
    """Base exception for all Lexiview errors.

    All custom exceptions in the lexiview package should inherit
    from this base class for consistent error handling.
    """

    pass


class ConfigError(LexiviewException):
    """Raised when the configuration file cannot be written."""

    pass
