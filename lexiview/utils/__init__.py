"""Utility functions for Lexiview."""

from .text_utils import WHITESPACE, BLANKS, collapse_whitespace, ends_with_blank

__all__ = ["WHITESPACE", "BLANKS", "collapse_whitespace", "ends_with_blank"]
