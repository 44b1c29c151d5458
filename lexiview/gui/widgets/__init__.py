"""Widgets for the Lexiview window."""

from .definition_view import DefinitionView

__all__ = ["DefinitionView"]
