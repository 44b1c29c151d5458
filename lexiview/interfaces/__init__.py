"""Interface protocols for Lexiview."""

from .definition_client import DefinitionClient
from .display_surface import DisplaySurface

__all__ = ["DefinitionClient", "DisplaySurface"]
