"""PyQt6 desktop viewer for Lexiview."""
