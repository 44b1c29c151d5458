"""Command-line interface for Lexiview."""
