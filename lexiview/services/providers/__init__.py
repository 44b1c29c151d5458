"""Dictionary client implementations."""

from .wiktionary_provider import WiktionaryClient, parse_lookup_result

__all__ = ["WiktionaryClient", "parse_lookup_result"]
