"""Configuration classes for Lexiview."""

from dataclasses import dataclass, field

from lexiview import __version__


@dataclass(frozen=True)
class LexiviewConfig:
    """Immutable configuration for dictionary lookups and rendering.

    The core only ever reads this object; loading and saving it is the
    job of ConfigManager.
    """

    # Lookup settings
    definition_api_url: str = "https://en.wiktionary.org/api/rest_v1/page/definition"
    request_timeout: float = 10.0  # Seconds before an HTTP lookup gives up
    user_agent: str = f"lexiview/{__version__}"

    # Language ordering settings
    language_priority_list: list[str] = field(default_factory=list)
    show_unlisted_languages: bool = True

    def __post_init__(self):
        """Normalise field types passed in from JSON or the command line."""
        if isinstance(self.language_priority_list, str):
            object.__setattr__(self, "language_priority_list", [self.language_priority_list])
        elif not isinstance(self.language_priority_list, list):
            object.__setattr__(self, "language_priority_list", list(self.language_priority_list))
        if isinstance(self.request_timeout, int):
            object.__setattr__(self, "request_timeout", float(self.request_timeout))


def create_default_config(**overrides) -> LexiviewConfig:
    """Create a default configuration, replacing any fields given as keywords."""
    return LexiviewConfig(**overrides)
