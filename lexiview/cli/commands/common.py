"""Setup shared by the lookup commands."""

from dataclasses import replace
from pathlib import Path

from lexiview.config import ConfigManager, LexiviewConfig
from lexiview.interfaces import DisplaySurface
from lexiview.orchestration import LookupSession
from lexiview.services import WiktionaryClient


def load_config(args) -> LexiviewConfig:
    """Load the stored config and apply command-line overrides.

    Args:
        args: Parsed command-line arguments

    Returns:
        Configuration for this invocation
    """
    path = Path(args.config) if getattr(args, "config", None) else None
    config = ConfigManager.load_config(path)

    overrides = {}
    if getattr(args, "languages", None):
        overrides["language_priority_list"] = [
            language.strip() for language in args.languages.split(",") if language.strip()
        ]
    if getattr(args, "only_listed", False):
        overrides["show_unlisted_languages"] = False

    return replace(config, **overrides)


def create_session(config: LexiviewConfig, presenter: DisplaySurface) -> LookupSession:
    """Create a lookup session backed by the Wiktionary client."""
    client = WiktionaryClient(
        api_url=config.definition_api_url,
        timeout=config.request_timeout,
        user_agent=config.user_agent,
    )
    return LookupSession(config=config, client=client, presenter=presenter)
