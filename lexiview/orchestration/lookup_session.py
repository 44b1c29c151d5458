"""Orchestrator for lookups and navigation on one display surface."""

from __future__ import annotations

import logging
from dataclasses import replace

from lexiview.config import LexiviewConfig
from lexiview.exceptions import WordLookupError
from lexiview.interfaces import DefinitionClient, DisplaySurface
from lexiview.models import HistoryState, LinkTarget, StyledSpan, WordEntry
from lexiview.services import (
    DocumentComposer,
    EntryAggregator,
    HistoryNavigator,
    LanguageOrderPolicy,
)

logger = logging.getLogger(__name__)


class LookupSession:
    """Coordinate lookup, aggregation, ordering, history and display.

    One session belongs to one display surface and owns that surface's
    history. Every successful transition composes the current entry and
    hands it to the surface; failures propagate to the caller and leave
    the history untouched.
    """

    def __init__(
        self,
        config: LexiviewConfig,
        client: DefinitionClient,
        presenter: DisplaySurface,
        aggregator: EntryAggregator | None = None,
        composer: DocumentComposer | None = None,
        state: HistoryState | None = None,
    ):
        """Initialize the lookup session.

        Args:
            config: Configuration
            client: Dictionary lookup client
            presenter: Display surface that paints documents
            aggregator: Optional entry aggregator
            composer: Optional document composer
            state: Optional existing history
        """
        self.config = config
        self.client = client
        self.presenter = presenter
        self.aggregator = aggregator or EntryAggregator()
        self.composer = composer or DocumentComposer()
        self.policy = LanguageOrderPolicy.from_config(config)
        self.navigator = HistoryNavigator(self.lookup, state=state, on_change=self._display)

    @property
    def history(self) -> HistoryState:
        return self.navigator.state

    @property
    def current(self) -> WordEntry | None:
        return self.navigator.current

    def lookup(self, word: str) -> WordEntry:
        """Fetch, aggregate and order the entry for a word without touching history.

        Raises:
            WordLookupError: If the lookup fails
        """
        records = self.client.fetch_definition(word)
        entry = self.aggregator.aggregate(word, records)
        ordered = self.policy.apply(entry.language_groups)
        logger.debug(f"Looked up {entry.word}: {len(ordered)} language(s) shown")
        return replace(entry, language_groups=tuple(ordered))

    def search(self, word: str) -> WordEntry:
        """Look up a word typed by the user and load it.

        Raises:
            WordLookupError: If the word is blank or the lookup fails
        """
        word = word.strip()
        if not word:
            raise WordLookupError(word, transport_message="nothing to look up")
        return self.navigator.navigate(word)

    def follow(self, target: LinkTarget) -> WordEntry | None:
        """Follow a link target from the displayed document."""
        return self.navigator.navigate(target)

    def go_back(self) -> WordEntry:
        """Show the previous entry.

        Raises:
            NoHistoryError: If there is nothing to go back to
        """
        return self.navigator.back()

    def go_forward(self) -> WordEntry:
        """Show the next entry.

        Raises:
            NoHistoryError: If there is nothing to go forward to
        """
        return self.navigator.forward()

    def current_document(self) -> list[StyledSpan]:
        """Compose the current entry, or return [] if nothing is loaded."""
        if self.current is None:
            return []
        return self.composer.compose(self.current)

    def _display(self, entry: WordEntry) -> None:
        """Paint the new current entry.

        History has already moved when this runs, so a surface failure is
        reported rather than raised.
        """
        try:
            self.presenter.show_document(entry.word, self.composer.compose(entry))
        except Exception as e:
            logger.error(f"Could not display {entry.word!r}: {e}")
            self.presenter.show_error(f"Could not display '{entry.word}': {e}")
