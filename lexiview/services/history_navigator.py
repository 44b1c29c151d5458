"""Back/forward navigation over looked-up word entries."""

import logging
from collections.abc import Callable

from lexiview.exceptions import NavigationDirection, NoHistoryError
from lexiview.models import SELF_LINK, HistoryState, LinkTarget, WordEntry

logger = logging.getLogger(__name__)


class HistoryNavigator:
    """State machine over a HistoryState.

    The navigator starts Empty (no current entry) and becomes Loaded on
    the first load. Back and forward replay previously loaded entries
    verbatim; only navigate() to a word performs a lookup.
    """

    def __init__(
        self,
        fetch_entry: Callable[[str], WordEntry],
        state: HistoryState | None = None,
        on_change: Callable[[WordEntry], None] | None = None,
    ):
        """Initialize the navigator.

        Args:
            fetch_entry: Looks up a word and returns its entry; may raise
                WordLookupError
            state: Existing history to continue from (a new one if omitted)
            on_change: Called with the new current entry after every
                successful transition, once the state has been updated
        """
        self.fetch_entry = fetch_entry
        self.state = state if state is not None else HistoryState()
        self.on_change = on_change

    @property
    def current(self) -> WordEntry | None:
        return self.state.current

    def load(self, entry: WordEntry) -> WordEntry:
        """Make entry current, pushing the previous current onto the back stack.

        Loading always clears the forward stack.
        """
        state = self.state
        if state.current is not None:
            state.back.append(state.current)
        state.current = entry
        state.forward.clear()
        logger.debug(f"Loaded {entry.word} (back={len(state.back)})")
        return self._changed()

    def back(self) -> WordEntry:
        """Return to the previous entry.

        Raises:
            NoHistoryError: If the back stack is empty
        """
        state = self.state
        if not state.back:
            raise NoHistoryError(NavigationDirection.BACK)
        state.forward.append(state.current)
        state.current = state.back.pop()
        logger.debug(f"Back to {state.current.word}")
        return self._changed()

    def forward(self) -> WordEntry:
        """Return to the entry left by the last back().

        Raises:
            NoHistoryError: If the forward stack is empty
        """
        state = self.state
        if not state.forward:
            raise NoHistoryError(NavigationDirection.FORWARD)
        state.back.append(state.current)
        state.current = state.forward.pop()
        logger.debug(f"Forward to {state.current.word}")
        return self._changed()

    def navigate(self, target: LinkTarget) -> WordEntry | None:
        """Follow a link target.

        A self link reloads the current entry without a lookup; any other
        target is looked up and loaded. A failed lookup leaves the history
        untouched.

        Args:
            target: Link target from a rendered span, or a word

        Returns:
            The new current entry, or None for a self link with nothing loaded

        Raises:
            WordLookupError: If the lookup fails
        """
        if target is SELF_LINK:
            if self.state.current is None:
                logger.debug("Ignoring self link: nothing loaded")
                return None
            return self.load(self.state.current)

        return self.load(self.fetch_entry(target))

    def _changed(self) -> WordEntry:
        current = self.state.current
        if self.on_change is not None:
            self.on_change(current)
        return current
