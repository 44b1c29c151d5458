"""Null presenter for testing (no output)."""

from lexiview.models import StyledSpan


class NullPresenter:
    """Present output to nowhere (testing implementation)."""

    def show_document(self, word: str, spans: list[StyledSpan]) -> None:
        """Paint a composed document (no-op)."""
        pass

    def show_info(self, message: str) -> None:
        """Display an informational message (no-op)."""
        pass

    def show_error(self, message: str) -> None:
        """Display an error message (no-op)."""
        pass
