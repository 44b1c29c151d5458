"""Display surface protocol for output abstraction."""

from typing import Protocol

from lexiview.models import StyledSpan


class DisplaySurface(Protocol):
    """Interface for a read-only viewport that paints rendered documents.

    The surface paints spans top-to-bottom and forwards link activation
    and back/forward commands to a LookupSession. The same session logic
    works with the console, the Qt window or a test recorder.
    """

    def show_document(self, word: str, spans: list[StyledSpan]) -> None:
        """Paint a composed document, replacing whatever was shown before.

        Args:
            word: The word the document describes
            spans: Styled spans in display order
        """
        ...

    def show_info(self, message: str) -> None:
        """Display an informational message.

        Args:
            message: The informational message to display
        """
        ...

    def show_error(self, message: str) -> None:
        """Display an error message.

        Args:
            message: The error message to display
        """
        ...
