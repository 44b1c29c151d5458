"""GUI presenter implementation using Qt signals."""

from PyQt6.QtCore import QObject, pyqtSignal

from lexiview.models import StyledSpan


class GUIPresenter(QObject):
    """Presenter that forwards output to the window through Qt signals.

    Implements DisplaySurface through structural subtyping (duck typing).
    This avoids metaclass conflicts between QObject and Protocol metaclasses.
    """

    document_signal = pyqtSignal(str, list)  # word, list[StyledSpan]
    info_signal = pyqtSignal(str)
    error_signal = pyqtSignal(str)

    def __init__(self, parent=None):
        """Initialize the GUI presenter.

        Args:
            parent: Optional parent QObject
        """
        super().__init__(parent)

    def show_document(self, word: str, spans: list[StyledSpan]) -> None:
        """Paint a composed document.

        Args:
            word: The word the document describes
            spans: Styled spans in display order
        """
        self.document_signal.emit(word, spans)

    def show_info(self, message: str) -> None:
        """Display an informational message.

        Args:
            message: The informational message to display
        """
        self.info_signal.emit(message)

    def show_error(self, message: str) -> None:
        """Display an error message.

        Args:
            message: The error message to display
        """
        self.error_signal.emit(message)
