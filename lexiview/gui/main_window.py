"""Main application window."""

import logging

from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLineEdit,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from lexiview.config import LexiviewConfig
from lexiview.exceptions import LexiviewException
from lexiview.gui.presenters import GUIPresenter
from lexiview.gui.widgets import DefinitionView
from lexiview.models import LinkTarget, StyledSpan
from lexiview.orchestration import LookupSession
from lexiview.services import WiktionaryClient

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Window with a search box, back/forward buttons and a definition view.

    The window owns one LookupSession, and so one history.
    """

    def __init__(self, config: LexiviewConfig, parent=None):
        """Initialize the main window.

        Args:
            config: Configuration for lookups and language ordering
            parent: Optional parent widget
        """
        super().__init__(parent)
        self.config = config

        self.setWindowTitle("Lexiview")
        self.resize(720, 800)

        self.presenter = GUIPresenter(self)
        self.session = LookupSession(
            config=config,
            client=WiktionaryClient(
                api_url=config.definition_api_url,
                timeout=config.request_timeout,
                user_agent=config.user_agent,
            ),
            presenter=self.presenter,
        )

        self._setup_ui()
        self._connect_signals()
        self._update_navigation_buttons()

    def _setup_ui(self) -> None:
        """Set up the user interface."""
        central = QWidget()
        layout = QVBoxLayout()
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(8)

        toolbar = QHBoxLayout()
        self.back_button = QPushButton("Back")
        self.back_button.setToolTip("Previous entry (Alt+Left)")
        toolbar.addWidget(self.back_button)

        self.forward_button = QPushButton("Forward")
        self.forward_button.setToolTip("Next entry (Alt+Right)")
        toolbar.addWidget(self.forward_button)

        self.search_edit = QLineEdit()
        self.search_edit.setPlaceholderText("Look up a word...")
        self.search_edit.setClearButtonEnabled(True)
        toolbar.addWidget(self.search_edit, 1)

        self.search_button = QPushButton("Search")
        toolbar.addWidget(self.search_button)
        layout.addLayout(toolbar)

        self.view = DefinitionView()
        layout.addWidget(self.view, 1)

        central.setLayout(layout)
        self.setCentralWidget(central)
        self.statusBar().showMessage("Ready")

    def _connect_signals(self) -> None:
        """Wire widgets and presenter to the session."""
        self.search_edit.returnPressed.connect(self._on_search)
        self.search_button.clicked.connect(self._on_search)
        self.back_button.clicked.connect(self._on_back)
        self.forward_button.clicked.connect(self._on_forward)

        self.view.link_activated.connect(self._on_link_activated)
        self.view.back_requested.connect(self._on_back)
        self.view.forward_requested.connect(self._on_forward)

        self.presenter.document_signal.connect(self._on_document)
        self.presenter.info_signal.connect(self._on_info_message)
        self.presenter.error_signal.connect(self._on_error_message)

    def search(self, word: str) -> None:
        """Look up a word as if it had been typed into the search box."""
        self.search_edit.setText(word)
        self._on_search()

    def _on_search(self) -> None:
        word = self.search_edit.text()
        self._run(lambda: self.session.search(word))

    def _on_back(self) -> None:
        self._run(self.session.go_back)

    def _on_forward(self) -> None:
        self._run(self.session.go_forward)

    def _on_link_activated(self, target: LinkTarget) -> None:
        self._run(lambda: self.session.follow(target))

    def _run(self, action) -> None:
        """Run a navigation action; report failures and keep the current view."""
        try:
            action()
        except LexiviewException as e:
            logger.debug(f"Navigation failed: {e}")
            self.presenter.show_error(str(e))
        self._update_navigation_buttons()

    def _on_document(self, word: str, spans: list[StyledSpan]) -> None:
        self.view.show_spans(spans)
        self.search_edit.setText(word)
        self.setWindowTitle(f"{word} - Lexiview")
        self.statusBar().showMessage(f"Showing '{word}'")

    def _on_info_message(self, message: str) -> None:
        self.statusBar().showMessage(message)

    def _on_error_message(self, message: str) -> None:
        self.statusBar().showMessage(f"Error: {message}")

    def _update_navigation_buttons(self) -> None:
        history = self.session.history
        self.back_button.setEnabled(history.can_go_back)
        self.forward_button.setEnabled(history.can_go_forward)
