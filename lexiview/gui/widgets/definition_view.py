"""Read-only view that paints styled spans and reports link clicks."""

from urllib.parse import quote, unquote

from PyQt6.QtCore import Qt, QUrl, pyqtSignal
from PyQt6.QtGui import QColor, QFont, QTextCharFormat, QTextCursor
from PyQt6.QtWidgets import QTextBrowser

from lexiview.models import SELF_LINK, LinkTarget, Style, StyledSpan

LINK_COLOR = "#2a6fdb"


class DefinitionView(QTextBrowser):
    """Display surface for composed documents.

    Link clicks emit ``link_activated`` with the span's link target
    instead of opening a URL. Alt+Left or Backspace emits
    ``back_requested``; Alt+Right emits ``forward_requested``.
    """

    SELF_HREF = "lexiview:self"
    WORD_PREFIX = "lexiview:word/"

    TITLE_POINT_SIZE = 20
    HEADING_POINT_SIZE = 15

    link_activated = pyqtSignal(object)  # LinkTarget
    back_requested = pyqtSignal()
    forward_requested = pyqtSignal()

    def __init__(self, parent=None):
        """Initialize the view.

        Args:
            parent: Optional parent widget
        """
        super().__init__(parent)
        self.setReadOnly(True)
        self.setOpenLinks(False)
        self.setOpenExternalLinks(False)
        self.anchorClicked.connect(self._on_anchor_clicked)

    def show_spans(self, spans: list[StyledSpan]) -> None:
        """Replace the view's content with the given spans."""
        self.clear()
        cursor = QTextCursor(self.document())
        for span in spans:
            cursor.insertText(span.text, self.char_format(span))
        self.moveCursor(QTextCursor.MoveOperation.Start)

    @classmethod
    def char_format(cls, span: StyledSpan) -> QTextCharFormat:
        """Build the character format for a span."""
        fmt = QTextCharFormat()
        if span.style & Style.BOLD:
            fmt.setFontWeight(QFont.Weight.Bold)
        if span.style & Style.ITALIC:
            fmt.setFontItalic(True)
        if span.style & Style.UNDERLINE:
            fmt.setFontUnderline(True)
        if span.style & Style.TITLE:
            fmt.setFontPointSize(cls.TITLE_POINT_SIZE)
        elif span.style & Style.HEADING:
            fmt.setFontPointSize(cls.HEADING_POINT_SIZE)
        if span.link_target is not None:
            fmt.setAnchor(True)
            fmt.setAnchorHref(cls.href_for(span.link_target))
            fmt.setForeground(QColor(LINK_COLOR))
            fmt.setFontUnderline(True)
        return fmt

    @classmethod
    def href_for(cls, target: LinkTarget) -> str:
        """Encode a link target as an href."""
        if target is SELF_LINK:
            return cls.SELF_HREF
        return cls.WORD_PREFIX + quote(target, safe="")

    @classmethod
    def target_for(cls, href: str) -> LinkTarget | None:
        """Decode an href produced by href_for, or None if it is foreign."""
        if href == cls.SELF_HREF:
            return SELF_LINK
        if href.startswith(cls.WORD_PREFIX):
            word = unquote(href[len(cls.WORD_PREFIX) :])
            return word or None
        return None

    def _on_anchor_clicked(self, url: QUrl) -> None:
        target = self.target_for(bytes(url.toEncoded()).decode("ascii"))
        if target is not None:
            self.link_activated.emit(target)

    def keyPressEvent(self, event) -> None:
        """Map navigation keys to back/forward signals."""
        key = event.key()
        alt = bool(event.modifiers() & Qt.KeyboardModifier.AltModifier)
        if key == Qt.Key.Key_Backspace or (alt and key == Qt.Key.Key_Left):
            self.back_requested.emit()
        elif alt and key == Qt.Key.Key_Right:
            self.forward_requested.emit()
        else:
            super().keyPressEvent(event)
