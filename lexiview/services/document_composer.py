"""Compose a full rendered document for a word entry."""

from collections.abc import Iterable

from lexiview.models import LinkTarget, Sense, Style, StyledSpan, WordEntry
from lexiview.services.markup_renderer import MarkupRenderer, trim_trailing_blank

NEWLINE = StyledSpan("\n")


class DocumentComposer:
    """Lay out a WordEntry as a sequence of styled spans.

    The document is the title, then for each language group a heading
    followed by numbered senses and their bulleted examples. Language
    groups are expected to be ordered already.
    """

    EXAMPLE_BULLET = "    • "

    def __init__(self, renderer: MarkupRenderer | None = None):
        """Initialize the composer.

        Args:
            renderer: Renderer for definition and example fragments
        """
        self.renderer = renderer or MarkupRenderer()

    def compose(self, entry: WordEntry) -> list[StyledSpan]:
        """Compose the document for an entry.

        Args:
            entry: Aggregated entry, groups in display order

        Returns:
            Styled spans to paint top-to-bottom
        """
        spans = [StyledSpan(entry.word, Style.TITLE | Style.BOLD), NEWLINE, NEWLINE]

        for group in entry.language_groups:
            spans.append(StyledSpan(group.language, Style.HEADING | Style.BOLD))
            spans.append(NEWLINE)

            # Numbering restarts per language
            for number, sense in enumerate(group.senses, 1):
                spans.extend(self._compose_sense(number, sense))
                spans.append(NEWLINE)

            spans.append(NEWLINE)

        return spans

    def _compose_sense(self, number: int, sense: Sense) -> list[StyledSpan]:
        spans = [
            StyledSpan(f"{number}. ", Style.BOLD),
            StyledSpan(sense.part_of_speech, Style.ITALIC),
        ]
        if sense.gender:
            spans.append(StyledSpan(f" ({sense.gender})", Style.ITALIC))
        spans.append(StyledSpan(": "))
        self.renderer.render(sense.definition_markup, spans)
        _end_line(spans)

        for example in sense.examples:
            spans.append(StyledSpan(self.EXAMPLE_BULLET))
            self.renderer.render(example, spans)
            _end_line(spans)

        return spans


def _end_line(spans: list[StyledSpan]) -> None:
    trim_trailing_blank(spans)
    spans.append(NEWLINE)


def plain_text(spans: Iterable[StyledSpan]) -> str:
    """Concatenate span text, dropping all styling."""
    return "".join(span.text for span in spans)


def link_targets(spans: Iterable[StyledSpan]) -> list[LinkTarget]:
    """List the link targets of all link spans in display order."""
    return [span.link_target for span in spans if span.link_target is not None]
