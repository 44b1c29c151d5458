"""Console presenter for CLI output."""

from lexiview.models import LinkTarget, Style, StyledSpan


class ConsolePresenter:
    """Present documents to the console as plain text (CLI implementation).

    Every link is followed by a ``[n]`` marker; ``links`` holds the
    targets of the last document so the interactive CLI can follow link n.
    """

    def __init__(self, show_link_numbers: bool = True):
        """Initialize the presenter.

        Args:
            show_link_numbers: Whether to print ``[n]`` after each link
        """
        self.show_link_numbers = show_link_numbers
        self.links: list[LinkTarget] = []

    def show_document(self, word: str, spans: list[StyledSpan]) -> None:
        """Print a composed document."""
        lines, self.links = self.format_document(spans, self.show_link_numbers)
        print("\n".join(lines))

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        print(message)

    def show_error(self, message: str) -> None:
        """Display an error message."""
        print(f"[ERROR] {message}")

    def link_at(self, number: int) -> LinkTarget | None:
        """Return the target of link ``[number]`` (1-based), or None."""
        if 1 <= number <= len(self.links):
            return self.links[number - 1]
        return None

    @staticmethod
    def format_document(
        spans: list[StyledSpan], show_link_numbers: bool = True
    ) -> tuple[list[str], list[LinkTarget]]:
        """Lay spans out as console lines.

        The title is underlined with ``=`` and language headings with ``-``.

        Args:
            spans: Spans in display order
            show_link_numbers: Whether to append ``[n]`` to links

        Returns:
            Tuple of (lines, link targets in marker order)
        """
        lines: list[str] = []
        links: list[LinkTarget] = []
        line = ""
        underline = ""

        for span in spans:
            parts = span.text.split("\n")
            for i, part in enumerate(parts):
                if i > 0:
                    lines.append(line)
                    if underline and line:
                        lines.append(underline * len(line))
                    line = ""
                    underline = ""
                line += part

            if span.style & Style.TITLE:
                underline = "="
            elif span.style & Style.HEADING:
                underline = "-"

            if span.link_target is not None:
                links.append(span.link_target)
                if show_link_numbers:
                    line += f"[{len(links)}]"

        if line:
            lines.append(line)
        return lines, links
