"""Render markup fragments into styled text spans."""

from dataclasses import dataclass, replace

from lexiview.models import (
    SELF_LINK,
    ElementNode,
    LinkTarget,
    MarkupNode,
    Style,
    StyledSpan,
    Tag,
    TextNode,
)
from lexiview.services.markup_parser import parse_fragment
from lexiview.utils.text_utils import BLANKS, WHITESPACE, collapse_whitespace, ends_with_blank

_TAG_STYLES = {
    Tag.BOLD: Style.BOLD,
    Tag.ITALIC: Style.ITALIC,
    Tag.UNDERLINE: Style.UNDERLINE,
}


@dataclass(frozen=True)
class StyleContext:
    """Formatting inherited by a subtree during rendering.

    Never modified in place; each element derives a new context for its
    children.
    """

    style: Style = Style.NONE
    link_target: LinkTarget | None = None

    def with_style(self, flag: Style) -> "StyleContext":
        return replace(self, style=self.style | flag)

    def with_link(self, target: LinkTarget) -> "StyleContext":
        return replace(self, style=self.style | Style.LINK, link_target=target)

    def span(self, text: str) -> StyledSpan:
        return StyledSpan(text, self.style, self.link_target)


class MarkupRenderer:
    """Turn markup fragments into an ordered list of styled spans (stateless service)."""

    SELF_LINK_CLASSES = frozenset({"selflink", "mw-selflink"})
    LINK_ATTRIBUTE = "title"

    def render(
        self, fragment: str, output: list[StyledSpan] | None = None
    ) -> list[StyledSpan]:
        """Render a markup fragment.

        Args:
            fragment: HTML-like snippet
            output: Spans laid out before the fragment. New spans are appended
                to it and whitespace is normalised across the join.

        Returns:
            Spans in display order (output itself when given); nothing is
            added if the fragment is empty or cannot be parsed
        """
        if output is None:
            output = []
        root = parse_fragment(fragment)
        if root is None:
            return output
        return self.render_node(root, output=output)

    def render_node(
        self,
        node: MarkupNode,
        context: StyleContext | None = None,
        output: list[StyledSpan] | None = None,
    ) -> list[StyledSpan]:
        """Render an already parsed tree.

        Args:
            node: Root of the tree
            context: Formatting inherited from outside the tree
            output: Spans to append to (a new list if omitted)

        Returns:
            Spans in pre-order
        """
        spans = output if output is not None else []
        self._walk(node, context or StyleContext(), spans)
        return spans

    def _walk(self, node: MarkupNode, context: StyleContext, output: list[StyledSpan]) -> None:
        if isinstance(node, TextNode):
            self._emit(node.text, context, output)
            return

        if node.tag is Tag.COMMENT:
            return

        child_context = self._derive_context(node, context)
        for child in node.children:
            self._walk(child, child_context, output)

    def _derive_context(self, node: ElementNode, context: StyleContext) -> StyleContext:
        """Compute the context an element passes down to its children."""
        if node.tag in _TAG_STYLES:
            return context.with_style(_TAG_STYLES[node.tag])

        if node.tag is Tag.ANCHOR:
            target = self._link_target(node)
            if target is not None:
                return context.with_link(target)

        return context

    def _link_target(self, node: ElementNode) -> LinkTarget | None:
        if self.SELF_LINK_CLASSES.intersection(node.classes):
            return SELF_LINK
        title = (node.get(self.LINK_ATTRIBUTE) or "").strip()
        return title or None

    @staticmethod
    def _emit(text: str, context: StyleContext, output: list[StyledSpan]) -> None:
        """Append a text node's span, normalising whitespace at the boundary.

        A blank ending the previous span is dropped when this text starts
        with whitespace; a leading space or newline is dropped when the
        previous span already ends a line.
        """
        text = collapse_whitespace(text)

        if text and output and text[0] in WHITESPACE:
            trim_trailing_blank(output)
            if output and output[-1].text.endswith("\n"):
                text = text[1:]

        if text:
            output.append(context.span(text))


def trim_trailing_blank(spans: list[StyledSpan]) -> None:
    """Strip spaces and tabs ending the last span, dropping it if nothing is left."""
    if not spans or not ends_with_blank(spans[-1].text):
        return
    trimmed = spans[-1].text.rstrip(BLANKS)
    if trimmed:
        spans[-1] = replace(spans[-1], text=trimmed)
    else:
        spans.pop()


_default_renderer = MarkupRenderer()


def render(fragment: str) -> list[StyledSpan]:
    """Render a markup fragment with the default renderer."""
    return _default_renderer.render(fragment)
