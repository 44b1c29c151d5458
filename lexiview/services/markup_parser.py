"""Parse markup fragments into MarkupNode trees."""

import logging
import warnings

from bs4 import (
    BeautifulSoup,
    Comment,
    Declaration,
    Doctype,
    MarkupResemblesLocatorWarning,
    NavigableString,
    ParserRejectedMarkup,
    ProcessingInstruction,
)
from bs4 import Tag as SoupTag

from lexiview.models import ElementNode, MarkupNode, Tag, TextNode

logger = logging.getLogger(__name__)

DOCUMENT_NAME = "#document"


def parse_fragment(fragment: str) -> ElementNode | None:
    """Parse a markup fragment into a tree rooted at an implicit document node.

    Args:
        fragment: HTML-like snippet (a definition or an example)

    Returns:
        The document node, or None if the fragment has no content or
        could not be parsed
    """
    if not fragment or not fragment.strip():
        return None

    try:
        with warnings.catch_warnings():
            # A bare headword such as "index.html" is text here, not a file name
            warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
            soup = BeautifulSoup(fragment, "html.parser")
        children = _convert_children(soup)
    except (ParserRejectedMarkup, AssertionError, RecursionError) as e:
        logger.warning(f"Could not parse markup fragment {fragment[:40]!r}: {e}")
        return None

    if not children:
        return None
    return ElementNode(Tag.OTHER, name=DOCUMENT_NAME, children=children)


def _convert_children(parent: SoupTag) -> tuple[MarkupNode, ...]:
    nodes = (_convert(child) for child in parent.children)
    return tuple(node for node in nodes if node is not None)


def _convert(node) -> MarkupNode | None:
    # Comment, Doctype and friends are NavigableString subclasses, so test them first
    if isinstance(node, Comment):
        return ElementNode(Tag.COMMENT, name="comment", children=(TextNode(str(node)),))
    if isinstance(node, (Doctype, Declaration, ProcessingInstruction)):
        return None
    if isinstance(node, NavigableString):
        return TextNode(str(node))
    if isinstance(node, SoupTag):
        return ElementNode(
            Tag.from_name(node.name),
            name=node.name,
            attributes=_attributes(node),
            children=_convert_children(node),
        )
    return None


def _attributes(node: SoupTag) -> dict[str, str]:
    """Flatten multi-valued attributes such as class into space-joined strings."""
    result = {}
    for key, value in node.attrs.items():
        if isinstance(value, (list, tuple)):
            value = " ".join(value)
        result[key] = str(value)
    return result
