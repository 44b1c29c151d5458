"""Data models for parsed markup fragments."""

from dataclasses import dataclass, field
from enum import Enum


class Tag(Enum):
    """Element kinds recognised by the span renderer."""

    ANCHOR = "anchor"
    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    COMMENT = "comment"
    OTHER = "other"

    @classmethod
    def from_name(cls, name: str) -> "Tag":
        """Map an HTML element name to its tag kind.

        Args:
            name: Element name as it appears in the markup (any case)

        Returns:
            The matching Tag, or Tag.OTHER for unrecognised elements
        """
        return _ELEMENT_TAGS.get(name.lower(), cls.OTHER)


_ELEMENT_TAGS = {
    "a": Tag.ANCHOR,
    "b": Tag.BOLD,
    "strong": Tag.BOLD,
    "i": Tag.ITALIC,
    "em": Tag.ITALIC,
    "u": Tag.UNDERLINE,
    "ins": Tag.UNDERLINE,
}


@dataclass(frozen=True)
class TextNode:
    """A run of character data."""

    text: str


@dataclass(frozen=True)
class ElementNode:
    """An element with attributes and ordered children."""

    tag: Tag
    name: str = ""  # Original element name, kept for debugging
    attributes: dict[str, str] = field(default_factory=dict)
    children: tuple["TextNode | ElementNode", ...] = ()

    def get(self, attribute: str, default: str | None = None) -> str | None:
        """Return an attribute value, or default if the element lacks it."""
        return self.attributes.get(attribute, default)

    @property
    def classes(self) -> list[str]:
        """Return the element's CSS classes."""
        return (self.attributes.get("class") or "").split()


MarkupNode = TextNode | ElementNode
