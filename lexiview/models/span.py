"""Data models for styled text output."""

from dataclasses import dataclass
from enum import Enum, Flag, auto


class Style(Flag):
    """Formatting flags carried by a styled span."""

    NONE = 0
    BOLD = auto()
    ITALIC = auto()
    UNDERLINE = auto()
    LINK = auto()
    TITLE = auto()  # Document title (the looked-up word)
    HEADING = auto()  # Language section heading


class SelfLink(Enum):
    """Marker for a link pointing at the page already on display."""

    CURRENT_PAGE = "current-page"


SELF_LINK = SelfLink.CURRENT_PAGE

LinkTarget = str | SelfLink


@dataclass(frozen=True)
class StyledSpan:
    """A run of text with formatting and an optional link target.

    A span has a link target if and only if its style includes LINK.
    """

    text: str
    style: Style = Style.NONE
    link_target: LinkTarget | None = None

    def __post_init__(self):
        """Validate that the link target matches the LINK flag."""
        has_flag = bool(self.style & Style.LINK)
        if has_flag != (self.link_target is not None):
            raise ValueError(
                f"StyledSpan {self.text!r}: link_target must be set exactly when style has LINK"
            )

    @property
    def is_link(self) -> bool:
        """Check if this span can be activated as a link."""
        return self.link_target is not None

    @property
    def is_self_link(self) -> bool:
        """Check if this span links back to the current page."""
        return self.link_target is SELF_LINK
