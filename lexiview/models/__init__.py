"""Data models for Lexiview."""

from .entry import LanguageGroup, Sense, WordEntry
from .history import HistoryState
from .markup import ElementNode, MarkupNode, Tag, TextNode
from .raw import UNSPECIFIED_LANGUAGE, UNSPECIFIED_PART_OF_SPEECH, RawRecord, RawSense
from .span import SELF_LINK, LinkTarget, SelfLink, Style, StyledSpan

__all__ = [
    "Tag",
    "TextNode",
    "ElementNode",
    "MarkupNode",
    "Style",
    "StyledSpan",
    "SelfLink",
    "SELF_LINK",
    "LinkTarget",
    "RawRecord",
    "RawSense",
    "UNSPECIFIED_LANGUAGE",
    "UNSPECIFIED_PART_OF_SPEECH",
    "Sense",
    "LanguageGroup",
    "WordEntry",
    "HistoryState",
]
