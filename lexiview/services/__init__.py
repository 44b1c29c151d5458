"""Business logic services for Lexiview."""

from .document_composer import DocumentComposer, link_targets, plain_text
from .entry_aggregator import EntryAggregator
from .history_navigator import HistoryNavigator
from .language_order import LanguageOrderPolicy, order_languages
from .markup_parser import parse_fragment
from .markup_renderer import MarkupRenderer, StyleContext, render
from .providers import WiktionaryClient, parse_lookup_result

__all__ = [
    "MarkupRenderer",
    "StyleContext",
    "render",
    "parse_fragment",
    "EntryAggregator",
    "LanguageOrderPolicy",
    "order_languages",
    "DocumentComposer",
    "plain_text",
    "link_targets",
    "HistoryNavigator",
    "WiktionaryClient",
    "parse_lookup_result",
]
