"""Ordering policy for language groups."""

import logging
from collections.abc import Iterable, Sequence

from lexiview.config import LexiviewConfig
from lexiview.models import LanguageGroup

logger = logging.getLogger(__name__)


def order_languages(
    groups: Iterable[LanguageGroup],
    priority_list: Sequence[str],
    show_unlisted: bool = True,
) -> list[LanguageGroup]:
    """Filter and sort language groups by user preference.

    Listed languages come first, in priority-list order; unlisted ones
    follow in case-sensitive lexicographic order, or are dropped when
    show_unlisted is False. Matching is by exact string equality.

    Args:
        groups: Language groups in any order
        priority_list: Preferred languages, most preferred first
        show_unlisted: Whether to keep languages missing from priority_list

    Returns:
        Ordered list of groups

    Example:
        order_languages(groups, ["German", "English"])
        # German, English, then e.g. French, Spanish
    """
    rank: dict[str, int] = {}
    for index, language in enumerate(priority_list):
        rank.setdefault(language, index)

    kept = []
    for group in groups:
        if group.language in rank or show_unlisted:
            kept.append(group)
        else:
            logger.debug(f"Hiding unlisted language: {group.language}")

    def sort_key(group: LanguageGroup) -> tuple[int, int, str]:
        if group.language in rank:
            return (0, rank[group.language], "")
        return (1, 0, group.language)

    return sorted(kept, key=sort_key)


class LanguageOrderPolicy:
    """Language ordering bound to one configuration."""

    def __init__(self, priority_list: Sequence[str] = (), show_unlisted: bool = True):
        self.priority_list = list(priority_list)
        self.show_unlisted = show_unlisted

    @classmethod
    def from_config(cls, config: LexiviewConfig) -> "LanguageOrderPolicy":
        return cls(config.language_priority_list, config.show_unlisted_languages)

    def apply(self, groups: Iterable[LanguageGroup]) -> list[LanguageGroup]:
        return order_languages(groups, self.priority_list, self.show_unlisted)
