"""Group raw dictionary records into per-language sense lists."""

import logging
from collections import deque
from collections.abc import Iterable

from lexiview.models import (
    UNSPECIFIED_LANGUAGE,
    UNSPECIFIED_PART_OF_SPEECH,
    LanguageGroup,
    RawRecord,
    Sense,
    WordEntry,
)

logger = logging.getLogger(__name__)


class EntryAggregator:
    """Build a WordEntry out of raw lookup records (stateless service)."""

    def aggregate(self, word: str, raw_records: Iterable[RawRecord]) -> WordEntry:
        """Group the senses of every record by language.

        Senses are collected newest-first per language and reversed once
        per language at the end, so each group lists its senses in the
        order they arrived. Senses with a blank definition are dropped
        during that reversal.

        Args:
            word: The looked-up word
            raw_records: Records in the order the service returned them

        Returns:
            WordEntry with one group per language, in first-seen order
        """
        collected: dict[str, deque[Sense]] = {}

        for record in raw_records:
            language = record.language or UNSPECIFIED_LANGUAGE
            part_of_speech = record.part_of_speech or UNSPECIFIED_PART_OF_SPEECH
            pending = collected.setdefault(language, deque())

            for raw_sense in record.senses:
                pending.appendleft(
                    Sense(
                        part_of_speech=part_of_speech,
                        definition_markup=raw_sense.definition,
                        examples=tuple(raw_sense.examples),
                        gender=record.gender,
                    )
                )

        groups = tuple(
            LanguageGroup(language, self._in_arrival_order(language, pending))
            for language, pending in collected.items()
        )
        return WordEntry(word=word, language_groups=groups)

    @staticmethod
    def _in_arrival_order(language: str, pending: deque[Sense]) -> tuple[Sense, ...]:
        senses = tuple(sense for sense in reversed(pending) if sense.definition_markup.strip())
        dropped = len(pending) - len(senses)
        if dropped:
            logger.debug(f"Dropped {dropped} empty sense(s) for {language}")
        return senses
