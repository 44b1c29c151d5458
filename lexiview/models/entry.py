"""Data models for aggregated dictionary entries."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Sense:
    """One part-of-speech-scoped meaning of a word."""

    part_of_speech: str
    definition_markup: str  # Raw markup fragment
    examples: tuple[str, ...] = ()  # Raw markup fragments, display order
    gender: str | None = None

    @property
    def label(self) -> str:
        """Part of speech with the gender in parentheses, if any."""
        if self.gender:
            return f"{self.part_of_speech} ({self.gender})"
        return self.part_of_speech


@dataclass(frozen=True)
class LanguageGroup:
    """All senses of a word for one language, in display order."""

    language: str
    senses: tuple[Sense, ...] = ()

    def __len__(self) -> int:
        return len(self.senses)


@dataclass(frozen=True)
class WordEntry:
    """A looked-up word with its language groups; the unit kept in history."""

    word: str
    language_groups: tuple[LanguageGroup, ...] = ()

    @property
    def languages(self) -> list[str]:
        """Language names in display order."""
        return [group.language for group in self.language_groups]

    @property
    def sense_count(self) -> int:
        """Total number of senses across all languages."""
        return sum(len(group) for group in self.language_groups)

    def __str__(self) -> str:
        return f"{self.word} ({len(self.language_groups)} languages, {self.sense_count} senses)"
