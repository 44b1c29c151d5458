"""Data models for raw dictionary-service records."""

from dataclasses import dataclass, field
from typing import Any

UNSPECIFIED_LANGUAGE = "unspecified language"
UNSPECIFIED_PART_OF_SPEECH = "unspecified part of speech"


def _optional_str(value: Any) -> str | None:
    return value if isinstance(value, str) and value else None


@dataclass
class RawSense:
    """One raw sense: a definition fragment and its example fragments."""

    definition: str
    examples: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RawSense":
        """Build a RawSense from a decoded JSON object.

        Missing or non-string values become empty strings; non-string
        examples are skipped.
        """
        definition = data.get("definition")
        examples = data.get("examples") or []
        return cls(
            definition=definition if isinstance(definition, str) else "",
            examples=[e for e in examples if isinstance(e, str)],
        )


@dataclass
class RawRecord:
    """One per-language, per-part-of-speech chunk of a lookup result."""

    language: str | None = None
    part_of_speech: str | None = None
    gender: str | None = None
    senses: list[RawSense] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RawRecord":
        """Build a RawRecord from a decoded JSON object.

        Expected keys are ``language``, ``partOfSpeech``, ``gender`` and
        ``definitions`` (a list of sense objects). All are optional.
        """
        definitions = data.get("definitions") or []
        return cls(
            language=_optional_str(data.get("language")),
            part_of_speech=_optional_str(data.get("partOfSpeech")),
            gender=_optional_str(data.get("gender")),
            senses=[RawSense.from_dict(d) for d in definitions if isinstance(d, dict)],
        )
