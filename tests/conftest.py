"""Pytest configuration and shared fixtures."""

import pytest

from lexiview.config import LexiviewConfig
from lexiview.exceptions import WordLookupError
from lexiview.models import RawRecord, RawSense
from lexiview.presenters import NullPresenter
from lexiview.services.providers.wiktionary_provider import parse_lookup_result

# Shaped like a Wiktionary REST "page/definition" response
SAMPLE_LOOKUP_RESPONSE = {
    "en": [
        {
            "partOfSpeech": "Noun",
            "language": "English",
            "definitions": [
                {
                    "definition": 'A mammal of the family <a rel="mw:WikiLink" '
                    'href="/wiki/Felidae" title="Felidae">Felidae</a>.',
                    "examples": ["The <b>cat</b> sat on the mat."],
                },
                {"definition": "   ", "examples": ["never shown"]},
                {"definition": 'Short for <a class="mw-selflink selflink">cat</a>-o\'-nine-tails.'},
            ],
        },
        {
            "partOfSpeech": "Verb",
            "language": "English",
            "definitions": [{"definition": "To hoist the anchor."}],
        },
    ],
    "fr": [
        {
            "partOfSpeech": "Noun",
            "language": "French",
            "gender": "m",
            "definitions": [{"definition": "<i>cat</i> (a computing command)"}],
        }
    ],
    "other": [
        {
            "partOfSpeech": "Noun",
            "language": "Dutch",
            "definitions": [{"definition": "catgut"}],
        }
    ],
}

FELIDAE_RESPONSE = {
    "en": [
        {
            "partOfSpeech": "Proper noun",
            "language": "Translingual",
            "definitions": [{"definition": "The cat family."}],
        }
    ]
}


class FakeDefinitionClient:
    """A DefinitionClient serving canned records and recording every lookup."""

    name = "Fake"

    def __init__(self, results: dict[str, list[RawRecord]]):
        self.results = results
        self.calls: list[str] = []

    def fetch_definition(self, word: str) -> list[RawRecord]:
        self.calls.append(word)
        if word not in self.results:
            raise WordLookupError(word, status_code=404)
        return self.results[word]


class RecordingPresenter:
    """A DisplaySurface that records everything it is asked to show."""

    def __init__(self):
        self.documents = []
        self.infos = []
        self.errors = []

    def show_document(self, word, spans) -> None:
        self.documents.append((word, spans))

    def show_info(self, message: str) -> None:
        self.infos.append(message)

    def show_error(self, message: str) -> None:
        self.errors.append(message)

    @property
    def last_word(self) -> str | None:
        return self.documents[-1][0] if self.documents else None


@pytest.fixture
def test_config():
    """Provide a configuration with no language preferences."""
    return LexiviewConfig(
        definition_api_url="https://dictionary.test/api/definition",
        request_timeout=2.0,
    )


@pytest.fixture
def null_presenter():
    """Provide a null presenter for testing (no output)."""
    return NullPresenter()


@pytest.fixture
def recording_presenter():
    """Provide a presenter that records all calls for assertion."""
    return RecordingPresenter()


@pytest.fixture
def sample_lookup_response():
    """Provide a decoded lookup response for the word 'cat'."""
    return SAMPLE_LOOKUP_RESPONSE


@pytest.fixture
def felidae_lookup_response():
    """Provide a decoded lookup response for the word 'Felidae'."""
    return FELIDAE_RESPONSE


@pytest.fixture
def fake_client():
    """Provide a client that knows 'cat' and 'Felidae'."""
    return FakeDefinitionClient(
        {
            "cat": parse_lookup_result(SAMPLE_LOOKUP_RESPONSE),
            "Felidae": parse_lookup_result(FELIDAE_RESPONSE),
        }
    )


@pytest.fixture
def make_raw_record():
    """Factory fixture for creating RawRecord instances with sensible defaults."""

    def _make(
        language="English",
        part_of_speech="Noun",
        gender=None,
        definitions=("A definition.",),
        examples=(),
    ):
        return RawRecord(
            language=language,
            part_of_speech=part_of_speech,
            gender=gender,
            senses=[RawSense(definition=d, examples=list(examples)) for d in definitions],
        )

    return _make
