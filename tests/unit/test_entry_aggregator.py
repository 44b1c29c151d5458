"""Tests for entry_aggregator module."""

import pytest

from lexiview.models import UNSPECIFIED_LANGUAGE, UNSPECIFIED_PART_OF_SPEECH, RawRecord, RawSense
from lexiview.services.entry_aggregator import EntryAggregator


@pytest.fixture
def aggregator():
    """Provide an EntryAggregator."""
    return EntryAggregator()


class TestAggregate:
    """Tests for EntryAggregator.aggregate."""

    def test_word_is_kept(self, aggregator, make_raw_record):
        """Should store the looked-up word."""
        entry = aggregator.aggregate("cat", [make_raw_record()])
        assert entry.word == "cat"

    def test_senses_in_arrival_order(self, aggregator, make_raw_record):
        """Should list senses in the order they arrived."""
        records = [
            make_raw_record(part_of_speech="Noun", definitions=["n1", "n2"]),
            make_raw_record(part_of_speech="Verb", definitions=["v1"]),
        ]
        group = aggregator.aggregate("cat", records).language_groups[0]
        assert [s.definition_markup for s in group.senses] == ["n1", "n2", "v1"]
        assert [s.part_of_speech for s in group.senses] == ["Noun", "Noun", "Verb"]

    def test_languages_in_first_seen_order(self, aggregator, make_raw_record):
        """Should create one group per language in first-encountered order."""
        records = [
            make_raw_record(language="French"),
            make_raw_record(language="English"),
            make_raw_record(language="French", definitions=["again"]),
        ]
        entry = aggregator.aggregate("chat", records)
        assert entry.languages == ["French", "English"]
        assert len(entry.language_groups[0]) == 2

    def test_empty_definitions_dropped(self, aggregator, make_raw_record):
        """Should drop senses whose definition is blank after trimming."""
        record = make_raw_record(definitions=["kept", "", "   \t", "also kept"])
        group = aggregator.aggregate("cat", [record]).language_groups[0]
        assert [s.definition_markup for s in group.senses] == ["kept", "also kept"]

    def test_language_with_only_empty_senses_keeps_group(self, aggregator, make_raw_record):
        """Should still create the group, with no senses."""
        entry = aggregator.aggregate("cat", [make_raw_record(language="Latin", definitions=[" "])])
        assert entry.languages == ["Latin"]
        assert entry.language_groups[0].senses == ()

    def test_defaults_for_missing_language_and_pos(self, aggregator):
        """Should fall back to the unspecified sentinels."""
        record = RawRecord(senses=[RawSense("something")])
        entry = aggregator.aggregate("x", [record])
        assert entry.languages == [UNSPECIFIED_LANGUAGE]
        assert entry.language_groups[0].senses[0].part_of_speech == UNSPECIFIED_PART_OF_SPEECH

    def test_gender_combined_into_sense(self, aggregator, make_raw_record):
        """Should copy the record's gender onto each sense."""
        record = make_raw_record(language="German", gender="f", definitions=["cat"])
        sense = aggregator.aggregate("Katze", [record]).language_groups[0].senses[0]
        assert sense.gender == "f"
        assert sense.label == "Noun (f)"

    def test_examples_kept_in_order(self, aggregator, make_raw_record):
        """Should keep a sense's examples as given."""
        record = make_raw_record(definitions=["d"], examples=["first", "second"])
        sense = aggregator.aggregate("cat", [record]).language_groups[0].senses[0]
        assert sense.examples == ("first", "second")

    def test_no_records(self, aggregator):
        """Should return an entry without groups."""
        entry = aggregator.aggregate("nothing", [])
        assert entry.language_groups == ()

    def test_sample_response(self, aggregator, fake_client):
        """Should aggregate a realistic lookup result."""
        entry = aggregator.aggregate("cat", fake_client.fetch_definition("cat"))
        assert entry.languages == ["English", "French", "Dutch"]
        english = entry.language_groups[0]
        assert [s.part_of_speech for s in english.senses] == ["Noun", "Noun", "Verb"]
        assert all(s.definition_markup.strip() for s in english.senses)
