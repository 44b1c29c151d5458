"""Tests for LookupSession orchestration."""

from unittest.mock import MagicMock

import pytest

from lexiview.config import LexiviewConfig
from lexiview.exceptions import NoHistoryError, WordLookupError
from lexiview.models import SELF_LINK
from lexiview.orchestration import LookupSession
from lexiview.services.document_composer import link_targets, plain_text


@pytest.fixture
def session(test_config, fake_client, recording_presenter):
    """Provide a session wired to fakes."""
    return LookupSession(test_config, fake_client, recording_presenter)


class TestSearch:
    """Tests for LookupSession.search."""

    def test_search_displays_document(self, session, recording_presenter):
        """Should compose and present the looked-up entry."""
        entry = session.search("cat")
        assert entry.word == "cat"
        word, spans = recording_presenter.documents[-1]
        assert word == "cat"
        assert plain_text(spans).startswith("cat\n\n")

    def test_search_strips_input(self, session, fake_client):
        """Should trim the typed word before looking it up."""
        session.search("  cat ")
        assert fake_client.calls == ["cat"]

    def test_blank_search_rejected(self, session, fake_client):
        """Should refuse to look up a blank word."""
        with pytest.raises(WordLookupError):
            session.search("   ")
        assert fake_client.calls == []

    def test_default_ordering_is_lexicographic(self, session):
        """Should sort languages without a priority list."""
        assert session.search("cat").languages == ["Dutch", "English", "French"]

    def test_priority_list_applied(self, fake_client, recording_presenter):
        """Should order languages per configuration."""
        config = LexiviewConfig(language_priority_list=["French", "English"])
        session = LookupSession(config, fake_client, recording_presenter)
        assert session.search("cat").languages == ["French", "English", "Dutch"]

    def test_unlisted_hidden(self, fake_client, recording_presenter):
        """Should drop unlisted languages when configured."""
        config = LexiviewConfig(language_priority_list=["English"], show_unlisted_languages=False)
        session = LookupSession(config, fake_client, recording_presenter)
        entry = session.search("cat")
        assert entry.languages == ["English"]
        assert "French" not in plain_text(recording_presenter.documents[-1][1])

    def test_failed_lookup_keeps_state(self, session, recording_presenter):
        """Should propagate the error without changing history or display."""
        session.search("cat")
        with pytest.raises(WordLookupError):
            session.search("missing")
        assert session.current.word == "cat"
        assert session.history.back == []
        assert len(recording_presenter.documents) == 1


class TestNavigation:
    """Tests for follow, go_back and go_forward."""

    def test_follow_link(self, session, recording_presenter):
        """Should look up a linked word and show it."""
        session.search("cat")
        targets = link_targets(recording_presenter.documents[-1][1])
        assert "Felidae" in targets

        session.follow("Felidae")
        assert recording_presenter.last_word == "Felidae"
        assert [e.word for e in session.history.back] == ["cat"]

    def test_follow_self_link_does_not_fetch(self, session, fake_client, recording_presenter):
        """Should redisplay the current word without a new lookup."""
        session.search("cat")
        session.follow(SELF_LINK)
        assert fake_client.calls == ["cat"]
        assert [doc[0] for doc in recording_presenter.documents] == ["cat", "cat"]

    def test_back_and_forward_replay(self, session, fake_client, recording_presenter):
        """Should redisplay stored entries without fetching again."""
        session.search("cat")
        session.follow("Felidae")
        session.go_back()
        assert recording_presenter.last_word == "cat"
        session.go_forward()
        assert recording_presenter.last_word == "Felidae"
        assert fake_client.calls == ["cat", "Felidae"]

    def test_back_with_no_history(self, session):
        """Should raise NoHistoryError."""
        with pytest.raises(NoHistoryError):
            session.go_back()

    def test_forward_with_no_history(self, session):
        session.search("cat")
        with pytest.raises(NoHistoryError):
            session.go_forward()


class TestDisplayFailures:
    """Tests for a display surface that fails while painting."""

    def test_surface_error_is_reported(self, test_config, fake_client, recording_presenter):
        """Should keep the new history and report the failure on the surface."""
        recording_presenter.show_document = MagicMock(side_effect=RuntimeError("no canvas"))
        session = LookupSession(test_config, fake_client, recording_presenter)

        entry = session.search("cat")

        assert entry.word == "cat"
        assert session.current.word == "cat"
        assert recording_presenter.errors == ["Could not display 'cat': no canvas"]

    def test_navigation_continues_after_failure(
        self, test_config, fake_client, recording_presenter
    ):
        """Should allow further navigation once the surface recovers."""
        session = LookupSession(test_config, fake_client, recording_presenter)
        session.search("cat")
        recording_presenter.show_document = MagicMock(side_effect=RuntimeError("no canvas"))
        session.follow("Felidae")
        del recording_presenter.show_document

        session.go_back()

        assert recording_presenter.last_word == "cat"
        assert [doc[0] for doc in recording_presenter.documents] == ["cat", "cat"]


class TestCurrentDocument:
    """Tests for LookupSession.current_document."""

    def test_empty_before_lookup(self, session):
        assert session.current_document() == []

    def test_composes_current(self, session):
        session.search("cat")
        assert plain_text(session.current_document()).startswith("cat\n")

    def test_works_with_null_presenter(self, test_config, fake_client, null_presenter):
        """Should run with a presenter that discards output."""
        session = LookupSession(test_config, fake_client, null_presenter)
        assert session.search("cat").word == "cat"
