"""Tests for the music table queries."""

import pytest
from sqlalchemy.exc import IntegrityError

from services.music import add_track, filter_tracks_excluding, list_all_tracks
from services.schema import SEED_TRACKS


class TestFilterTracksExcluding:
    """Tests for case-insensitive character exclusion."""

    def test_excludes_m_and_t(self, db):
        """No returned title contains 'm' or 't' in any case."""
        result = filter_tracks_excluding(db, "mt")
        assert "Imagine" not in result
        assert "Always" in result
        for name in result:
            assert "m" not in name.lower()
            assert "t" not in name.lower()

    def test_keeps_every_title_without_m_or_t(self, db):
        expected = {name for _, name in SEED_TRACKS
                    if "m" not in name.lower() and "t" not in name.lower()}
        assert set(filter_tracks_excluding(db, "mt")) == expected

    def test_uppercase_letters_are_excluded_too(self, db):
        """'Thunderstruck' starts with a capital T and is still filtered out."""
        add_track(db, 21, "Thunderstruck")
        assert "Thunderstruck" not in filter_tracks_excluding(db, "mt")

    def test_wildcards_are_literal(self, db):
        """'%' is matched as a character, not as a LIKE wildcard."""
        add_track(db, 21, "100% Pure")
        result = filter_tracks_excluding(db, "%x")
        assert "100% Pure" not in result
        assert "Always" in result

    def test_empty_exclusion_returns_everything(self, db):
        assert len(filter_tracks_excluding(db, "")) == 20


class TestAddTrack:
    """Tests for inserting a single track."""

    def test_added_track_is_listed(self, db):
        add_track(db, 21, "Thunderstruck")
        assert "Thunderstruck" in list_all_tracks(db)
        assert len(list_all_tracks(db)) == 21

    def test_duplicate_id_fails(self, db):
        """Inserting the same id twice surfaces the primary-key violation."""
        add_track(db, 21, "Thunderstruck")
        with pytest.raises(IntegrityError):
            add_track(db, 21, "Thunderstruck")

    def test_session_usable_after_duplicate(self, db):
        with pytest.raises(IntegrityError):
            add_track(db, 1, "Another Bohemian Rhapsody")
        assert len(list_all_tracks(db)) == 20
