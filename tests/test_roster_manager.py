"""Tests for roster parsing and blind-bag draws."""

from collections import Counter
import random

import pytest

from keyword_app.core.errors import EmptyRosterError
from keyword_app.core.services.roster_manager import RosterManager, draw_random, parse_roster


class TestParseRoster:
    """Splitting raw name lists."""

    def test_mixed_separators(self):
        assert parse_roster("Anh, Binh;\nChi\n\n") == ["Anh", "Binh", "Chi"]

    def test_preserves_order_and_duplicates(self):
        assert parse_roster("Chi;Anh;Chi") == ["Chi", "Anh", "Chi"]

    def test_empty_and_blank_input(self):
        assert parse_roster("") == []
        assert parse_roster(" ,; \n ") == []

    def test_windows_newlines_are_trimmed(self):
        assert parse_roster("Anh\r\nBinh\r\n") == ["Anh", "Binh"]

    def test_inner_spaces_are_kept(self):
        assert parse_roster("Nguyen Van An, Tran Thi Binh") == ["Nguyen Van An", "Tran Thi Binh"]


class TestDrawRandom:
    """Draw-without-replacement semantics."""

    def test_removes_exactly_one_occurrence(self):
        roster = ["Anh", "Binh", "Anh"]
        saw_anh = False
        for seed in range(30):
            picked, remaining = draw_random(roster, random.Random(seed))
            assert len(remaining) == 2
            assert Counter(remaining) + Counter([picked]) == Counter(roster)
            if picked == "Anh":
                saw_anh = True
                assert sorted(remaining) == ["Anh", "Binh"]
        assert saw_anh

    def test_input_roster_is_untouched(self, rng):
        roster = ["Anh", "Binh"]
        draw_random(roster, rng)
        assert roster == ["Anh", "Binh"]

    def test_empty_roster_raises(self, rng):
        with pytest.raises(EmptyRosterError):
            draw_random([], rng)

    def test_single_name(self, rng):
        assert draw_random(["Chi"], rng) == ("Chi", [])


class TestRosterManager:
    """Stateful roster used by the game session."""

    def test_draws_every_name_once(self, rng):
        roster = RosterManager.from_text("Anh, Binh, Chi", rng=rng)
        picked = [roster.draw() for _ in range(3)]
        assert sorted(picked) == ["Anh", "Binh", "Chi"]
        assert roster.is_empty()
        with pytest.raises(EmptyRosterError):
            roster.draw()

    def test_blank_names_are_dropped(self):
        roster = RosterManager(["Anh", "  ", ""])
        assert roster.get_names() == ["Anh"]
        assert roster.remaining() == 1

    def test_get_names_returns_copy(self):
        roster = RosterManager(["Anh"])
        roster.get_names().append("Binh")
        assert roster.remaining() == 1
