"""Tests for keyword normalization and slot-to-position mapping."""

import pytest

from keyword_app.core.errors import EmptyKeywordError, InvalidPositionError, InvalidSetupError
from keyword_app.core.models import GameStatus
from keyword_app.core.services.tile_mapper import (
    display_char_at,
    init_layout,
    normalize_keyword,
    position_at,
)


class TestNormalizeKeyword:
    """Whitespace removal and uppercasing."""

    def test_removes_all_whitespace_and_uppercases(self):
        assert normalize_keyword("  in ter\tnet\n") == "INTERNET"

    def test_unicode_letters_are_uppercased(self):
        assert normalize_keyword("tin học") == "TINHỌC"

    @pytest.mark.parametrize("raw", ["", "   ", "\t\n", None])
    def test_empty_keyword_raises(self, raw):
        with pytest.raises(EmptyKeywordError):
            normalize_keyword(raw)

    def test_empty_keyword_is_a_setup_error(self):
        with pytest.raises(InvalidSetupError):
            normalize_keyword(" ")


class TestInitLayout:
    """Fresh scrambled orders."""

    def test_layout_is_permutation_of_positions(self, rng):
        order = init_layout("INTERNET", rng)
        assert sorted(order) == list(range(8))

    def test_single_letter_layout(self, rng):
        assert init_layout("A", rng) == [0]


class TestDisplayCharAt:
    """Scrambled display during play, reading order once solved."""

    KEYWORD = "CODE"
    ORDER = [2, 0, 3, 1]

    @pytest.mark.parametrize("status", [GameStatus.PLAYING, GameStatus.REVEALED])
    def test_scrambled_while_playing(self, status):
        chars = [display_char_at(slot, self.ORDER, self.KEYWORD, status) for slot in range(4)]
        assert chars == ["D", "C", "E", "O"]

    def test_reading_order_when_solved(self):
        chars = [display_char_at(slot, self.ORDER, self.KEYWORD, GameStatus.SOLVED) for slot in range(4)]
        assert "".join(chars) == "CODE"

    def test_position_at_follows_display_mode(self):
        assert position_at(0, self.ORDER, GameStatus.PLAYING) == 2
        assert position_at(0, self.ORDER, GameStatus.SOLVED) == 0

    @pytest.mark.parametrize("slot", [-1, 4, 10])
    def test_slot_out_of_range(self, slot):
        with pytest.raises(InvalidPositionError):
            display_char_at(slot, self.ORDER, self.KEYWORD, GameStatus.PLAYING)

    def test_setup_has_no_board(self):
        with pytest.raises(RuntimeError):
            position_at(0, self.ORDER, GameStatus.SETUP)
