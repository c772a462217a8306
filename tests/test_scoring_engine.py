"""Tests for answer checking and reveal tracking."""

import pytest

from keyword_app.core.errors import InvalidPositionError
from keyword_app.core.services.question_set import build_questions
from keyword_app.core.services.scoring_engine import ScoringEngine, is_complete

from conftest import make_record


@pytest.fixture
def engine():
    questions = build_questions("CODE", [make_record("A"), make_record("B"), make_record("C"), make_record("D")])
    return ScoringEngine(questions)


class TestSubmitAnswer:
    """Scoring against the answer key."""

    def test_correct_iff_choice_matches(self, engine):
        expected = ["A", "B", "C", "D"]
        for position, answer in enumerate(expected):
            for choice in ("A", "B", "C", "D"):
                assert engine.submit_answer(position, choice) is (choice == answer)

    def test_wrong_answer_does_not_reveal(self, engine):
        engine.submit_answer(0, "D")
        assert engine.get_revealed() == frozenset()

    def test_repeat_submission_is_still_scored(self, engine):
        engine.record_reveal(0)
        assert engine.submit_answer(0, "A") is True

    @pytest.mark.parametrize("position", [-1, 4])
    def test_position_out_of_range(self, engine, position):
        with pytest.raises(InvalidPositionError):
            engine.submit_answer(position, "A")

    def test_unknown_choice_label(self, engine):
        with pytest.raises(ValueError):
            engine.submit_answer(0, "E")


class TestRecordReveal:
    """Idempotent reveal set."""

    def test_recording_twice_equals_once(self, engine):
        once = engine.record_reveal(2)
        twice = engine.record_reveal(2)
        assert once == twice == frozenset({2})
        assert engine.get_revealed_count() == 1

    def test_out_of_range_reveal(self, engine):
        with pytest.raises(InvalidPositionError):
            engine.record_reveal(9)

    def test_complete_only_with_full_coverage(self, engine):
        for position in (3, 1, 0):
            engine.record_reveal(position)
            assert not engine.is_complete()
        engine.record_reveal(2)
        assert engine.is_complete()

    def test_clear_empties_reveals(self, engine):
        engine.record_reveal(0)
        engine.clear()
        assert engine.get_revealed() == frozenset()
        assert not engine.is_revealed(0)


class TestIsComplete:
    """Completion predicate on its own."""

    def test_every_proper_subset_is_incomplete(self):
        keyword = "ABC"
        subsets = [set(), {0}, {1}, {2}, {0, 1}, {0, 2}, {1, 2}]
        for subset in subsets:
            assert not is_complete(subset, keyword)
        assert is_complete({0, 1, 2}, keyword)
