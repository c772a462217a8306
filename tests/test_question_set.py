"""Tests for binding question records to keyword characters."""

import pytest

from keyword_app.core.errors import InvalidSetupError
from keyword_app.core.models import QuestionRecord
from keyword_app.core.services.question_set import build_questions

from conftest import make_record


class TestBuildQuestions:
    """Structural validation of generated or imported records."""

    def test_zip_pairs_records_with_characters(self):
        questions = build_questions("AI", [make_record("B"), make_record("D")])
        assert [(q.position, q.keyword_char, q.correct_choice) for q in questions] == [
            (0, "A", "B"),
            (1, "I", "D"),
        ]

    def test_count_mismatch(self):
        with pytest.raises(InvalidSetupError, match="needs 2 questions"):
            build_questions("AI", [make_record()])

    def test_positions_must_match_index(self):
        records = [make_record(), make_record()]
        records[1].position = 0
        with pytest.raises(InvalidSetupError):
            build_questions("AI", records)

    def test_explicit_positions_are_accepted(self):
        records = [make_record(), make_record()]
        for index, record in enumerate(records):
            record.position = index
        assert len(build_questions("AI", records)) == 2

    def test_missing_option(self):
        record = QuestionRecord(text="Q?", options={"A": "1", "B": "2", "C": "3"}, correct_answer="A")
        with pytest.raises(InvalidSetupError, match="exactly the options"):
            build_questions("X", [record])

    def test_blank_option_text(self):
        record = make_record()
        record.options["C"] = "   "
        with pytest.raises(InvalidSetupError, match="empty option"):
            build_questions("X", [record])

    def test_blank_question_text(self):
        with pytest.raises(InvalidSetupError, match="no text"):
            build_questions("X", [make_record(text="  ")])

    def test_invalid_correct_answer(self):
        with pytest.raises(InvalidSetupError, match="correct answer"):
            build_questions("X", [make_record(correct="E")])

    def test_correct_answer_is_normalized(self):
        questions = build_questions("X", [make_record(correct=" c ")])
        assert questions[0].correct_choice == "C"

    def test_text_and_options_are_trimmed(self):
        record = make_record(text="  What is RAM?  ")
        record.options["A"] = "  Memory "
        question = build_questions("X", [record])[0]
        assert question.text == "What is RAM?"
        assert question.options["A"] == "Memory"
