"""Service for validating question records and binding them to keyword characters."""

from __future__ import annotations

from typing import Sequence

from keyword_app.constants.game_constants import OPTION_LABELS
from keyword_app.core.errors import InvalidSetupError
from keyword_app.core.models import Question, QuestionRecord


def build_questions(keyword: str, records: Sequence[QuestionRecord]) -> list[Question]:
    """Pair records with the keyword's characters in order.

    The service is expected to return exactly one record per character; only
    structural completeness is checked, never the content of a question.
    """
    if len(records) != len(keyword):
        raise InvalidSetupError(
            f"Keyword '{keyword}' needs {len(keyword)} questions but {len(records)} were supplied."
        )
    return [
        _prepare_question(index, keyword_char, record)
        for index, (keyword_char, record) in enumerate(zip(keyword, records))
    ]


def _prepare_question(index: int, keyword_char: str, record: QuestionRecord) -> Question:
    if record.position is not None and record.position != index:
        raise InvalidSetupError(
            f"Question positions must run 0..n-1 without gaps; found {record.position} at index {index}."
        )

    cleaned_text = (record.text or "").strip()
    if not cleaned_text:
        raise InvalidSetupError(f"Question {index + 1} has no text.")

    options = _validate_options(index, record.options)

    correct = (record.correct_answer or "").strip().upper()
    if correct not in OPTION_LABELS:
        raise InvalidSetupError(
            f"Question {index + 1}: correct answer must be one of {', '.join(OPTION_LABELS)}."
        )

    return Question(
        position=index,
        keyword_char=keyword_char,
        text=cleaned_text,
        options=options,
        correct_choice=correct,
    )


def _validate_options(index: int, options: dict[str, str] | None) -> dict[str, str]:
    options = options or {}
    if set(options) != set(OPTION_LABELS):
        raise InvalidSetupError(
            f"Question {index + 1} must define exactly the options {', '.join(OPTION_LABELS)}."
        )
    cleaned = {label: (options[label] or "").strip() for label in OPTION_LABELS}
    if any(not text for text in cleaned.values()):
        raise InvalidSetupError(f"Question {index + 1} has an empty option.")
    return cleaned
