"""Service for checking answers and tracking revealed keyword positions."""

from __future__ import annotations

from typing import Collection, Sequence

from keyword_app.constants.game_constants import OPTION_LABELS
from keyword_app.core.errors import InvalidPositionError
from keyword_app.core.models import Question


def is_complete(revealed: Collection[int], keyword: str) -> bool:
    """A keyword is fully revealed once every position has been answered."""
    return len(revealed) == len(keyword)


class ScoringEngine:
    """Checks choices against the answer key and records correct positions."""

    def __init__(self, questions: Sequence[Question]) -> None:
        self._questions = list(questions)
        self._keyword = "".join(question.keyword_char for question in self._questions)
        self._revealed: set[int] = set()

    def submit_answer(self, position: int, choice: str) -> bool:
        """Return whether ``choice`` is the correct option for ``position``.

        Repeat submissions are not rejected here; the game session guards
        already revealed tiles.
        """
        question = self._question_at(position)
        if choice not in OPTION_LABELS:
            raise ValueError(f"Choice must be one of {', '.join(OPTION_LABELS)}.")
        return choice == question.correct_choice

    def record_reveal(self, position: int) -> frozenset[int]:
        """Mark ``position`` as revealed; recording it again changes nothing."""
        self._question_at(position)
        self._revealed.add(position)
        return frozenset(self._revealed)

    def is_revealed(self, position: int) -> bool:
        return position in self._revealed

    def is_complete(self) -> bool:
        return is_complete(self._revealed, self._keyword)

    def get_revealed(self) -> frozenset[int]:
        return frozenset(self._revealed)

    def get_revealed_count(self) -> int:
        return len(self._revealed)

    def clear(self) -> None:
        self._revealed.clear()

    def _question_at(self, position: int) -> Question:
        if not 0 <= position < len(self._questions):
            raise InvalidPositionError(
                f"Position {position} is outside the keyword of length {len(self._questions)}."
            )
        return self._questions[position]
