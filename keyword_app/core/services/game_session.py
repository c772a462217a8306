"""Service holding the state of one keyword game and its transitions."""

from __future__ import annotations

import random

from keyword_app.core.errors import InvalidPositionError
from keyword_app.core.models import AnswerOutcome, GameStatus, Grade, Question, TileView
from keyword_app.core.services.roster_manager import RosterManager
from keyword_app.core.services.scoring_engine import ScoringEngine
from keyword_app.core.services.tile_mapper import display_char_at, init_layout, position_at


class GameSession:
    """A bound keyword with its questions, roster, reveals and tile layout.

    Created when a game starts and discarded on return to setup. Only the
    layout, the reveals and the status change during its lifetime.
    """

    def __init__(
        self,
        keyword: str,
        grade: Grade,
        questions: list[Question],
        roster: RosterManager,
        rng: random.Random,
    ) -> None:
        self._keyword = keyword
        self._grade = grade
        self._questions = list(questions)
        self._roster = roster
        self._rng = rng
        self._scoring = ScoringEngine(self._questions)
        self._scrambled_order: list[int] = init_layout(keyword, rng)
        self._status = GameStatus.PLAYING

    @property
    def keyword(self) -> str:
        return self._keyword

    @property
    def grade(self) -> Grade:
        return self._grade

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def roster(self) -> RosterManager:
        return self._roster

    def get_questions(self) -> list[Question]:
        return list(self._questions)

    def get_question(self, position: int) -> Question:
        self._check_position(position)
        return self._questions[position]

    def answer(self, position: int, choice: str) -> AnswerOutcome:
        """Score an answer, revealing the tile when it is correct.

        Answers for tiles that are already revealed, and any answer outside
        the playing state, are ignored and reported with ``accepted=False``.
        """
        self._check_position(position)
        if self._status != GameStatus.PLAYING or self._scoring.is_revealed(position):
            return AnswerOutcome(position=position, correct=False, accepted=False, status=self._status)

        correct = self._scoring.submit_answer(position, choice)
        if correct:
            self._scoring.record_reveal(position)
            if self._scoring.is_complete():
                self._status = GameStatus.REVEALED
        return AnswerOutcome(position=position, correct=correct, accepted=True, status=self._status)

    def solve(self) -> bool:
        if self._status != GameStatus.REVEALED:
            return False
        self._status = GameStatus.SOLVED
        return True

    def reset_progress(self) -> None:
        self._scoring.clear()
        self._scrambled_order = init_layout(self._keyword, self._rng)
        self._status = GameStatus.PLAYING

    def get_scrambled_order(self) -> list[int]:
        return list(self._scrambled_order)

    def get_revealed(self) -> frozenset[int]:
        return self._scoring.get_revealed()

    def is_complete(self) -> bool:
        return self._scoring.is_complete()

    def display_char_at(self, slot: int) -> str:
        return display_char_at(slot, self._scrambled_order, self._keyword, self._status)

    def position_at(self, slot: int) -> int:
        return position_at(slot, self._scrambled_order, self._status)

    def get_tiles(self) -> list[TileView]:
        tiles: list[TileView] = []
        for slot in range(len(self._keyword)):
            position = self.position_at(slot)
            revealed = self._status == GameStatus.SOLVED or self._scoring.is_revealed(position)
            tiles.append(
                TileView(
                    slot=slot,
                    position=position,
                    char=self.display_char_at(slot) if revealed else None,
                    revealed=revealed,
                )
            )
        return tiles

    def _check_position(self, position: int) -> None:
        if not 0 <= position < len(self._questions):
            raise InvalidPositionError(
                f"Position {position} is outside the keyword of length {len(self._questions)}."
            )
