"""Business logic for the keyword game shared between the Qt console and the API."""

from __future__ import annotations

import logging
import random
from threading import Lock
from typing import Sequence

from keyword_app.core.errors import EmptyRosterError, InvalidSetupError
from keyword_app.core.events import EventBus, GameEvent, GameNotification, Listener
from keyword_app.core.models import (
    AnswerOutcome,
    BoardSnapshot,
    GameStatus,
    Grade,
    Question,
    QuestionRecord,
    TileView,
)
from keyword_app.core.services.game_session import GameSession
from keyword_app.core.services.question_set import build_questions
from keyword_app.core.services.roster_manager import RosterManager
from keyword_app.core.services.tile_mapper import normalize_keyword

logger = logging.getLogger(__name__)


class GameManager:
    """Facade owning the single game session; every action runs under one lock.

    Notifications are published after the lock is released so listeners may
    query the manager again.
    """

    def __init__(self, shuffle_seed: int | None = None) -> None:
        self._lock = Lock()
        self._rng = random.Random(shuffle_seed)
        self._session: GameSession | None = None
        self._events = EventBus()

    # --- Notifications ---

    def subscribe(self, event: GameEvent, listener: Listener) -> None:
        with self._lock:
            self._events.subscribe(event, listener)

    def unsubscribe(self, event: GameEvent, listener: Listener) -> None:
        with self._lock:
            self._events.unsubscribe(event, listener)

    # --- Actions ---

    def start(
        self,
        keyword: str,
        grade: Grade | str | int,
        questions: Sequence[QuestionRecord],
        roster: Sequence[str] = (),
    ) -> BoardSnapshot:
        """Bind a keyword and its questions and begin play."""
        with self._lock:
            if self._session is not None:
                raise RuntimeError("A game is already running; return to setup first.")
            try:
                normalized = normalize_keyword(keyword)
                bound_grade = grade if isinstance(grade, Grade) else Grade(str(grade))
            except ValueError as exc:
                logger.warning("Rejected game setup: %s", exc)
                raise InvalidSetupError(str(exc)) from exc
            try:
                bound_questions = build_questions(normalized, questions)
            except InvalidSetupError as exc:
                logger.warning("Rejected game setup: %s", exc)
                raise
            self._session = GameSession(
                keyword=normalized,
                grade=bound_grade,
                questions=bound_questions,
                roster=RosterManager(list(roster), rng=self._rng),
                rng=self._rng,
            )
            logger.info(
                "Game started: %d tiles, grade %s, %d students",
                len(normalized),
                bound_grade.value,
                self._session.roster.remaining(),
            )
            snapshot = self._snapshot()
            notifications = [GameNotification(GameEvent.STARTED, GameStatus.PLAYING)]
        self._events.publish(notifications)
        return snapshot

    def submit_answer(self, position: int, choice: str) -> AnswerOutcome:
        notifications: list[GameNotification] = []
        with self._lock:
            if self._session is None:
                return AnswerOutcome(position=position, correct=False, accepted=False, status=GameStatus.SETUP)
            outcome = self._session.answer(position, choice)
            if outcome.accepted:
                event = GameEvent.ANSWER_CORRECT if outcome.correct else GameEvent.ANSWER_WRONG
                notifications.append(GameNotification(event, outcome.status, position=position))
                if outcome.correct and outcome.status == GameStatus.REVEALED:
                    logger.info("All %d tiles revealed", len(self._session.keyword))
                    notifications.append(GameNotification(GameEvent.REVEALED, outcome.status))
            else:
                logger.debug("Ignored answer for position %d in %s", position, outcome.status.value)
        self._events.publish(notifications)
        return outcome

    def solve(self) -> GameStatus:
        notifications: list[GameNotification] = []
        with self._lock:
            if self._session is None:
                return GameStatus.SETUP
            if self._session.solve():
                logger.info("Keyword solved")
                notifications.append(GameNotification(GameEvent.SOLVED, GameStatus.SOLVED))
            status = self._session.status
        self._events.publish(notifications)
        return status

    def reset_progress(self) -> GameStatus:
        """Clear reveals and reshuffle the tiles, keeping keyword, questions and roster."""
        notifications: list[GameNotification] = []
        with self._lock:
            if self._session is None:
                return GameStatus.SETUP
            self._session.reset_progress()
            logger.info("Progress reset; tiles reshuffled")
            notifications.append(GameNotification(GameEvent.PROGRESS_RESET, GameStatus.PLAYING))
            status = self._session.status
        self._events.publish(notifications)
        return status

    def back_to_setup(self) -> GameStatus:
        notifications: list[GameNotification] = []
        with self._lock:
            if self._session is not None:
                self._session = None
                logger.info("Returned to setup; session discarded")
                notifications.append(GameNotification(GameEvent.RETURNED_TO_SETUP, GameStatus.SETUP))
        self._events.publish(notifications)
        return GameStatus.SETUP

    def pick_student(self) -> str:
        """Draw one remaining student at random; each name comes up at most once."""
        with self._lock:
            if self._session is None:
                raise EmptyRosterError("No game is running, so there is no student list.")
            name = self._session.roster.draw()
            status = self._session.status
            remaining = self._session.roster.remaining()
        logger.info("Picked a student; %d remaining", remaining)
        self._events.publish([GameNotification(GameEvent.STUDENT_PICKED, status, student_name=name)])
        return name

    # --- Queries ---

    def get_status(self) -> GameStatus:
        with self._lock:
            return self._session.status if self._session else GameStatus.SETUP

    def get_keyword(self) -> str | None:
        with self._lock:
            return self._session.keyword if self._session else None

    def get_grade(self) -> Grade | None:
        with self._lock:
            return self._session.grade if self._session else None

    def get_questions(self) -> list[Question]:
        with self._lock:
            return self._session.get_questions() if self._session else []

    def get_question(self, position: int) -> Question:
        with self._lock:
            return self._require_session().get_question(position)

    def get_question_for_slot(self, slot: int) -> Question:
        with self._lock:
            session = self._require_session()
            return session.get_question(session.position_at(slot))

    def display_char_at(self, slot: int) -> str:
        with self._lock:
            return self._require_session().display_char_at(slot)

    def get_tiles(self) -> list[TileView]:
        with self._lock:
            return self._session.get_tiles() if self._session else []

    def get_scrambled_order(self) -> list[int]:
        with self._lock:
            return self._session.get_scrambled_order() if self._session else []

    def get_revealed_positions(self) -> frozenset[int]:
        with self._lock:
            return self._session.get_revealed() if self._session else frozenset()

    def get_revealed_count(self) -> int:
        with self._lock:
            return len(self._session.get_revealed()) if self._session else 0

    def is_complete(self) -> bool:
        with self._lock:
            return self._session.is_complete() if self._session else False

    def get_roster(self) -> list[str]:
        with self._lock:
            return self._session.roster.get_names() if self._session else []

    def get_roster_size(self) -> int:
        with self._lock:
            return self._session.roster.remaining() if self._session else 0

    def get_snapshot(self) -> BoardSnapshot:
        with self._lock:
            return self._snapshot()

    # --- Settings ---

    def set_shuffle_seed(self, seed: int | None) -> None:
        with self._lock:
            self._rng.seed(seed)

    def _require_session(self) -> GameSession:
        if self._session is None:
            raise RuntimeError("No game is running.")
        return self._session

    def _snapshot(self) -> BoardSnapshot:
        session = self._session
        if session is None:
            return BoardSnapshot(
                status=GameStatus.SETUP,
                grade=None,
                keyword_length=0,
                tiles=[],
                revealed_count=0,
                is_complete=False,
                roster_size=0,
            )
        return BoardSnapshot(
            status=session.status,
            grade=session.grade,
            keyword_length=len(session.keyword),
            tiles=session.get_tiles(),
            revealed_count=len(session.get_revealed()),
            is_complete=session.is_complete(),
            roster_size=session.roster.remaining(),
            blind_bag_open=session.status != GameStatus.SOLVED,
            keyword=session.keyword if session.status == GameStatus.SOLVED else None,
        )
