"""Notifications emitted by the game manager for presentation layers."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable

from keyword_app.core.models import GameStatus


class GameEvent(Enum):
    """Things a board or console may want to celebrate or react to."""

    STARTED = auto()
    ANSWER_CORRECT = auto()
    ANSWER_WRONG = auto()
    REVEALED = auto()
    SOLVED = auto()
    PROGRESS_RESET = auto()
    RETURNED_TO_SETUP = auto()
    STUDENT_PICKED = auto()


@dataclass(slots=True, frozen=True)
class GameNotification:
    event: GameEvent
    status: GameStatus
    position: int | None = None
    student_name: str | None = None


Listener = Callable[[GameNotification], None]


class EventBus:
    """Keeps listeners per event and delivers notifications in subscription order."""

    def __init__(self) -> None:
        self._listeners: dict[GameEvent, list[Listener]] = defaultdict(list)

    def subscribe(self, event: GameEvent, listener: Listener) -> None:
        self._listeners[event].append(listener)

    def unsubscribe(self, event: GameEvent, listener: Listener) -> None:
        if listener in self._listeners[event]:
            self._listeners[event].remove(listener)

    def publish(self, notifications: list[GameNotification]) -> None:
        for notification in notifications:
            for listener in list(self._listeners[notification.event]):
                listener(notification)
