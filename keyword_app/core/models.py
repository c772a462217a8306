"""Domain models for the keyword game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Grade(str, Enum):
    """School grade the questions are written for."""

    G10 = "10"
    G11 = "11"
    G12 = "12"


class GameStatus(str, Enum):
    """Lifecycle state of a game session."""

    SETUP = "setup"
    PLAYING = "playing"
    REVEALED = "revealed"
    SOLVED = "solved"


@dataclass(slots=True)
class QuestionRecord:
    """Question as produced by the generation service or an imported file."""

    text: str
    options: dict[str, str]
    correct_answer: str
    position: int | None = None


@dataclass(slots=True, frozen=True)
class Question:
    """Multiple-choice question bound to one character of the keyword."""

    position: int
    keyword_char: str
    text: str
    options: dict[str, str]
    correct_choice: str


@dataclass(slots=True, frozen=True)
class AnswerOutcome:
    """Result of submitting an answer for one tile."""

    position: int
    correct: bool
    accepted: bool  # False when the call was ignored (already revealed, wrong state)
    status: GameStatus


@dataclass(slots=True, frozen=True)
class TileView:
    """What one display slot of the board currently shows."""

    slot: int
    position: int
    char: str | None
    revealed: bool


@dataclass(slots=True, frozen=True)
class BoardSnapshot:
    """Observable state of the game handed to presentation layers."""

    status: GameStatus
    grade: Grade | None
    keyword_length: int
    tiles: list[TileView]
    revealed_count: int
    is_complete: bool
    roster_size: int
    blind_bag_open: bool = False  # closed in setup and once solved
    keyword: str | None = None  # only exposed once solved
