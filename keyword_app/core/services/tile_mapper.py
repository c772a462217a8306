"""Keyword normalization and the mapping between display slots and keyword positions.

During play the board shows tiles in scrambled order: slot ``s`` holds the
letter at canonical position ``scrambled_order[s]``. Once the keyword is
solved the board switches to reading order and slot ``s`` shows position
``s``. All slot lookups go through :func:`position_at` so the two modes
cannot drift apart.
"""

from __future__ import annotations

import random

from keyword_app.core.errors import EmptyKeywordError, InvalidPositionError
from keyword_app.core.models import GameStatus
from keyword_app.core.shuffler import fisher_yates_shuffle


def normalize_keyword(raw: str) -> str:
    """Remove all whitespace and uppercase the keyword."""
    keyword = "".join((raw or "").split()).upper()
    if not keyword:
        raise EmptyKeywordError("Keyword must contain at least one non-space character.")
    return keyword


def init_layout(keyword: str, rng: random.Random | None = None) -> list[int]:
    """Return a fresh scrambled order for the keyword's positions."""
    return fisher_yates_shuffle(range(len(keyword)), rng)


def position_at(slot: int, scrambled_order: list[int], status: GameStatus) -> int:
    """Return the canonical keyword position shown in ``slot``."""
    if status == GameStatus.SETUP:
        raise RuntimeError("No keyword is bound while the game is in setup.")
    if not 0 <= slot < len(scrambled_order):
        raise InvalidPositionError(f"Slot {slot} is outside the board of {len(scrambled_order)} tiles.")
    if status == GameStatus.SOLVED:
        return slot
    return scrambled_order[slot]


def display_char_at(slot: int, scrambled_order: list[int], keyword: str, status: GameStatus) -> str:
    """Return the keyword character occupying ``slot`` in the current display mode."""
    return keyword[position_at(slot, scrambled_order, status)]
