"""Student roster parsing and random draws without replacement."""

from __future__ import annotations

import random
import re

from keyword_app.constants.game_constants import ROSTER_SEPARATORS
from keyword_app.core.errors import EmptyRosterError

_SEPARATOR_PATTERN = re.compile(f"[{re.escape(ROSTER_SEPARATORS)}]+")


def parse_roster(raw_text: str) -> list[str]:
    """Split free text on newlines, commas and semicolons into trimmed names."""
    if not raw_text:
        return []
    tokens = (token.strip() for token in _SEPARATOR_PATTERN.split(raw_text))
    return [token for token in tokens if token]


def draw_random(roster: list[str], rng: random.Random | None = None) -> tuple[str, list[str]]:
    """Pick one name uniformly and return it with the roster minus that one entry."""
    if not roster:
        raise EmptyRosterError("No students left to pick.")
    generator = rng or random.Random()
    index = generator.randrange(len(roster))
    remaining = list(roster)
    picked = remaining.pop(index)
    return picked, remaining


class RosterManager:
    """Holds the names still eligible for the blind bag."""

    def __init__(self, names: list[str], rng: random.Random | None = None) -> None:
        cleaned = [name.strip() for name in names if name.strip()]
        self._names = cleaned
        self._rng = rng or random.Random()

    @classmethod
    def from_text(cls, raw_text: str, rng: random.Random | None = None) -> "RosterManager":
        return cls(parse_roster(raw_text), rng=rng)

    def draw(self) -> str:
        picked, self._names = draw_random(self._names, self._rng)
        return picked

    def get_names(self) -> list[str]:
        return list(self._names)

    def remaining(self) -> int:
        return len(self._names)

    def is_empty(self) -> bool:
        return not self._names
