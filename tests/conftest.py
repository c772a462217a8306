"""Shared fixtures for the keyword game tests."""

import random

import pytest

from keyword_app.core.game_manager import GameManager
from keyword_app.core.models import Grade, QuestionRecord


def make_record(correct: str = "A", text: str = "Question?") -> QuestionRecord:
    return QuestionRecord(
        text=text,
        options={"A": "Option A", "B": "Option B", "C": "Option C", "D": "Option D"},
        correct_answer=correct,
    )


@pytest.fixture
def ai_records():
    """Two questions for keyword "AI": answer B for position 0, D for position 1."""
    return [
        make_record("B", "Which field studies machines that learn?"),
        make_record("D", "What does a CPU execute?"),
    ]


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def manager():
    return GameManager(shuffle_seed=42)


@pytest.fixture
def playing_manager(manager, ai_records):
    manager.start("a i", Grade.G10, ai_records, ["Anh", "Binh", "Chi"])
    return manager
