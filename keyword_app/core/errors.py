"""Exception types raised by the keyword game core."""

from __future__ import annotations


class KeywordGameError(Exception):
    """Base class for keyword game failures."""


class InvalidSetupError(KeywordGameError, ValueError):
    """Raised when a game cannot start from the supplied keyword and questions."""


class EmptyKeywordError(InvalidSetupError):
    """Raised when the keyword is empty once whitespace is removed."""


class EmptyRosterError(KeywordGameError, RuntimeError):
    """Raised when a student is drawn from an exhausted roster."""


class InvalidPositionError(KeywordGameError, IndexError):
    """Raised when a tile or question position falls outside the keyword."""


class QuestionGenerationError(KeywordGameError, RuntimeError):
    """Raised when the question-generation service fails or returns unusable data."""
