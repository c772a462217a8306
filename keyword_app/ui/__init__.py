"""Qt UI components for the teacher console."""

from .dialog_helpers import (
    confirm_back_to_setup,
    confirm_replace_questions,
    show_error,
    show_info,
    show_warning,
)
from .main_window import KeywordMainWindow

__all__ = [
    "KeywordMainWindow",
    "confirm_back_to_setup",
    "confirm_replace_questions",
    "show_error",
    "show_info",
    "show_warning",
]
