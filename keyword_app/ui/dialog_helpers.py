"""Helper functions for common dialog patterns in the teacher UI."""

from __future__ import annotations

from PySide6.QtWidgets import QMessageBox, QWidget


def _ask(parent: QWidget, title: str, message: str) -> bool:
    reply = QMessageBox.question(
        parent,
        title,
        message,
        QMessageBox.Yes | QMessageBox.No,
        QMessageBox.No,
    )
    return reply == QMessageBox.Yes


def confirm_back_to_setup(parent: QWidget) -> bool:
    """Ask before discarding the running game.

    Returns:
        True if user confirmed, False otherwise
    """
    return _ask(
        parent,
        "Back to Setup",
        "Returning to setup ends this game. The keyword and questions stay in the form. Continue?",
    )


def confirm_replace_questions(parent: QWidget) -> bool:
    """Ask before regenerating or importing over edited questions."""
    return _ask(
        parent,
        "Replace Questions",
        "This will replace the current question list. Continue?",
    )


def show_error(parent: QWidget, title: str, message: str) -> None:
    QMessageBox.critical(parent, title, message)


def show_info(parent: QWidget, title: str, message: str) -> None:
    QMessageBox.information(parent, title, message)


def show_warning(parent: QWidget, title: str, message: str) -> None:
    QMessageBox.warning(parent, title, message)
