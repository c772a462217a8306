"""Modal dialog that asks one tile's question."""

from __future__ import annotations

from PySide6.QtCore import QTimer
from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import QDialog, QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from keyword_app.constants.game_constants import CORRECT_ANSWER_CLOSE_DELAY_MS, OPTION_LABELS
from keyword_app.constants.ui_constants import QUESTION_DIALOG_CORRECT, QUESTION_DIALOG_WRONG
from keyword_app.core.errors import InvalidPositionError
from keyword_app.core.game_manager import GameManager
from keyword_app.core.markdown_renderer import renderer
from keyword_app.core.models import Question
from keyword_app.styling.color_palette import ColorPalette


class QuestionDialog(QDialog):
    """Shows the question with four option buttons.

    A wrong option is disabled so the class can try again; a correct one
    reveals the tile and closes the dialog shortly after.
    """

    def __init__(
        self,
        game_manager: GameManager,
        question: Question,
        font_size: int = 14,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.game_manager = game_manager
        self.question = question
        self._font_size = font_size
        self._wrong_choices: set[str] = set()
        self._answered = False

        self.setWindowTitle(f"Question {question.position + 1}")
        self.setModal(True)
        self.setMinimumSize(640, 480)
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.preview_view = QWebEngineView(self)
        self.preview_view.setHtml(
            renderer.render_document(
                renderer.render_fragment(self.question.text),
                title=self.windowTitle(),
                font_size=self._font_size,
            )
        )
        layout.addWidget(self.preview_view, stretch=1)

        self.option_buttons: dict[str, QPushButton] = {}
        for label in OPTION_LABELS:
            button = QPushButton(f"{label}.  {self.question.options[label]}", self)
            button.setStyleSheet(f"text-align: left; font-size: {self._font_size}pt; padding: 10px;")
            button.clicked.connect(lambda _checked=False, choice=label: self._handle_choice(choice))
            layout.addWidget(button)
            self.option_buttons[label] = button

        feedback_row = QHBoxLayout()
        self.feedback_label = QLabel("", self)
        feedback_row.addWidget(self.feedback_label)
        feedback_row.addStretch()
        self.close_button = QPushButton("Close", self)
        self.close_button.clicked.connect(self.reject)  # type: ignore[arg-type]
        feedback_row.addWidget(self.close_button)
        layout.addLayout(feedback_row)

    def _handle_choice(self, choice: str) -> None:
        if self._answered or choice in self._wrong_choices:
            return
        try:
            outcome = self.game_manager.submit_answer(self.question.position, choice)
        except (InvalidPositionError, RuntimeError):
            self.reject()
            return
        if not outcome.accepted:
            # Board moved on (reset or back to setup) while the dialog was open.
            self.reject()
            return
        if outcome.correct:
            self._answered = True
            for button in self.option_buttons.values():
                button.setEnabled(False)
            self.option_buttons[choice].setStyleSheet(
                f"text-align: left; font-size: {self._font_size}pt; padding: 10px; "
                f"background-color: {ColorPalette.SUCCESS.light}; color: white;"
            )
            self._show_feedback(QUESTION_DIALOG_CORRECT, ColorPalette.SUCCESS.light)
            QTimer.singleShot(CORRECT_ANSWER_CLOSE_DELAY_MS, self.accept)
            return
        self._wrong_choices.add(choice)
        self.option_buttons[choice].setEnabled(False)
        self._show_feedback(QUESTION_DIALOG_WRONG, ColorPalette.ERROR.light)

    def _show_feedback(self, message: str, color: str) -> None:
        self.feedback_label.setText(message)
        self.feedback_label.setStyleSheet(f"color: {color}; font-weight: bold; font-size: {self._font_size}pt;")
