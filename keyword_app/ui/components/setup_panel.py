"""Component for setting the keyword, generating questions and editing them before play."""

from __future__ import annotations

import logging
from pathlib import Path
from threading import Thread
from typing import Callable

from PySide6.QtCore import QObject, Signal
from PySide6.QtWidgets import (
    QComboBox,
    QFileDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from keyword_app.constants.game_constants import DEFAULT_QUESTION_FILE, OPTION_LABELS
from keyword_app.constants.ui_constants import (
    EXPORT_DIALOG_TITLE,
    EXPORT_FILE_FILTER,
    IMPORT_DIALOG_TITLE,
    IMPORT_FILE_FILTER,
    NO_KEYWORD_MESSAGE,
    NO_QUESTIONS_MESSAGE,
    PLACEHOLDER_KEYWORD,
    PLACEHOLDER_QUESTION,
    PLACEHOLDER_ROSTER,
    REFERENCE_DIALOG_TITLE,
    REFERENCE_FILE_FILTER,
    SETUP_EXPORT_BUTTON,
    SETUP_GENERATE_BUTTON,
    SETUP_GENERATING_BUTTON,
    SETUP_IMPORT_BUTTON,
    SETUP_REFERENCE_BUTTON,
    SETUP_REGENERATE_BUTTON,
    SETUP_START_BUTTON,
)
from keyword_app.core.errors import InvalidSetupError, QuestionGenerationError
from keyword_app.core.models import Grade, QuestionRecord
from keyword_app.core.question_exporter import save_question_set
from keyword_app.core.question_generator import QuestionGenerator
from keyword_app.core.question_importer import QuestionImportError, load_question_set
from keyword_app.core.reference_document import ReferenceDocumentError, ReferenceMaterial, load_reference
from keyword_app.core.services.roster_manager import parse_roster
from keyword_app.core.services.tile_mapper import normalize_keyword
from keyword_app.ui.dialog_helpers import confirm_replace_questions, show_error, show_info, show_warning
from keyword_app.styling.styles import Styles

logger = logging.getLogger(__name__)

StartHandler = Callable[[str, Grade, list[QuestionRecord], list[str]], None]


class _GenerationBridge(QObject):
    """Carries worker-thread results back to the Qt thread."""

    finished = Signal(object)
    failed = Signal(str)


class SetupPanel(QWidget):
    """UI component for preparing a game: keyword, grade, roster and questions."""

    def __init__(self, on_start: StartHandler, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_start = on_start
        self._records: list[QuestionRecord] = []
        self._current_index: int = -1
        self._reference: ReferenceMaterial | None = None
        self._loading_fields = False
        self._generating = False
        self._last_export_path: Path | None = None

        self._bridge = _GenerationBridge(self)
        self._bridge.finished.connect(self._handle_generation_finished)
        self._bridge.failed.connect(self._handle_generation_failed)

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QHBoxLayout()
        self.setLayout(layout)

        settings_group = QGroupBox("Game settings", self)
        settings_layout = QVBoxLayout()
        settings_group.setLayout(settings_layout)

        settings_layout.addWidget(QLabel("Keyword:", self))
        self.keyword_input = QLineEdit(self)
        self.keyword_input.setPlaceholderText(PLACEHOLDER_KEYWORD)
        self.keyword_input.textChanged.connect(self._refresh_question_list)
        settings_layout.addWidget(self.keyword_input)

        settings_layout.addWidget(QLabel("Grade:", self))
        self.grade_combo = QComboBox(self)
        for grade in Grade:
            self.grade_combo.addItem(f"Grade {grade.value}", userData=grade.value)
        settings_layout.addWidget(self.grade_combo)

        settings_layout.addWidget(QLabel("Students (blind bag):", self))
        self.roster_input = QPlainTextEdit(self)
        self.roster_input.setPlaceholderText(PLACEHOLDER_ROSTER)
        settings_layout.addWidget(self.roster_input)

        self.reference_button = QPushButton(SETUP_REFERENCE_BUTTON, self)
        self.reference_button.clicked.connect(self._handle_choose_reference)
        settings_layout.addWidget(self.reference_button)
        self.reference_label = QLabel("No reference document.", self)
        self.reference_label.setWordWrap(True)
        settings_layout.addWidget(self.reference_label)

        self.generate_button = QPushButton(SETUP_GENERATE_BUTTON, self)
        self.generate_button.clicked.connect(self._handle_generate)
        settings_layout.addWidget(self.generate_button)

        file_row = QHBoxLayout()
        self.import_button = QPushButton(SETUP_IMPORT_BUTTON, self)
        self.import_button.clicked.connect(self._handle_import)
        file_row.addWidget(self.import_button)
        self.export_button = QPushButton(SETUP_EXPORT_BUTTON, self)
        self.export_button.clicked.connect(self._handle_export)
        file_row.addWidget(self.export_button)
        settings_layout.addLayout(file_row)

        self.start_button = QPushButton(SETUP_START_BUTTON, self)
        self.start_button.setStyleSheet(Styles.get_primary_button_style())
        self.start_button.clicked.connect(self._handle_start)
        settings_layout.addWidget(self.start_button)
        settings_layout.addStretch()

        layout.addWidget(settings_group, stretch=1)

        editor_group = QGroupBox("Questions", self)
        editor_layout = QVBoxLayout()
        editor_group.setLayout(editor_layout)

        self.question_list = QListWidget(self)
        self.question_list.currentRowChanged.connect(self._handle_select_question)
        editor_layout.addWidget(self.question_list, stretch=1)

        self.question_input = QPlainTextEdit(self)
        self.question_input.setPlaceholderText(PLACEHOLDER_QUESTION)
        self.question_input.textChanged.connect(self._handle_field_edited)
        editor_layout.addWidget(self.question_input)

        self.option_inputs: dict[str, QLineEdit] = {}
        for label in OPTION_LABELS:
            option_input = QLineEdit(self)
            option_input.setPlaceholderText(f"Option {label}")
            option_input.textChanged.connect(self._handle_field_edited)
            editor_layout.addWidget(option_input)
            self.option_inputs[label] = option_input

        correct_row = QHBoxLayout()
        correct_row.addWidget(QLabel("Correct option:", self))
        self.correct_combo = QComboBox(self)
        for label in OPTION_LABELS:
            self.correct_combo.addItem(label, userData=label)
        self.correct_combo.currentIndexChanged.connect(self._handle_field_edited)
        correct_row.addWidget(self.correct_combo)
        correct_row.addStretch()
        editor_layout.addLayout(correct_row)

        self.status_label = QLabel("No questions yet. Enter a keyword and generate them with AI.", self)
        self.status_label.setWordWrap(True)
        editor_layout.addWidget(self.status_label)

        layout.addWidget(editor_group, stretch=2)
        self._set_editor_enabled(False)

    # --- Reference and generation ---

    def _handle_choose_reference(self) -> None:
        file_path, _ = QFileDialog.getOpenFileName(
            self, REFERENCE_DIALOG_TITLE, str(Path.home()), REFERENCE_FILE_FILTER
        )
        if not file_path:
            return
        try:
            self._reference = load_reference(Path(file_path))
        except (OSError, UnicodeDecodeError, ReferenceDocumentError) as exc:
            show_error(self, "Reference rejected", str(exc))
            return
        suffix = " (text extracted)" if self._reference.text is not None else ""
        self.reference_label.setText(f"{self._reference.name}{suffix}")

    def _handle_generate(self) -> None:
        if self._generating:
            return
        keyword = self.keyword_input.text()
        if not keyword.strip():
            show_warning(self, "No keyword", NO_KEYWORD_MESSAGE)
            return
        if self._records and not confirm_replace_questions(self):
            return
        try:
            generator = QuestionGenerator()
        except QuestionGenerationError as exc:
            show_error(self, "AI unavailable", str(exc))
            return

        grade = self.current_grade()
        reference = self._reference
        self._set_generating(True)

        def run() -> None:
            try:
                records = generator.generate(keyword, grade, reference)
            except (QuestionGenerationError, InvalidSetupError) as exc:
                logger.warning("Question generation failed: %s", exc)
                self._bridge.failed.emit(str(exc))
                return
            except Exception as exc:
                logger.exception("Unexpected error during question generation")
                self._bridge.failed.emit(str(exc))
                return
            finally:
                generator.close()
            self._bridge.finished.emit(records)

        Thread(target=run, name="QuestionGeneration", daemon=True).start()

    def _handle_generation_finished(self, records: list) -> None:
        self._set_generating(False)
        self.set_records(records)
        self.status_label.setText(f"Generated {len(records)} questions. Review them before starting.")

    def _handle_generation_failed(self, message: str) -> None:
        self._set_generating(False)
        show_error(self, "Generation failed", f"Could not create questions. Try again later.\n\n{message}")

    def _set_generating(self, generating: bool) -> None:
        self._generating = generating
        self.generate_button.setEnabled(not generating)
        self.start_button.setEnabled(not generating)
        if generating:
            self.generate_button.setText(SETUP_GENERATING_BUTTON)
        else:
            self.generate_button.setText(SETUP_REGENERATE_BUTTON if self._records else SETUP_GENERATE_BUTTON)

    # --- Import / export ---

    def _handle_import(self) -> None:
        if self._records and not confirm_replace_questions(self):
            return
        file_path, _ = QFileDialog.getOpenFileName(self, IMPORT_DIALOG_TITLE, str(Path.home()), IMPORT_FILE_FILTER)
        if file_path:
            self.import_from_path(Path(file_path))

    def import_from_path(self, path: Path, quiet: bool = False) -> bool:
        try:
            imported = load_question_set(path)
        except (OSError, UnicodeDecodeError, QuestionImportError) as exc:
            if quiet:
                logger.warning("Could not load %s: %s", path, exc)
            else:
                show_error(self, "Import failed", str(exc))
            return False
        if imported.keyword:
            self.keyword_input.setText(imported.keyword)
        if imported.grade:
            self.grade_combo.setCurrentIndex(list(Grade).index(imported.grade))
        self.set_records(imported.records)
        self.status_label.setText(f"Imported {len(imported.records)} questions from {path.name}.")
        return True

    def _handle_export(self) -> None:
        if not self._records:
            show_warning(self, "No questions", NO_QUESTIONS_MESSAGE)
            return
        default_path = self._last_export_path or (Path.cwd() / DEFAULT_QUESTION_FILE)
        file_path, _ = QFileDialog.getSaveFileName(self, EXPORT_DIALOG_TITLE, str(default_path), EXPORT_FILE_FILTER)
        if not file_path:
            return
        try:
            save_question_set(Path(file_path), self.keyword_input.text(), self.current_grade(), self._records)
        except (OSError, ValueError) as exc:
            show_error(self, "Export failed", str(exc))
            return
        self._last_export_path = Path(file_path)
        show_info(self, "Questions saved", f"Questions exported to {file_path}.")

    # --- Start ---

    def _handle_start(self) -> None:
        if not self.keyword_input.text().strip():
            show_warning(self, "No keyword", NO_KEYWORD_MESSAGE)
            return
        if not self._records:
            show_warning(self, "No questions", NO_QUESTIONS_MESSAGE)
            return
        roster = parse_roster(self.roster_input.toPlainText())
        self.on_start(self.keyword_input.text(), self.current_grade(), list(self._records), roster)

    def current_grade(self) -> Grade:
        return Grade(self.grade_combo.currentData())

    # --- Question editing ---

    def set_records(self, records: list[QuestionRecord]) -> None:
        self._records = [
            QuestionRecord(text=record.text, options=dict(record.options), correct_answer=record.correct_answer)
            for record in records
        ]
        self._current_index = -1
        self._refresh_question_list()
        if self._records:
            self.question_list.setCurrentRow(0)
        self._set_generating(False)

    def _refresh_question_list(self) -> None:
        try:
            chars = normalize_keyword(self.keyword_input.text())
        except InvalidSetupError:
            chars = ""
        selected = self._current_index
        self.question_list.blockSignals(True)
        self.question_list.clear()
        for index, record in enumerate(self._records):
            char = chars[index] if index < len(chars) else "?"
            first_line = record.text.splitlines()[0] if record.text else ""
            self.question_list.addItem(f"{index + 1}. [{char}] {first_line}")
        if 0 <= selected < len(self._records):
            self.question_list.setCurrentRow(selected)
        self.question_list.blockSignals(False)
        if chars and self._records and len(chars) != len(self._records):
            self.status_label.setText(
                f"The keyword has {len(chars)} letters but there are {len(self._records)} questions."
            )

    def _handle_select_question(self, row: int) -> None:
        self._current_index = row
        if not 0 <= row < len(self._records):
            self._set_editor_enabled(False)
            return
        record = self._records[row]
        self._loading_fields = True
        self.question_input.setPlainText(record.text)
        for label, field in self.option_inputs.items():
            field.setText(record.options.get(label, ""))
        self.correct_combo.setCurrentIndex(OPTION_LABELS.index(record.correct_answer))
        self._loading_fields = False
        self._set_editor_enabled(True)

    def _handle_field_edited(self) -> None:
        if self._loading_fields or not 0 <= self._current_index < len(self._records):
            return
        record = self._records[self._current_index]
        record.text = self.question_input.toPlainText()
        record.options = {label: field.text() for label, field in self.option_inputs.items()}
        record.correct_answer = self.correct_combo.currentData()
        item = self.question_list.item(self._current_index)
        if item is not None:
            prefix = item.text().split("] ", 1)[0]
            first_line = record.text.splitlines()[0] if record.text else ""
            item.setText(f"{prefix}] {first_line}")

    def _set_editor_enabled(self, enabled: bool) -> None:
        self.question_input.setEnabled(enabled)
        for field in self.option_inputs.values():
            field.setEnabled(enabled)
        self.correct_combo.setEnabled(enabled)

    def apply_font_size(self, font_size: int) -> None:
        style = f"font-size: {font_size}pt;"
        for button in (
            self.reference_button,
            self.generate_button,
            self.import_button,
            self.export_button,
        ):
            button.setStyleSheet(style)
