"""Utilities for importing a prepared keyword game from a human-friendly text file.

File format (an optional header, then one question block per keyword character
in order, separated by '---' or, in files without '---', by blank lines):

    KEYWORD: AI
    GRADE: 10

    Q: Question text (supports markdown). Additional lines until the
       next marker are treated as part of the question.
    A: First option text
    B: Second option text
    C: Third option text
    D: Fourth option text
    CORRECT: A|B|C|D

A saved file lets the teacher rerun a game without calling the AI service.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from keyword_app.constants.game_constants import OPTION_LABELS
from keyword_app.core.models import Grade, QuestionRecord


class QuestionImportError(Exception):
    """Raised when a question file cannot be parsed."""


@dataclass(slots=True)
class ImportedQuestionSet:
    """Container for an imported keyword, grade and question records."""

    source_path: Path
    keyword: str | None
    grade: Grade | None
    records: list[QuestionRecord]


_HEADER_KEYS = ("KEYWORD:", "GRADE:")


def load_question_set(file_path: Path) -> ImportedQuestionSet:
    text = file_path.read_text(encoding="utf-8")
    keyword, grade, records = parse_question_text(text)
    if not records:
        raise QuestionImportError("Question file did not contain any questions.")
    return ImportedQuestionSet(source_path=file_path, keyword=keyword, grade=grade, records=records)


def parse_question_text(text: str) -> tuple[str | None, Grade | None, list[QuestionRecord]]:
    keyword: str | None = None
    grade: Grade | None = None
    blocks: list[str] = []
    current_block: list[str] = []
    lines = text.splitlines()
    # Files written by the exporter separate blocks with ---, so blank lines are paragraph breaks.
    dash_separated = any(line.strip() == "---" for line in lines)

    for index, raw_line in enumerate(lines):
        stripped = raw_line.strip()
        upper = stripped.upper()
        if not current_block and upper.startswith(_HEADER_KEYS):
            value = stripped.split(":", 1)[1].strip()
            if upper.startswith("KEYWORD:"):
                keyword = value or None
            else:
                grade = _parse_grade(value)
            continue
        if stripped == "---":
            if current_block:
                blocks.append("\n".join(current_block).strip())
                current_block = []
            continue
        if stripped:
            current_block.append(raw_line)
        elif current_block and (dash_separated or not _starts_new_block(lines, index + 1)):
            current_block.append("")
        elif current_block:
            blocks.append("\n".join(current_block).strip())
            current_block = []
    if current_block:
        blocks.append("\n".join(current_block).strip())

    records = [_parse_block(block) for block in blocks if block]
    return keyword, grade, records


def _starts_new_block(lines: list[str], start: int) -> bool:
    for line in lines[start:]:
        stripped = line.strip()
        if stripped:
            return stripped.upper().startswith("Q:")
    return True


def _parse_grade(value: str) -> Grade:
    try:
        return Grade(value)
    except ValueError as exc:
        choices = ", ".join(grade.value for grade in Grade)
        raise QuestionImportError(f"GRADE must be one of {choices}.") from exc


def _parse_block(block: str) -> QuestionRecord:
    question_lines: list[str] = []
    options: dict[str, str] = {}
    correct_letter: str | None = None
    current_section: str | None = None

    for raw_line in block.splitlines():
        line = raw_line.strip()
        if not line:
            if current_section == "Q":
                question_lines.append("")
            elif current_section in OPTION_LABELS:
                options[current_section] += "\n"
            continue

        upper = line.upper()
        if upper.startswith("Q:"):
            question_lines = [line[2:].strip()]
            current_section = "Q"
            continue

        if upper.startswith("CORRECT:"):
            correct_letter = line.split(":", 1)[1].strip().upper()
            current_section = None
            continue

        if len(line) > 2 and line[0].upper() in OPTION_LABELS and line[1] == ":":
            letter = line[0].upper()
            options[letter] = line[2:].strip()
            current_section = letter
            continue

        if current_section == "Q":
            question_lines.append(line)
        elif current_section in OPTION_LABELS:
            options[current_section] = options[current_section] + f"\n{line}"
        else:
            raise QuestionImportError(f"Encountered text outside of a known section: '{line}'.")

    question_text = "\n".join(question_lines).strip()
    if not question_text:
        raise QuestionImportError("Question text missing (Q: ...)")
    if len(options) != len(OPTION_LABELS):
        raise QuestionImportError("Each question must define exactly four options (A-D).")
    if any(not options[letter].strip() for letter in OPTION_LABELS):
        raise QuestionImportError("Option text cannot be empty.")
    if correct_letter is None:
        raise QuestionImportError("Each question needs a CORRECT: line.")
    if correct_letter not in OPTION_LABELS:
        raise QuestionImportError("CORRECT must be one of A, B, C, or D.")

    return QuestionRecord(
        text=question_text,
        options={letter: options[letter].strip() for letter in OPTION_LABELS},
        correct_answer=correct_letter,
    )
