"""Utilities for exporting a keyword game to the plain-text format used for imports."""

from __future__ import annotations

from pathlib import Path

from keyword_app.constants.game_constants import OPTION_LABELS
from keyword_app.core.models import Grade, QuestionRecord


def save_question_set(
    file_path: Path,
    keyword: str,
    grade: Grade,
    records: list[QuestionRecord],
) -> None:
    """Write the keyword, grade and questions to disk in the import format."""
    if not records:
        raise ValueError("Cannot export an empty question set.")

    file_path = file_path.resolve()
    file_path.parent.mkdir(parents=True, exist_ok=True)
    header = f"KEYWORD: {keyword.strip()}\nGRADE: {grade.value}"
    blocks = [_serialize_record(record) for record in records]
    file_path.write_text(header + "\n\n" + "\n\n---\n\n".join(blocks) + "\n", encoding="utf-8")


def _serialize_record(record: QuestionRecord) -> str:
    question_lines = record.text.splitlines() or [record.text]
    lines = [f"Q: {question_lines[0]}", *question_lines[1:]]
    for letter in OPTION_LABELS:
        option_lines = record.options.get(letter, "").splitlines() or [""]
        lines.append(f"{letter}: {option_lines[0]}")
        lines.extend(option_lines[1:])
    lines.append(f"CORRECT: {record.correct_answer}")
    return "\n".join(lines)
