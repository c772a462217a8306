"""Loading of teacher-supplied reference material for question generation.

Plain text and Word documents are reduced to text and embedded in the
prompt. PDFs and images are passed through untouched as inline data, since
the generation service reads those formats itself.
"""

from __future__ import annotations

from dataclasses import dataclass
import io
from pathlib import Path

import docx

_TEXT_SUFFIXES = {".txt", ".md"}
_INLINE_MIME_TYPES = {
    ".pdf": "application/pdf",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".webp": "image/webp",
    ".gif": "image/gif",
}


class ReferenceDocumentError(Exception):
    """Raised when a reference file cannot be used for question generation."""


@dataclass(slots=True, frozen=True)
class InlineDocument:
    """Binary document handed to the generation service as-is."""

    data: bytes
    mime_type: str


@dataclass(slots=True, frozen=True)
class ReferenceMaterial:
    """Either extracted text or an inline document, tagged with its file name."""

    name: str
    text: str | None = None
    document: InlineDocument | None = None


def load_reference(file_path: Path) -> ReferenceMaterial:
    suffix = file_path.suffix.lower()
    if suffix in _TEXT_SUFFIXES:
        return ReferenceMaterial(name=file_path.name, text=file_path.read_text(encoding="utf-8"))
    if suffix == ".docx":
        return ReferenceMaterial(name=file_path.name, text=extract_docx_text(file_path.read_bytes()))
    mime_type = _INLINE_MIME_TYPES.get(suffix)
    if mime_type is None:
        raise ReferenceDocumentError(f"Unsupported reference file type: '{file_path.suffix or file_path.name}'.")
    return ReferenceMaterial(
        name=file_path.name,
        document=InlineDocument(data=file_path.read_bytes(), mime_type=mime_type),
    )


def extract_docx_text(data: bytes) -> str:
    """Return the paragraph text of a Word document, one paragraph per line."""
    try:
        document = docx.Document(io.BytesIO(data))
    except Exception as exc:  # python-docx raises a mix of zipfile/lxml/KeyError on bad input
        raise ReferenceDocumentError("Could not read text from this Word document.") from exc
    paragraphs = [paragraph.text.strip() for paragraph in document.paragraphs]
    return "\n".join(text for text in paragraphs if text)
