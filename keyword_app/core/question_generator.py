"""Client for the Gemini API that writes one question per keyword character."""

from __future__ import annotations

import base64
import json
import logging
from typing import Any, Literal

import httpx
from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from keyword_app.core.errors import QuestionGenerationError
from keyword_app.core.models import Grade, QuestionRecord
from keyword_app.core.reference_document import ReferenceMaterial
from keyword_app.core.services.tile_mapper import normalize_keyword
from keyword_app.utils.settings import settings

logger = logging.getLogger(__name__)


class GeneratedOptions(BaseModel):
    A: str
    B: str
    C: str
    D: str


class GeneratedQuestion(BaseModel):
    """One question as the service returns it."""

    text: str
    options: GeneratedOptions
    correct_answer: Literal["A", "B", "C", "D"] = Field(alias="correctAnswer")


_QUESTION_LIST = TypeAdapter(list[GeneratedQuestion])

_RESPONSE_SCHEMA: dict[str, Any] = {
    "type": "ARRAY",
    "items": {
        "type": "OBJECT",
        "properties": {
            "text": {"type": "STRING", "description": "Question text"},
            "options": {
                "type": "OBJECT",
                "properties": {label: {"type": "STRING"} for label in ("A", "B", "C", "D")},
                "required": ["A", "B", "C", "D"],
            },
            "correctAnswer": {
                "type": "STRING",
                "enum": ["A", "B", "C", "D"],
                "description": "Label of the correct option",
            },
        },
        "required": ["text", "options", "correctAnswer"],
    },
}


def build_prompt(keyword: str, grade: Grade, *, has_document: bool, context_text: str | None) -> str:
    chars = list(keyword)
    lines = [
        f"Write {len(chars)} multiple-choice Computer Science questions for grade {grade.value} students.",
    ]
    if has_document:
        lines.append("Base the questions on the attached document.")
    if context_text:
        lines.append(f"Base the questions on the following text:\n\n{context_text}")
    lines.extend(
        [
            f'Each question\'s answer must be a concept related to one character of the keyword "{keyword}".',
            f"The characters, in order, are: {', '.join(chars)}.",
            "Keep the content accurate for the national secondary-school curriculum.",
            "Return a JSON array of question objects in that same order.",
        ]
    )
    return "\n".join(lines)


class QuestionGenerator:
    """Synchronous Gemini client; run it off the UI thread."""

    def __init__(
        self,
        api_key: str | None = None,
        *,
        model: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self.api_key = api_key or settings.gemini_api_key
        if not self.api_key:
            raise QuestionGenerationError("GEMINI_API_KEY is not configured")
        self.model = model or settings.gemini_model
        root = (base_url or settings.gemini_base_url).rstrip("/")
        self.url = f"{root}/{self.model}:generateContent"
        self._client = client or httpx.Client(timeout=timeout or settings.gemini_timeout_seconds)

    def generate(
        self,
        keyword: str,
        grade: Grade,
        reference: ReferenceMaterial | None = None,
        context_text: str | None = None,
    ) -> list[QuestionRecord]:
        normalized = normalize_keyword(keyword)
        document = reference.document if reference else None
        text = context_text or (reference.text if reference else None)

        parts: list[dict[str, Any]] = [
            {"text": build_prompt(normalized, grade, has_document=document is not None, context_text=text)}
        ]
        if document is not None:
            parts.append(
                {
                    "inlineData": {
                        "mimeType": document.mime_type,
                        "data": base64.b64encode(document.data).decode("ascii"),
                    }
                }
            )
        payload = {
            "contents": [{"role": "user", "parts": parts}],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": _RESPONSE_SCHEMA,
            },
        }

        logger.info("Requesting %d questions from %s", len(normalized), self.model)
        raw_text = self._post(payload)
        questions = self._parse(raw_text)
        if len(questions) != len(normalized):
            logger.warning("Service returned %d questions for %d characters", len(questions), len(normalized))
        return [
            QuestionRecord(
                text=question.text,
                options=question.options.model_dump(),
                correct_answer=question.correct_answer,
                position=index,
            )
            for index, question in enumerate(questions)
        ]

    def close(self) -> None:
        self._client.close()

    def _post(self, payload: dict[str, Any]) -> str:
        try:
            response = self._client.post(
                self.url,
                headers={"x-goog-api-key": self.api_key},
                json=payload,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise QuestionGenerationError(
                f"Question service returned HTTP {exc.response.status_code}."
            ) from exc
        except httpx.RequestError as exc:
            raise QuestionGenerationError(f"Could not reach the question service: {exc}") from exc
        try:
            data = response.json()
            return data["candidates"][0]["content"]["parts"][0]["text"]
        except (ValueError, KeyError, IndexError, TypeError) as exc:
            raise QuestionGenerationError(f"Unexpected response from the question service: {response.text[:200]}") from exc

    @staticmethod
    def _parse(raw_text: str) -> list[GeneratedQuestion]:
        try:
            return _QUESTION_LIST.validate_python(json.loads(raw_text or "[]"))
        except (json.JSONDecodeError, TypeError, ValidationError) as exc:
            raise QuestionGenerationError("The question service returned malformed questions.") from exc
