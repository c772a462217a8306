"""Markdown rendering helpers shared by the Qt console and the board page.

Question text from the AI service frequently contains inline code, bold
terms and short lists, so both clients render the same markdown through one
MarkdownIt instance instead of showing raw markup.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import html

from markdown_it import MarkdownIt

from keyword_app.constants.game_constants import OPTION_LABELS
from keyword_app.core.models import Question


@dataclass(slots=True)
class MarkdownRenderer:
    """Converts markdown into HTML fragments or full documents."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = (
            MarkdownIt("commonmark", {"html": self.enable_html})
            .enable("table")
            .enable("strikethrough")
        )

    def render_fragment(self, markdown_text: str) -> str:
        sanitized = (markdown_text or "").strip()
        if not sanitized:
            return "<p><em>No content provided.</em></p>"
        return self._markdown.render(sanitized)

    def render_inline(self, markdown_text: str) -> str:
        return self._markdown.renderInline((markdown_text or "").strip())

    def render_question(self, question: Question) -> str:
        """Render the prompt followed by the labelled options as one fragment."""
        items = "".join(
            f'<li data-choice="{label}"><strong>{label}.</strong> {self.render_inline(question.options[label])}</li>'
            for label in OPTION_LABELS
        )
        return f'{self.render_fragment(question.text)}<ol class="options" type="A">{items}</ol>'

    def render_document(self, body_html: str, title: str = "KeywordQt", font_size: int = 14) -> str:
        """Wrap a fragment in a minimal HTML document for QWebEngineView or QTextBrowser."""
        return f"""<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <title>{html.escape(title)}</title>
    <style>
      body {{ font-family: 'Segoe UI', system-ui, sans-serif; margin: 0; padding: 1rem; font-size: {font_size}pt; }}
      ol.options {{ list-style: none; padding-left: 0; }}
      ol.options li {{ margin: 0.35rem 0; }}
    </style>
  </head>
  <body>{body_html}</body>
</html>"""


renderer = MarkdownRenderer()
# Shared instance; MarkdownIt renders are read-only, so the Qt thread and the
# API thread can both use it.
