"""
Email Formatter
Renders generated content as a self-contained HTML report
"""

from html import escape
from string import ascii_uppercase
from typing import List, Optional

from edusaarthi.features.generation.schemas import (
    FillInBlanksContent,
    GeneratedContent,
    QuestionsContent,
    QuizContent,
    SubjectiveContent,
    TrueFalseContent,
)

EMPTY_PLACEHOLDER = "Your document was processed successfully. No items were generated for this task."
DEGRADED_NOTICE = "Automatic generation was not fully available for this document. The items below are general suggestions."

_CONTAINER = '<div style="font-family: sans-serif; padding: 20px; color: #333;">'
_RULE = '<hr style="border: 0; border-top: 1px solid #eee; margin: 20px 0;">'
_CARD = '<div class="item" style="background: #f9fafb; padding: 15px; border-radius: 8px; border: 1px solid #e5e7eb; margin-bottom: 12px;">'
_ANSWER = '<p class="answer" style="color: #059669; margin: 8px 0 0;"><strong>Answer:</strong> {}</p>'


def _option_letter(index: int) -> str:
    # A..Z, then AA, AB, ... for unusually long option lists
    if index < len(ascii_uppercase):
        return ascii_uppercase[index]
    return _option_letter(index // len(ascii_uppercase) - 1) + ascii_uppercase[index % len(ascii_uppercase)]


class EmailFormatter:
    """HTML report renderer, one branch per content type"""

    def render_report(
        self,
        title: str,
        content: Optional[GeneratedContent],
        file_name: str,
    ) -> str:
        """
        Render the email body

        Args:
            title: report title
            content: generated content (None or empty data renders a placeholder)
            file_name: source document display name

        Returns:
            str: HTML document
        """
        parts = [
            _CONTAINER,
            f'<h2 style="color: #6366f1;">{escape(title)}</h2>',
            f"<p>Scheduled Automation Result for: <strong>{escape(file_name or '')}</strong></p>",
            _RULE,
        ]

        if content is not None and content.degraded:
            parts.append(f'<p class="notice" style="color: #b45309;">{DEGRADED_NOTICE}</p>')

        if content is None or not content.data:
            parts.append(f'<p class="placeholder">{EMPTY_PLACEHOLDER}</p>')
        else:
            parts.extend(self._render_items(content))

        parts.extend([
            _RULE,
            '<p style="font-size: 0.8rem; color: #6b7280;">Sent via Edusaarthi AI</p>',
            "</div>",
        ])
        return "".join(parts)

    def _render_items(self, content: GeneratedContent) -> List[str]:
        if isinstance(content, QuestionsContent):
            return self._render_questions(content)
        if isinstance(content, QuizContent):
            return self._render_quiz(content)
        if isinstance(content, FillInBlanksContent):
            return self._render_fill_in_blanks(content)
        if isinstance(content, TrueFalseContent):
            return self._render_true_false(content)
        if isinstance(content, SubjectiveContent):
            return self._render_subjective(content)
        return [f'<p class="placeholder">{EMPTY_PLACEHOLDER}</p>']

    # ==================== Branches ====================

    def _render_questions(self, content: QuestionsContent) -> List[str]:
        parts = ["<p>The following questions were generated:</p><ol>"]
        for question in content.data:
            parts.append(f'<li class="item" style="margin-bottom: 10px;">{escape(question)}</li>')
        parts.append("</ol>")
        return parts

    def _render_quiz(self, content: QuizContent) -> List[str]:
        parts = ["<p>The following multiple choice quiz was generated:</p>"]
        for number, item in enumerate(content.data, start=1):
            parts.append(_CARD)
            parts.append(f"<p><strong>Q{number}.</strong> {escape(item.question)}</p>")
            parts.append('<ul style="list-style: none; padding-left: 0;">')
            for index, option in enumerate(item.options):
                weight = "bold" if option == item.correct_answer else "normal"
                parts.append(
                    f'<li style="font-weight: {weight};">{_option_letter(index)}. {escape(option)}</li>'
                )
            parts.append("</ul>")
            if item.correct_answer:
                parts.append(_ANSWER.format(escape(item.correct_answer)))
            parts.append("</div>")
        return parts

    def _render_fill_in_blanks(self, content: FillInBlanksContent) -> List[str]:
        parts = ["<p>The following fill-in-the-blank questions were generated:</p>"]
        for number, item in enumerate(content.data, start=1):
            parts.append(_CARD)
            parts.append(f"<p><strong>Q{number}.</strong> {escape(item.question)}</p>")
            if item.answer:
                parts.append(_ANSWER.format(escape(item.answer)))
            parts.append("</div>")
        return parts

    def _render_true_false(self, content: TrueFalseContent) -> List[str]:
        parts = ["<p>The following true/false statements were generated:</p>"]
        for number, item in enumerate(content.data, start=1):
            parts.append(_CARD)
            parts.append(f"<p><strong>Q{number}.</strong> {escape(item.question)}</p>")
            parts.append(_ANSWER.format("True" if item.answer else "False"))
            if item.explanation:
                parts.append(f'<p class="explanation" style="color: #6b7280;">{escape(item.explanation)}</p>')
            parts.append("</div>")
        return parts

    def _render_subjective(self, content: SubjectiveContent) -> List[str]:
        parts = ["<p>The following subjective questions were generated:</p>"]
        for number, item in enumerate(content.data, start=1):
            parts.append(_CARD)
            parts.append(f"<p><strong>Q{number}.</strong> {escape(item.question)}</p>")
            if item.suggested_answer:
                parts.append(
                    f"<p><strong>Suggested answer:</strong> {escape(item.suggested_answer)}</p>"
                )
            if item.key_points:
                parts.append("<p><strong>Key points:</strong></p><ul>")
                parts.extend(f"<li>{escape(point)}</li>" for point in item.key_points)
                parts.append("</ul>")
            parts.append("</div>")
        return parts
