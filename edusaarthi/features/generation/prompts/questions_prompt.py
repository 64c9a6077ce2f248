"""
Open-Ended Questions Prompt
"""

from dataclasses import dataclass

from .base import AssessmentPrompt


@dataclass
class GenerateQuestionsPrompt(AssessmentPrompt):
    """Conceptual open-ended questions, returned as a JSON array of strings"""

    def render(self) -> str:
        return f"""
ROLE: Senior Academic Examiner.

TASK: Write {self.count} conceptual, open-ended questions about the technical content and concrete details of the document below.

RULES:
1. Never refer to the document itself ("Unit", "Chapter", "PDF", "Text", "Syllabus", "Section", "Course", "Module").
2. Do not ask where something is discussed. Ask about the subject matter.
3. Skip organisational headings and target the explanations beneath them.
4. Prefer "how" and "why" questions over plain definitions.
5. Do not start with "According to the text". Test knowledge of the field.

USER INSTRUCTIONS (take priority):
{self.instructions}

OUTPUT: Return ONLY a JSON array of strings.

DOCUMENT:
{self.source_text}
"""
