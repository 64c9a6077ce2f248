"""
Multiple Choice Quiz Prompt
"""

from dataclasses import dataclass

from .base import AssessmentPrompt


@dataclass
class GenerateQuizPrompt(AssessmentPrompt):
    """Multiple choice questions with four options and the correct answer"""

    def render(self) -> str:
        return f"""
ROLE: Professional Assessment Developer.

TASK: Write {self.count} multiple choice questions testing the technical concepts in the document below.

RULES:
1. Never refer to the document itself ("Unit", "Syllabus", "Page", "Section", "PDF", "Text", "Mentioned").
2. Build questions from detailed explanations and facts, not from headings.
3. Give exactly 4 distinct, technically plausible options. Avoid "All of the above".
4. Do not ask about the order in which topics appear.
5. The correct answer must be copied verbatim from the options.

USER INSTRUCTIONS (take priority):
{self.instructions}

OUTPUT: Return ONLY a JSON array of objects:
[{{"question": "...", "options": ["...", "...", "...", "..."], "correctAnswer": "..."}}]

DOCUMENT:
{self.source_text}
"""
