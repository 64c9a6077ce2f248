"""
True/False Prompt
"""

from dataclasses import dataclass

from .base import AssessmentPrompt


@dataclass
class GenerateTrueFalsePrompt(AssessmentPrompt):
    """True/False statements with a boolean answer and an explanation"""

    def render(self) -> str:
        return f"""
ROLE: Professional Assessment Developer.

TASK: Write {self.count} true/false statements based on the document below.

RULES:
1. Never refer to the document itself.
2. Test specific claims or technical relationships from the document.
3. Explain why each statement is true or false.

USER INSTRUCTIONS:
{self.instructions}

OUTPUT: Return ONLY a JSON array of objects:
[{{"question": "...", "answer": true, "explanation": "..."}}]

DOCUMENT:
{self.source_text}
"""
