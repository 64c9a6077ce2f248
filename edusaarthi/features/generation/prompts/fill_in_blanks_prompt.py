"""
Fill-in-the-Blanks Prompt
"""

from dataclasses import dataclass

from .base import AssessmentPrompt


@dataclass
class GenerateFillInBlanksPrompt(AssessmentPrompt):
    """Sentences with one blank each and the missing term"""

    def render(self) -> str:
        return f"""
ROLE: Professional Assessment Developer.

TASK: Write {self.count} fill-in-the-blank questions based on the document below.

RULES:
1. Never refer to the document itself ("Unit", "Section", "PDF", "Text").
2. Blank out specific technical terms or facts.
3. Each question contains exactly one blank written as "__________".

USER INSTRUCTIONS:
{self.instructions}

OUTPUT: Return ONLY a JSON array of objects:
[{{"question": "...", "answer": "..."}}]

DOCUMENT:
{self.source_text}
"""
