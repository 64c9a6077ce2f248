"""
Subjective Questions Prompt
"""

from dataclasses import dataclass

from .base import AssessmentPrompt


@dataclass
class GenerateSubjectivePrompt(AssessmentPrompt):
    """Short/long answer questions with a suggested answer and grading key points"""

    def render(self) -> str:
        return f"""
ROLE: Senior Academic Examiner.

TASK: Write {self.count} subjective (short or long answer) questions based on the document below.

RULES:
1. Never refer to the document itself.
2. Ask questions that require understanding the details, not recall of headings.
3. Provide a "suggestedAnswer" and a list of "keyPoints" for grading.

USER INSTRUCTIONS:
{self.instructions}

OUTPUT: Return ONLY a JSON array of objects:
[{{"question": "...", "suggestedAnswer": "...", "keyPoints": ["...", "..."]}}]

DOCUMENT:
{self.source_text}
"""
