"""
Assessment Prompt Base
Shared inputs for every content generation prompt
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from edusaarthi.core.config import settings

NO_INSTRUCTIONS = "None provided."


@dataclass
class AssessmentPrompt(ABC):
    """
    Common prompt inputs

    Args:
        text: Source document text
        count: Requested number of items
        additional_instructions: Free-form user guidance (optional)
        max_input_chars: Source text is truncated to this length
    """

    text: str
    count: int = 5
    additional_instructions: str = ""
    max_input_chars: int = settings.generation_max_input_chars

    @property
    def source_text(self) -> str:
        return self.text[: self.max_input_chars]

    @property
    def instructions(self) -> str:
        return self.additional_instructions.strip() or NO_INSTRUCTIONS

    @abstractmethod
    def render(self) -> str:
        """Full prompt text sent to the model"""
