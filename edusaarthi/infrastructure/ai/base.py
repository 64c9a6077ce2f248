"""
AI Provider Abstract Base Classes
Interface every language model provider implements
"""

from abc import ABC, abstractmethod
from typing import Optional
from enum import Enum


class AIProviderType(str, Enum):
    """AI provider type"""

    GOOGLE = "google"


# ==================== Text Generation Provider ====================


class TextGenerationProvider(ABC):
    """
    Text generation provider interface

    Wraps one chat/completion model. Instances are created once at process
    start and shared by reference.
    """

    @property
    @abstractmethod
    def model_name(self) -> str:
        """Model identifier used for generation"""

    @abstractmethod
    async def generate_text(
        self,
        prompt: str,
        temperature: Optional[float] = None,
    ) -> str:
        """
        Run one model invocation

        Args:
            prompt: full prompt text
            temperature: sampling temperature (0.0~1.0), provider default when None

        Returns:
            str: raw model response text
        """
