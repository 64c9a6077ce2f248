"""
AI Provider Factory
Build the configured AI provider instance
"""

from functools import lru_cache
from typing import Optional

from ...core.config import settings
from ...core.logging import get_logger
from .base import TextGenerationProvider, AIProviderType
from .providers.google_ai import GoogleAIProvider

logger = get_logger(__name__)


class AIProviderFactory:
    """AI Provider Factory"""

    @staticmethod
    def get_text_provider(provider_type: Optional[str] = None) -> TextGenerationProvider:
        """Return the text generation provider, falling back to Google for unknown types"""
        ptype = provider_type or settings.ai_text_provider

        if ptype != AIProviderType.GOOGLE:
            logger.warning("Unknown AI text provider, falling back to google", provider=ptype)

        return GoogleAIProvider()


@lru_cache()
def get_ai_factory() -> AIProviderFactory:
    """Factory singleton"""
    return AIProviderFactory()
