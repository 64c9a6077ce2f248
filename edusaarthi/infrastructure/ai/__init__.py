"""
AI Infrastructure Module
Language model provider abstraction
"""

from .base import AIProviderType, TextGenerationProvider

__all__ = [
    "AIProviderType",
    "TextGenerationProvider",
]
