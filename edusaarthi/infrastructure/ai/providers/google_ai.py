"""
Google AI Provider
Text generation with Google Gemini
"""

from typing import Optional

from google import genai
from google.genai import types

from ..base import TextGenerationProvider
from ....core.config import settings


class GoogleAIProvider(TextGenerationProvider):
    """
    Google AI (Gemini) Provider
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model_name: Optional[str] = None,
        temperature: Optional[float] = None,
    ):
        """
        Args:
            api_key: Google API Key (settings when None)
            model_name: Gemini model (settings when None)
            temperature: default sampling temperature
        """
        self.api_key = api_key or settings.google_api_key
        self._model_name = model_name or settings.ai_model_name
        self.temperature = temperature if temperature is not None else settings.ai_temperature
        self.client: Optional[genai.Client] = None

    def _init_client(self) -> genai.Client:
        """Create the google-genai client on first use"""
        if not self.client:
            self.client = genai.Client(api_key=self.api_key)
        return self.client

    @property
    def model_name(self) -> str:
        return self._model_name

    async def generate_text(
        self,
        prompt: str,
        temperature: Optional[float] = None,
    ) -> str:
        client = self._init_client()
        response = await client.aio.models.generate_content(
            model=self._model_name,
            contents=prompt,
            config=types.GenerateContentConfig(
                temperature=temperature if temperature is not None else self.temperature,
            ),
        )
        return response.text or ""
