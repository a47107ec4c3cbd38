"""Gemini image-generation integration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from event_thumbnail.config import GeminiConfig
from event_thumbnail.types import GenerationRequest


@dataclass(slots=True)
class GeminiImageGenerator:
    """Generates event thumbnails with the google-genai async client."""

    config: GeminiConfig
    _client: Any = field(init=False, repr=False)
    _types: Any = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Initialize the Gemini client at construction."""
        try:
            from google import genai
            from google.genai import types
        except ImportError as error:
            raise RuntimeError("google-genai package is required for image generation.") from error

        self._client = genai.Client(api_key=self.config.api_key)
        self._types = types

    async def generate(self, request: GenerationRequest) -> Any:
        """Send the request and return the raw GenerateContentResponse."""
        config: Any = self._types.GenerateContentConfig(
            image_config=self._types.ImageConfig(aspect_ratio=request.aspect_ratio),
        )
        return await self._client.aio.models.generate_content(
            model=request.model,
            contents=[
                self._types.Content(
                    role="user",
                    parts=[self._types.Part.from_text(text=request.prompt)],
                )
            ],
            config=config,
        )
