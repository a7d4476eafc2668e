"""Gemini image generation adapter."""

import base64
import logging

from google import genai
from google.genai import types

from media_pipeline.adapters.image_base import GenerationResult, ImageAdapter
from media_pipeline.constants import DEFAULT_IMAGE_MODEL, DEFAULT_MIME_TYPE

logger = logging.getLogger(__name__)


def _is_rate_limited(error: Exception) -> bool:
    error_msg = str(error).lower()
    return "429" in error_msg or "rate limit" in error_msg or "quota" in error_msg


class GeminiImageAdapter(ImageAdapter):
    """Adapter for Gemini image generation."""

    def __init__(self, api_key: str, default_model: str = DEFAULT_IMAGE_MODEL):
        """Initialize Gemini image adapter.

        Args:
            api_key: Google API key.
            default_model: Model used when a request does not name one.
        """
        if not api_key:
            raise ValueError("Gemini API key not configured")
        self._default_model = default_model
        self._client = genai.Client(api_key=api_key)

    @property
    def provider_name(self) -> str:
        return "gemini"

    @property
    def default_model(self) -> str:
        return self._default_model

    def _build_config(self, aspect_ratio: str | None) -> types.GenerateContentConfig:
        if aspect_ratio:
            return types.GenerateContentConfig(
                response_modalities=["TEXT", "IMAGE"],
                image_config=types.ImageConfig(aspect_ratio=aspect_ratio),
            )
        return types.GenerateContentConfig(response_modalities=["TEXT", "IMAGE"])

    async def generate_image(
        self,
        prompt: str,
        aspect_ratio: str | None = None,
        model: str | None = None,
    ) -> GenerationResult:
        """Generate an image using Gemini.

        Only the first candidate is inspected, and the first part carrying
        inline data wins. Later parts and candidates are ignored.
        """
        model_name = model or self._default_model

        try:
            response = await self._client.aio.models.generate_content(
                model=model_name,
                contents=prompt,
                config=self._build_config(aspect_ratio),
            )
        except Exception as e:
            if _is_rate_limited(e):
                logger.warning(f"Gemini rate limit for {model_name}: {e}")
            else:
                logger.error(f"Gemini request failed for {model_name}: {e}")
            return GenerationResult.failed(f"Gemini API error: {e}")

        if not response.candidates:
            return GenerationResult.failed("No candidates in response")

        content = response.candidates[0].content
        if content is None or not content.parts:
            return GenerationResult.failed("No content parts in response")

        for part in content.parts:
            if part.inline_data and part.inline_data.data:
                # The SDK hands back decoded bytes; callers exchange base64 text
                encoded = base64.b64encode(part.inline_data.data).decode("ascii")
                mime_type = part.inline_data.mime_type or DEFAULT_MIME_TYPE
                logger.info(f"Generated {mime_type} image with {model_name}")
                return GenerationResult.ok(encoded, mime_type)

        return GenerationResult.failed("No image data found in response")
