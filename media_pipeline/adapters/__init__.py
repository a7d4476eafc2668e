"""Provider adapters for image generation."""

from media_pipeline.adapters.gemini_image import GeminiImageAdapter
from media_pipeline.adapters.image_base import GenerationResult, ImageAdapter

__all__ = ["GeminiImageAdapter", "GenerationResult", "ImageAdapter"]
