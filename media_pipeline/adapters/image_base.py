"""Base interface for image generation adapters."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from media_pipeline.constants import DEFAULT_MIME_TYPE


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of a single generation request.

    Exactly one variant is populated: ``base64_data``/``mime_type`` on success,
    ``error`` on failure.
    """

    success: bool
    base64_data: str | None = None
    mime_type: str | None = None
    error: str | None = None

    @classmethod
    def ok(cls, base64_data: str, mime_type: str | None = None) -> "GenerationResult":
        return cls(success=True, base64_data=base64_data, mime_type=mime_type or DEFAULT_MIME_TYPE)

    @classmethod
    def failed(cls, error: str) -> "GenerationResult":
        return cls(success=False, error=error)


class ImageAdapter(ABC):
    """Abstract base class for image generation adapters."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Return the provider name (e.g., 'gemini')."""
        ...

    @abstractmethod
    async def generate_image(
        self,
        prompt: str,
        aspect_ratio: str | None = None,
        model: str | None = None,
    ) -> GenerationResult:
        """Generate an image from a text prompt.

        Args:
            prompt: Text description of desired image. Callers guarantee it is non-empty.
            aspect_ratio: Optional shape hint (e.g., "16:9"). Omitted from the
                request entirely when None.
            model: Model identifier. Falls back to the adapter's default model.

        Returns:
            GenerationResult carrying base64 image data, or an error message.
            Implementations never raise for upstream failures.
        """
        ...
