"""Request models validated at the front-end boundary."""

from pydantic import BaseModel, Field, ValidationError, field_validator

from media_pipeline.constants import (
    VALID_ASPECT_RATIOS,
    VALID_IMAGE_MODELS,
    AspectRatio,
    ImageModel,
)


class GenerationRequest(BaseModel):
    """A single image generation request."""

    prompt: str = Field(..., description="Detailed description of the image to generate")
    output_path: str | None = Field(default=None, description="Custom output file path")
    aspect_ratio: AspectRatio | None = Field(default=None, description="Image aspect ratio")
    model: ImageModel | None = Field(default=None, description="Model to use for generation")

    @field_validator("prompt")
    @classmethod
    def prompt_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("prompt must not be empty")
        return v


def describe_validation_error(error: ValidationError) -> str:
    """Turn a GenerationRequest validation error into a single readable message."""
    first = error.errors()[0]
    field = first["loc"][0] if first["loc"] else None
    value = first.get("input")

    if field == "aspect_ratio":
        return f"Invalid aspect ratio: {value}. Valid options: {', '.join(VALID_ASPECT_RATIOS)}"
    if field == "model":
        return f"Invalid model: {value}. Valid options: {', '.join(VALID_IMAGE_MODELS)}"
    if field == "prompt":
        return "Prompt must not be empty"
    return str(first["msg"])


def describe_settings_error(error: ValidationError) -> str:
    """Turn a Settings validation error into a message naming the offending variable."""
    first = error.errors()[0]
    field = str(first["loc"][0]) if first["loc"] else ""
    value = first.get("input")

    if field == "gemini_default_model":
        return (
            f"Invalid GEMINI_DEFAULT_MODEL: {value}. "
            f"Valid options: {', '.join(VALID_IMAGE_MODELS)}"
        )
    return f"Invalid {field.upper() or 'configuration'}: {first['msg']}"
