"""Shared constants used across the application."""

from typing import Literal

# =============================================================================
# Model Constants - SINGLE SOURCE OF TRUTH
# =============================================================================
# Update these when new image model versions are released.

GEMINI_IMAGE_PRO = "gemini-3-pro-image-preview"  # Higher quality
GEMINI_IMAGE_FLASH = "gemini-2.5-flash-image"  # Faster generation

DEFAULT_IMAGE_MODEL = GEMINI_IMAGE_PRO

ImageModel = Literal["gemini-3-pro-image-preview", "gemini-2.5-flash-image"]

VALID_IMAGE_MODELS: tuple[str, ...] = (GEMINI_IMAGE_PRO, GEMINI_IMAGE_FLASH)


# =============================================================================
# Aspect Ratios
# =============================================================================

AspectRatio = Literal["1:1", "2:3", "3:2", "3:4", "4:3", "16:9", "9:16"]

VALID_ASPECT_RATIOS: tuple[str, ...] = ("1:1", "2:3", "3:2", "3:4", "4:3", "16:9", "9:16")

DEFAULT_ASPECT_RATIO = "1:1"


# =============================================================================
# Image Files
# =============================================================================

DEFAULT_MIME_TYPE = "image/png"

MIME_EXTENSIONS: dict[str, str] = {
    "image/png": ".png",
    "image/jpeg": ".jpg",
    "image/webp": ".webp",
    "image/gif": ".gif",
}

DEFAULT_EXTENSION = ".png"

GENERATED_FILENAME_PREFIX = "generated-"

DEFAULT_OUTPUT_DIR = "./generated-images"
