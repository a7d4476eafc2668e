"""
Configuration management using pydantic-settings.
Loads from environment variables and ~/.env.local
"""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from media_pipeline.constants import DEFAULT_IMAGE_MODEL, DEFAULT_OUTPUT_DIR, ImageModel


class Settings(BaseSettings):
    """Process-wide settings, read once at startup and never mutated."""

    model_config = SettingsConfigDict(
        env_file=str(Path.home() / ".env.local"),
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # Logging
    log_level: str = "INFO"

    # Gemini
    gemini_api_key: str = ""
    gemini_default_model: ImageModel = DEFAULT_IMAGE_MODEL

    # Storage
    image_output_dir: Path = Path(DEFAULT_OUTPUT_DIR)

    @property
    def has_api_key(self) -> bool:
        """True when a non-blank Gemini API key is configured."""
        return bool(self.gemini_api_key.strip())


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
