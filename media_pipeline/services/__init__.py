"""Service layer for media-pipeline."""

from media_pipeline.services.image_storage import ImageStorage, SaveResult

__all__ = ["ImageStorage", "SaveResult"]
