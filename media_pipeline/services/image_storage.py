"""Persist generated images to the local filesystem."""

import base64
import binascii
import logging
import uuid
from dataclasses import dataclass
from pathlib import Path

from media_pipeline.constants import (
    DEFAULT_EXTENSION,
    DEFAULT_MIME_TYPE,
    GENERATED_FILENAME_PREFIX,
    MIME_EXTENSIONS,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SaveResult:
    """Outcome of writing an image to disk."""

    success: bool
    file_path: str | None = None
    error: str | None = None

    @classmethod
    def ok(cls, file_path: str) -> "SaveResult":
        return cls(success=True, file_path=file_path)

    @classmethod
    def failed(cls, error: str) -> "SaveResult":
        return cls(success=False, error=error)


def extension_for_mime_type(mime_type: str) -> str:
    """Map a mime type to a file extension, falling back to .png."""
    return MIME_EXTENSIONS.get(mime_type, DEFAULT_EXTENSION)


class ImageStorage:
    """Writes base64 image payloads under a fixed output directory.

    Writes are not atomic: an I/O failure mid-write can leave a truncated
    file behind. Existing files at the target path are overwritten.
    """

    def __init__(self, output_dir: str | Path):
        self._output_dir = Path(output_dir).expanduser().resolve()
        self._output_dir.mkdir(parents=True, exist_ok=True)

    @property
    def output_directory(self) -> Path:
        """Resolved absolute output directory."""
        return self._output_dir

    def resolve_path(self, custom_path: str | None = None, mime_type: str = DEFAULT_MIME_TYPE) -> Path:
        """Work out where an image will be written.

        Absolute custom paths are used verbatim, relative ones land under the
        output directory. Without a custom path a unique name is generated.
        """
        if custom_path:
            path = Path(custom_path).expanduser()
        else:
            path = Path(f"{GENERATED_FILENAME_PREFIX}{uuid.uuid4()}{extension_for_mime_type(mime_type)}")

        if path.is_absolute():
            return path
        return self._output_dir / path

    def save_image(
        self,
        base64_data: str,
        custom_path: str | None = None,
        mime_type: str = DEFAULT_MIME_TYPE,
    ) -> SaveResult:
        """Decode ``base64_data`` and write it to disk.

        Returns:
            SaveResult with the absolute file path, or the error message.
        """
        try:
            file_path = self.resolve_path(custom_path, mime_type)
            file_path.parent.mkdir(parents=True, exist_ok=True)

            image_bytes = base64.b64decode(base64_data)
            file_path.write_bytes(image_bytes)
        except (OSError, binascii.Error, ValueError) as e:
            logger.error(f"Failed to save image: {e}")
            return SaveResult.failed(f"Failed to save image: {e}")

        logger.info(f"Saved {len(image_bytes)} bytes to {file_path}")
        return SaveResult.ok(str(file_path))
