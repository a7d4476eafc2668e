"""Command-line image generation.

Reuses GeminiImageAdapter and ImageStorage and reports a single JSON line on
stdout, so the output can be consumed by scripts.

Usage:
    media-pipeline-cli --prompt "..." --output "./image.png" --aspect-ratio "16:9"
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from media_pipeline.adapters.gemini_image import GeminiImageAdapter
from media_pipeline.config import Settings, get_settings
from media_pipeline.constants import DEFAULT_ASPECT_RATIO, VALID_ASPECT_RATIOS, VALID_IMAGE_MODELS
from media_pipeline.models import (
    GenerationRequest,
    describe_settings_error,
    describe_validation_error,
)
from media_pipeline.services.image_storage import ImageStorage

logger = logging.getLogger(__name__)

EPILOG = """\
Environment:
  GEMINI_API_KEY             Your Gemini API key (required)
  GEMINI_DEFAULT_MODEL       Model used when --model is omitted

Examples:
  media-pipeline-cli -p "A sunset over mountains" -o "./sunset.png"
  media-pipeline-cli --prompt "Hero image for tech startup" --aspect-ratio "16:9"
"""


class CLIUsageError(Exception):
    """Raised instead of exiting when the command line cannot be parsed."""


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise CLIUsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="media-pipeline-cli",
        description="Generate an image with Google Gemini and save it to disk.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument("-p", "--prompt", help="Image description (required)")
    parser.add_argument(
        "-o", "--output", help="Output file path (optional, auto-generated if not provided)"
    )
    parser.add_argument(
        "-a",
        "--aspect-ratio",
        default=DEFAULT_ASPECT_RATIO,
        help=f"Aspect ratio: {', '.join(VALID_ASPECT_RATIOS)} (default: {DEFAULT_ASPECT_RATIO})",
    )
    parser.add_argument("-m", "--model", help=f"Model: {', '.join(VALID_IMAGE_MODELS)}")
    parser.add_argument(
        "-d", "--output-dir", default=None, help="Output directory (default: current directory)"
    )
    parser.add_argument("-h", "--help", action="store_true", help="Show this help message")
    return parser


def _emit(payload: dict[str, Any]) -> None:
    print(json.dumps(payload), flush=True)


def _fail(error: str | None) -> int:
    _emit({"success": False, "error": error or "Unknown error"})
    return 1


async def _run(argv: list[str] | None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.help:
        parser.print_help()
        return 0

    if not args.prompt:
        return _fail("Missing required argument: --prompt")

    try:
        request = GenerationRequest(
            prompt=args.prompt,
            output_path=args.output,
            aspect_ratio=args.aspect_ratio,
            model=args.model,
        )
    except ValidationError as e:
        return _fail(describe_validation_error(e))

    try:
        settings = get_settings()
    except ValidationError as e:
        if request.model is None:
            return _fail(describe_settings_error(e))
        # An explicit --model makes GEMINI_DEFAULT_MODEL irrelevant
        settings = Settings(gemini_default_model=request.model)

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if not settings.has_api_key:
        return _fail("GEMINI_API_KEY environment variable not set")

    model = request.model or settings.gemini_default_model
    config = settings.model_copy(
        update={
            "gemini_default_model": model,
            "image_output_dir": Path(args.output_dir or os.getcwd()),
        }
    )

    adapter = GeminiImageAdapter(config.gemini_api_key, config.gemini_default_model)
    result = await adapter.generate_image(
        prompt=request.prompt,
        aspect_ratio=request.aspect_ratio,
        model=model,
    )
    if not result.success or not result.base64_data:
        return _fail(result.error)

    storage = ImageStorage(config.image_output_dir)
    saved = storage.save_image(result.base64_data, request.output_path, result.mime_type)
    if not saved.success:
        return _fail(saved.error)

    _emit({"success": True, "filePath": saved.file_path})
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    try:
        return asyncio.run(_run(argv))
    except Exception as e:
        logger.debug("CLI failed", exc_info=True)
        return _fail(f"CLI error: {e}")


if __name__ == "__main__":
    sys.exit(main())
