"""MCP Server - Expose image generation via Model Context Protocol.

Lets MCP hosts (Claude Code, IDEs, custom agents) generate images with
Gemini and have them saved to disk through a single ``create_asset`` tool.
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Annotated

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from pydantic import Field, ValidationError, WithJsonSchema

from media_pipeline.adapters.gemini_image import GeminiImageAdapter
from media_pipeline.adapters.image_base import ImageAdapter
from media_pipeline.config import Settings, get_settings
from media_pipeline.constants import DEFAULT_ASPECT_RATIO, VALID_ASPECT_RATIOS, VALID_IMAGE_MODELS
from media_pipeline.models import (
    GenerationRequest,
    describe_settings_error,
    describe_validation_error,
)
from media_pipeline.services.image_storage import ImageStorage

logger = logging.getLogger(__name__)

SERVER_NAME = "media-pipeline"

# Enum values are advertised in the input schema and checked by GenerationRequest
AspectRatioArg = Annotated[str, WithJsonSchema({"type": "string", "enum": list(VALID_ASPECT_RATIOS)})]
ImageModelArg = Annotated[str, WithJsonSchema({"type": "string", "enum": list(VALID_IMAGE_MODELS)})]


class AssetTools:
    """Tool handlers bound to one adapter, storage and default model."""

    def __init__(self, adapter: ImageAdapter, storage: ImageStorage, default_model: str):
        self._adapter = adapter
        self._storage = storage
        self._default_model = default_model

    @property
    def description(self) -> str:
        return (
            "Generate an image using Google Gemini AI. Provide a detailed prompt describing "
            "the desired image. The image will be saved to disk and the file path returned. "
            f"Default model: {self._default_model}"
        )

    async def create_asset(
        self,
        prompt: Annotated[
            str,
            Field(
                description=(
                    "Detailed description of the image to generate. Be specific about style, "
                    "composition, colors, subject matter, and atmosphere for best results."
                )
            ),
        ],
        outputPath: Annotated[  # noqa: N803
            str | None,
            Field(
                description=(
                    "Optional custom file path for the output. If not provided, a unique "
                    "filename will be generated in the output directory."
                )
            ),
        ] = None,
        aspectRatio: Annotated[  # noqa: N803
            AspectRatioArg | None,
            Field(
                description=(
                    "Aspect ratio for the generated image. Use 16:9 for hero images/headers, "
                    "1:1 for thumbnails/social, 9:16 for mobile/stories. Default: 1:1"
                )
            ),
        ] = None,
        model: Annotated[
            ImageModelArg | None,
            Field(
                description=(
                    "Model to use. gemini-3-pro-image-preview for higher quality, "
                    "gemini-2.5-flash-image for faster generation."
                )
            ),
        ] = None,
    ) -> str:
        """Generate an image, save it, and describe where it went."""
        try:
            request = GenerationRequest(
                prompt=prompt,
                output_path=outputPath,
                aspect_ratio=aspectRatio,
                model=model,
            )
        except ValidationError as e:
            raise ToolError(describe_validation_error(e)) from e

        result = await self._adapter.generate_image(
            prompt=request.prompt,
            aspect_ratio=request.aspect_ratio,
            model=request.model,
        )
        if not result.success or not result.base64_data:
            raise ToolError(f"Image generation failed: {result.error or 'Unknown error'}")

        saved = self._storage.save_image(result.base64_data, request.output_path, result.mime_type)
        if not saved.success or not saved.file_path:
            raise ToolError(saved.error or "Failed to save image: Unknown error")

        return (
            "Image generated successfully!\n\n"
            f"File saved to: {saved.file_path}\n\n"
            f'Prompt: "{request.prompt}"\n'
            f"Aspect ratio: {request.aspect_ratio or DEFAULT_ASPECT_RATIO}\n"
            f"Model: {request.model or self._default_model}"
        )


def create_server(
    settings: Settings,
    adapter: ImageAdapter | None = None,
    storage: ImageStorage | None = None,
) -> FastMCP:
    """Build the MCP server with the ``create_asset`` tool registered."""
    if adapter is None:
        adapter = GeminiImageAdapter(settings.gemini_api_key, settings.gemini_default_model)
    if storage is None:
        storage = ImageStorage(settings.image_output_dir)

    tools = AssetTools(adapter, storage, settings.gemini_default_model)

    @asynccontextmanager
    async def server_lifespan(server: FastMCP):
        logger.info("MCP Server starting up")
        logger.info(f"Default model: {settings.gemini_default_model}")
        logger.info(f"Output directory: {storage.output_directory}")
        try:
            yield {}
        finally:
            logger.info("MCP Server shutting down")

    server = FastMCP(name=SERVER_NAME, lifespan=server_lifespan)
    server.add_tool(tools.create_asset, name="create_asset", description=tools.description)
    return server


def main() -> None:
    """Run the MCP server over stdio."""
    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Error: {describe_settings_error(e)}", file=sys.stderr)
        sys.exit(1)

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    if not settings.has_api_key:
        print("Error: GEMINI_API_KEY environment variable is required", file=sys.stderr)
        sys.exit(1)

    server = create_server(settings)
    server.run(transport="stdio")


if __name__ == "__main__":
    main()
