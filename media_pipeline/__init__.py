"""media-pipeline: Gemini image generation exposed as a CLI and an MCP tool."""

__version__ = "1.0.0"
