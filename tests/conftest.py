"""Shared pytest fixtures and configuration.

Integration tests are skipped by default. Run them with:
    pytest --run-integration

IMPORTANT: All tests that reach the Gemini client MUST mock it.
The block_real_gemini_calls fixture (autouse=True) will raise an error if
any test tries to make a real API call without proper mocking.
"""

from unittest.mock import AsyncMock, patch

import pytest
from google.genai import types

from media_pipeline.config import Settings


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run integration tests (requires GEMINI_API_KEY and network access)",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test (calls the real Gemini API)"
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless --run-integration is passed."""
    if config.getoption("--run-integration"):
        return

    skip_integration = pytest.mark.skip(reason="need --run-integration option to run")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


class RealAPICallError(Exception):
    """Raised when a test tries to make a real API call without proper mocking."""

    pass


def _raise_real_api_error(*args, **kwargs):
    """Raise error when real API is called without mocking."""
    raise RealAPICallError(
        "Test attempted to make a real Gemini API call! "
        "Patch genai in media_pipeline.adapters.gemini_image or pass a fake adapter."
    )


@pytest.fixture(autouse=True)
def block_real_gemini_calls(request):
    """Block real Gemini API calls unless test is marked as integration."""
    if "integration" in request.keywords:
        yield
        return

    with patch("google.genai.Client") as mock_genai:
        mock_genai.return_value.aio.models.generate_content = AsyncMock(
            side_effect=_raise_real_api_error
        )
        yield


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Keep get_settings() from leaking between tests."""
    from media_pipeline.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_settings(tmp_path):
    """Build Settings without reading ~/.env.local."""

    def _make(**overrides) -> Settings:
        values = {
            "gemini_api_key": "test-api-key",
            "image_output_dir": tmp_path / "generated-images",
        }
        values.update(overrides)
        return Settings(_env_file=None, **values)

    return _make


def image_response(*parts: types.Part) -> types.GenerateContentResponse:
    """Build a single-candidate response holding the given parts."""
    return types.GenerateContentResponse(
        candidates=[types.Candidate(content=types.Content(role="model", parts=list(parts)))]
    )


def image_part(data: bytes = b"\x89PNG fake", mime_type: str | None = "image/png") -> types.Part:
    return types.Part(inline_data=types.Blob(data=data, mime_type=mime_type))
