"""Shared pytest fixtures for Vehicle Swap tests."""

import shutil
import tempfile
from pathlib import Path
from typing import Generator
from unittest.mock import AsyncMock, Mock

import pytest
from google.genai import types
from PIL import Image

from vehicleswap.core.config import VehicleSwapConfig
from vehicleswap.core.edit_client import ImageEditClient
from vehicleswap.ui.models import UIState


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files.

    Yields:
        Path to temporary directory

    Cleanup:
        Directory is removed after test completes
    """
    temp_path = Path(tempfile.mkdtemp())
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def test_config(monkeypatch) -> VehicleSwapConfig:
    """Configuration with a dummy key and no .env lookup."""
    for name in ("VEHICLESWAP_API_KEY", "GEMINI_API_KEY", "API_KEY"):
        monkeypatch.delenv(name, raising=False)
    return VehicleSwapConfig(api_key="test-key", _env_file=None)


def _write_image(path: Path, fmt: str) -> Path:
    Image.new("RGB", (8, 8), color=(200, 30, 30)).save(path, format=fmt)
    return path


@pytest.fixture
def png_file(temp_dir: Path) -> Path:
    """A small PNG named car.png."""
    return _write_image(temp_dir / "car.png", "PNG")


@pytest.fixture
def jpeg_file(temp_dir: Path) -> Path:
    return _write_image(temp_dir / "car.jpg", "JPEG")


@pytest.fixture
def gif_file(temp_dir: Path) -> Path:
    """An image in a format the form does not accept."""
    return _write_image(temp_dir / "car.gif", "GIF")


@pytest.fixture
def text_file(temp_dir: Path) -> Path:
    path = temp_dir / "notes.png"
    path.write_text("definitely not an image")
    return path


def _make_response(*candidate_parts: list[types.Part]) -> types.GenerateContentResponse:
    """Build a Gemini response with one candidate per parts list."""
    return types.GenerateContentResponse(
        candidates=[
            types.Candidate(content=types.Content(role="model", parts=parts))
            for parts in candidate_parts
        ]
    )


def _image_part(data: bytes, mime_type: str = "image/png") -> types.Part:
    return types.Part(inline_data=types.Blob(data=data, mime_type=mime_type))


@pytest.fixture
def genai_client() -> Mock:
    """Stand-in for google.genai.Client with an async generate_content."""
    client = Mock()
    client.aio.models.generate_content = AsyncMock(
        return_value=_make_response([_image_part(b"generated-image-bytes")])
    )
    return client


@pytest.fixture
def edit_client(genai_client: Mock) -> ImageEditClient:
    return ImageEditClient(genai_client, "gemini-2.5-flash-image")


@pytest.fixture
def ui_state() -> UIState:
    """Create empty UI state for testing."""
    return UIState()


@pytest.fixture
def make_response():
    """Factory for Gemini responses: make_response([part, ...], [part, ...])."""
    return _make_response


@pytest.fixture
def image_part():
    """Factory for inline image parts: image_part(b"...", "image/png")."""
    return _image_part


@pytest.fixture
def rgba_png_file(temp_dir: Path) -> Path:
    """A PNG with an alpha channel."""
    path = temp_dir / "car.png"
    Image.new("RGBA", (8, 8), color=(200, 30, 30, 128)).save(path, format="PNG")
    return path
