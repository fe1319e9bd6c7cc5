"""Gemini image-edit client.

One request/response exchange per call: the uploaded photo and a combined
instruction go out, the first inline image in the response comes back.

There are no retries, no timeouts beyond the SDK defaults, and no caching.
A successful response without an image part is reported as ``None`` so the
caller can tell "nothing to show" apart from a failure.

Usage Example
-------------
    from vehicleswap.core.config import config
    from vehicleswap.core.edit_client import create_edit_client

    client = create_edit_client(config)
    result = await client.edit_vehicle(b64_png, "image/png", "a vintage steam train")
    if result is not None:
        html = f'<img src="{result.data_url}">'
"""

import base64
import logging
from dataclasses import dataclass
from typing import Any

from google import genai
from google.genai import types

from .config import VehicleSwapConfig
from .image_io import to_data_url
from .prompts import build_edit_instruction

logger = logging.getLogger(__name__)

UNKNOWN_API_ERROR = "An unknown error occurred while talking to the image API."


class ImageEditError(Exception):
    """Gemini service errors."""

    pass


@dataclass(frozen=True)
class EditedImage:
    """Image payload returned by the model."""

    base64_image: str
    mime_type: str

    @property
    def data_url(self) -> str:
        return to_data_url(self.base64_image, self.mime_type)


class ImageEditClient:
    """Wraps an already constructed ``genai.Client``.

    Args:
        client: Gemini SDK client (built once per process)
        model: Name of the image model to call
    """

    def __init__(self, client: genai.Client, model: str):
        self.client = client
        self.model = model
        logger.info(f"[gemini] Image edit client ready, model: {self.model}")

    async def edit_vehicle(
        self, base64_image: str, mime_type: str, vehicle: str
    ) -> EditedImage | None:
        """Replace the vehicle in an image.

        Args:
            base64_image: Base64 image payload without a data-URL prefix
            mime_type: MIME type of the image (e.g. ``image/png``)
            vehicle: Description of the replacement vehicle

        Returns:
            The first image part of the response, or None if the model
            answered without an image

        Raises:
            ImageEditError: On any transport, service or response-shape failure
        """
        instruction = build_edit_instruction(vehicle)

        try:
            image_part = types.Part.from_bytes(
                data=base64.b64decode(base64_image), mime_type=mime_type
            )
            logger.info(
                f"[gemini] Calling Gemini API with model: {self.model}, "
                f"prompt length: {len(instruction)}"
            )
            response = await self.client.aio.models.generate_content(
                model=self.model,
                contents=[image_part, instruction],
            )
            result = extract_first_image(response)
        except Exception as exc:
            logger.error(f"[gemini] Gemini API call failed: {exc}", exc_info=True)
            if str(exc):
                raise ImageEditError(f"Gemini API error: {exc}") from exc
            raise ImageEditError(UNKNOWN_API_ERROR) from exc

        if result is None:
            logger.warning("[gemini] No image part found in the Gemini response")
        return result


def extract_first_image(response: Any) -> EditedImage | None:
    """Return the first inline image part across all candidates.

    Raw bytes from the SDK are base64-encoded once; payloads that are already
    strings are passed through unchanged.
    """
    for candidate in getattr(response, "candidates", None) or []:
        content = getattr(candidate, "content", None)
        for part in getattr(content, "parts", None) or []:
            inline_data = getattr(part, "inline_data", None)
            if not inline_data or not inline_data.data:
                continue
            data = inline_data.data
            if isinstance(data, bytes):
                data = base64.b64encode(data).decode("ascii")
            return EditedImage(base64_image=data, mime_type=inline_data.mime_type or "image/png")
    return None


def create_edit_client(settings: VehicleSwapConfig) -> ImageEditClient:
    """Build the Gemini client from configuration.

    Raises:
        ConfigurationError: If the API key is missing
    """
    api_key = settings.require_api_key()
    return ImageEditClient(genai.Client(api_key=api_key), settings.model_name)
