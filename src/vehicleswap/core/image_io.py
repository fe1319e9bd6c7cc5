"""Reading uploaded image files without blocking the event loop."""

import asyncio
import base64
import io
import logging
from dataclasses import dataclass
from pathlib import Path

from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)


class ImageReadError(Exception):
    """The uploaded file could not be read as an image."""

    pass


@dataclass(frozen=True)
class ImageFile:
    """Raw bytes of an uploaded image plus its sniffed MIME type."""

    data: bytes
    mime_type: str

    @property
    def base64_data(self) -> str:
        """Base64 payload without any data-URL prefix."""
        return base64.b64encode(self.data).decode("ascii")


def to_data_url(base64_data: str, mime_type: str) -> str:
    """Wrap a base64 payload into a displayable data URL."""
    return f"data:{mime_type};base64,{base64_data}"


def _read_image_file_sync(path: Path) -> ImageFile:
    try:
        with open(path, "rb") as fh:
            data = fh.read()
    except OSError as e:
        raise ImageReadError(f"Could not read the image file: {e}") from e

    try:
        with Image.open(io.BytesIO(data)) as img:
            fmt = img.format
    except (UnidentifiedImageError, OSError) as e:
        raise ImageReadError(f"File is not a readable image: {path.name}") from e

    mime_type = Image.MIME.get(fmt or "")
    if mime_type is None:
        raise ImageReadError(f"Unknown image format: {fmt}")

    return ImageFile(data=data, mime_type=mime_type)


async def read_image_file(path: str | Path) -> ImageFile:
    """Read an image file in a worker thread.

    The file handle is opened and closed inside the worker, so nothing
    stays open if the awaiting task is cancelled.

    Args:
        path: Path to the uploaded file

    Returns:
        ImageFile with the raw bytes and MIME type

    Raises:
        ImageReadError: If the file is missing, unreadable, or not an image
    """
    path = Path(path)
    logger.debug(f"Reading image file: {path}")
    return await asyncio.to_thread(_read_image_file_sync, path)
