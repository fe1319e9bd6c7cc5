"""Core functionality for Vehicle Swap.

- **VehicleSwapConfig / config**: Configuration using Pydantic Settings
  (VEHICLESWAP_ prefix in environment variables and .env files)
- **ImageEditClient**: One-shot Gemini call that swaps the vehicle in a photo
- **build_edit_instruction**: Fixed directive + user vehicle description
- **read_image_file**: Awaitable upload reader with MIME sniffing (Pillow)
"""

from vehicleswap.core.config import ConfigurationError, VehicleSwapConfig, config
from vehicleswap.core.edit_client import (
    EditedImage,
    ImageEditClient,
    ImageEditError,
    create_edit_client,
)
from vehicleswap.core.image_io import ImageFile, ImageReadError, read_image_file
from vehicleswap.core.prompts import VEHICLE_SWAP_DIRECTIVE, build_edit_instruction

__all__ = [
    "ConfigurationError",
    "EditedImage",
    "ImageEditClient",
    "ImageEditError",
    "ImageFile",
    "ImageReadError",
    "VEHICLE_SWAP_DIRECTIVE",
    "VehicleSwapConfig",
    "build_edit_instruction",
    "config",
    "create_edit_client",
    "read_image_file",
]
