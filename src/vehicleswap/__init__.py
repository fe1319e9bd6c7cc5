"""Vehicle Swap - replace the vehicle in a photo using a generative image model."""

__version__ = "0.1.0"

from vehicleswap.core.config import VehicleSwapConfig, config
from vehicleswap.core.edit_client import EditedImage, ImageEditClient, ImageEditError

__all__ = [
    "EditedImage",
    "ImageEditClient",
    "ImageEditError",
    "VehicleSwapConfig",
    "config",
]
