"""Instruction text sent to the image model alongside the uploaded photo."""

# Prepended to every request. Not user-configurable.
VEHICLE_SWAP_DIRECTIVE = (
    "Keep the style, lighting, and composition of the original image exactly as they are. "
    "Only change the vehicle in the image into {vehicle}. "
    "Special requirement: every wheel of the new vehicle must be made of balls. "
    "The balls must be perfectly round, glossy, rainbow-colored, and look like they are "
    "made of hard plastic. The size and proportions of the balls must fit the vehicle, "
    "matching the wheels in the original image. "
    "Make sure the new image has the same aspect ratio as the original image."
)


def build_edit_instruction(vehicle: str) -> str:
    """Combine the fixed directive with the user's vehicle description.

    Args:
        vehicle: Free-text description of the replacement vehicle

    Returns:
        The full instruction text for the model
    """
    return VEHICLE_SWAP_DIRECTIVE.format(vehicle=f'a "{vehicle.strip()}"')
