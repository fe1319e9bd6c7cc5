"""Validation utilities for Vehicle Swap UI inputs."""

import logging

from .models import ALLOWED_MIME_TYPES, MISSING_INPUT_MESSAGE, UIState

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """User-friendly validation error.

    This exception is raised when user input fails validation.
    The message is intended to be displayed directly to the user.
    """

    pass


def validate_image_type(mime_type: str) -> None:
    """Check that an uploaded image is one of the accepted formats.

    Args:
        mime_type: MIME type sniffed from the file contents

    Raises:
        ValidationError: If the type is not PNG, JPEG or WEBP
    """
    if mime_type not in ALLOWED_MIME_TYPES:
        raise ValidationError(
            f"Unsupported image type ({mime_type}). Please upload a PNG, JPG or WEBP file."
        )


def validate_submission(state: UIState, prompt: str | None) -> str:
    """Check the preconditions for sending an edit request.

    Args:
        state: Current UI state
        prompt: Vehicle description from the textbox

    Returns:
        The prompt with surrounding whitespace removed

    Raises:
        ValidationError: If no image is selected or the prompt is empty
    """
    cleaned = (prompt or "").strip()
    if not state.has_image or not cleaned:
        raise ValidationError(MISSING_INPUT_MESSAGE)
    return cleaned


def can_submit(state: UIState, prompt: str | None) -> bool:
    """Whether the submit button should be enabled."""
    return state.has_image and bool((prompt or "").strip()) and not state.in_flight
