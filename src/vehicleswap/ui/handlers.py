"""Gradio event handlers for the edit form.

Every handler takes the raw UI values plus the session ``UIState`` and
returns updates in the order of :meth:`EditFormUI.get_output_components`
followed by the updated state:

    (prompt_update, submit_update, result_html, state)
"""

import logging
from collections.abc import AsyncIterator

import gradio as gr

from vehicleswap.core.edit_client import ImageEditClient, ImageEditError
from vehicleswap.core.image_io import ImageReadError, read_image_file

from .components import render_result_panel
from .models import (
    FILE_READ_ERROR_MESSAGE,
    NO_RESULT_MESSAGE,
    UNKNOWN_ERROR_MESSAGE,
    UIState,
)
from .validation import ValidationError, can_submit, validate_image_type, validate_submission

logger = logging.getLogger(__name__)

FormUpdate = tuple[dict, dict, str, UIState]


def _form_updates(prompt: str | None, state: UIState) -> FormUpdate:
    return (
        gr.update(interactive=state.has_image),
        gr.update(interactive=can_submit(state, prompt)),
        render_result_panel(state),
        state,
    )


async def select_image(image_path: str | None, prompt: str, state: UIState) -> FormUpdate:
    """Handle a new upload.

    Drops the previous result and error, reads the file to sniff its type and
    checks it. A file that cannot be read leaves no image selected.

    Args:
        image_path: Temp path of the uploaded file, or None
        prompt: Current prompt text
        state: UI state

    Returns:
        Tuple of (prompt_update, submit_update, result_html, updated_state)
    """
    if image_path is None:
        return clear_image(prompt, state)

    state.clear_original()

    try:
        image = await read_image_file(image_path)
        validate_image_type(image.mime_type)
    except ImageReadError as e:
        logger.warning(f"Could not read uploaded image: {e}")
        state.fail(FILE_READ_ERROR_MESSAGE)
    except ValidationError as e:
        logger.warning(f"Validation error: {e}")
        state.fail(str(e))
    else:
        state.set_original(str(image_path), image.mime_type)
        logger.info(f"Image selected: {image.mime_type}, {len(image.data)} bytes")

    return _form_updates(prompt, state)


def clear_image(prompt: str, state: UIState) -> FormUpdate:
    """Reset the original image, the result and the error. The prompt is kept."""
    state.clear_original()
    return _form_updates(prompt, state)


def update_prompt(prompt: str, state: UIState) -> tuple[dict, UIState]:
    """Store the prompt text and refresh the submit button.

    Returns:
        Tuple of (submit_update, updated_state)
    """
    state.prompt = prompt or ""
    return gr.update(interactive=can_submit(state, prompt)), state


async def submit_edit(
    prompt: str, state: UIState, client: ImageEditClient
) -> AsyncIterator[FormUpdate]:
    """Send the selected image and prompt to the edit client.

    Yields the loading display first, then the final display. ``in_flight``
    is cleared on every exit path, so the panel never stays on the spinner.
    If the image is cleared or replaced while the request is running, its
    outcome is dropped.

    Args:
        prompt: Vehicle description
        state: UI state
        client: Image edit client

    Yields:
        Tuples of (prompt_update, submit_update, result_html, updated_state)
    """
    if state.in_flight:
        logger.warning("Submit ignored: a request is already in progress")
        yield _form_updates(state.prompt, state)
        return

    try:
        vehicle = validate_submission(state, prompt)
    except ValidationError as e:
        logger.warning(f"Validation error: {e}")
        state.fail(str(e))
        yield _form_updates(prompt, state)
        return

    state.prompt = vehicle
    image_path = state.original_image_path
    token = state.begin_request()
    yield _form_updates(state.prompt, state)

    try:
        image = await read_image_file(image_path)
        result = None
        if state.is_current(token):
            result = await client.edit_vehicle(image.base64_data, image.mime_type, vehicle)

        if not state.is_current(token):
            logger.info("Image changed during the request, result dropped")
        elif result is None:
            state.fail(NO_RESULT_MESSAGE)
        else:
            state.complete(result.data_url)
            logger.info(f"Edit complete: {result.mime_type}")
    except ImageReadError as e:
        logger.warning(f"Could not read image for submission: {e}")
        if state.is_current(token):
            state.fail(FILE_READ_ERROR_MESSAGE)
    except ImageEditError as e:
        if state.is_current(token):
            state.fail(str(e))
    except Exception as e:
        logger.error(f"Error editing image: {e}", exc_info=True)
        if state.is_current(token):
            state.fail(str(e) or UNKNOWN_ERROR_MESSAGE)
    finally:
        state.finish_request()

    yield _form_updates(state.prompt, state)
