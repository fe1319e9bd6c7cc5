"""Data models for the Vehicle Swap UI state."""

import logging
from dataclasses import dataclass
from typing import Literal

logger = logging.getLogger(__name__)

RequestStatus = Literal["idle", "loading", "success", "error"]
DisplayState = Literal["loading", "error", "result", "empty"]


@dataclass
class UIState:
    """Session state for the Gradio UI.

    Each browser session gets its own UIState through ``gr.State``. Nothing
    here outlives the session. The upload preview is rendered by the image
    component itself, so only the path is kept here.

    Attributes
    ----------
    original_image_path : str | None
        Path of the uploaded file (Gradio temp file)
    original_mime_type : str | None
        MIME type sniffed from the uploaded file
    prompt : str
        Description of the replacement vehicle
    generated_image_url : str | None
        Data URL of the last successful result
    status : RequestStatus
        idle, loading, success or error
    error : str | None
        Message shown in the result panel when status is error
    in_flight : bool
        True while an edit request is outstanding
    request_token : int
        Bumped whenever the selected image changes; a request whose token
        no longer matches must not touch the result
    """

    original_image_path: str | None = None
    original_mime_type: str | None = None
    prompt: str = ""
    generated_image_url: str | None = None
    status: RequestStatus = "idle"
    error: str | None = None
    in_flight: bool = False
    request_token: int = 0

    @property
    def has_image(self) -> bool:
        return self.original_image_path is not None

    def set_original(self, path: str, mime_type: str) -> None:
        """Store a newly selected image and drop the previous result."""
        self.request_token += 1
        self.original_image_path = path
        self.original_mime_type = mime_type
        self.generated_image_url = None
        self.error = None
        self.status = "idle"

    def clear_original(self) -> None:
        """Reset image, result and error. The prompt is kept."""
        self.request_token += 1
        self.original_image_path = None
        self.original_mime_type = None
        self.generated_image_url = None
        self.error = None
        self.status = "idle"

    def begin_request(self) -> int:
        """Mark a request as started.

        Returns:
            Token identifying the image this request was made for
        """
        self.in_flight = True
        self.status = "loading"
        self.error = None
        self.generated_image_url = None
        return self.request_token

    def is_current(self, token: int) -> bool:
        """Whether the image a request was made for is still selected."""
        return token == self.request_token

    def complete(self, image_url: str) -> None:
        self.generated_image_url = image_url
        self.error = None
        self.status = "success"

    def fail(self, message: str) -> None:
        self.generated_image_url = None
        self.error = message
        self.status = "error"

    def finish_request(self) -> None:
        """Clear the in-flight flag. Called on every exit path of a submit."""
        self.in_flight = False
        if self.status == "loading":
            self.status = "idle"

    def display_state(self) -> DisplayState:
        """Pick the one result-panel state to show.

        Priority is loading > error > result > empty.
        """
        if self.in_flight:
            return "loading"
        if self.error:
            return "error"
        if self.generated_image_url:
            return "result"
        return "empty"

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"UIState(status={self.status}, has_image={self.has_image}, "
            f"in_flight={self.in_flight}, error={self.error!r})"
        )


# Upload constraints
ALLOWED_MIME_TYPES = ("image/png", "image/jpeg", "image/webp")
MAX_UPLOAD_MB = 5  # Advisory only, shown in the upload label

# User-facing messages
MISSING_INPUT_MESSAGE = "Please upload an image and enter the new vehicle type."
NO_RESULT_MESSAGE = "Could not generate an image. Please try again with a different image or description."
FILE_READ_ERROR_MESSAGE = "An error occurred while reading the image file."
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred."
BUSY_MESSAGE = "A request is already in progress."
