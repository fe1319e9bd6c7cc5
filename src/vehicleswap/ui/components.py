"""Reusable UI components for the Vehicle Swap Gradio interface."""

import html

import gradio as gr

from .models import MAX_UPLOAD_MB, UIState

EMPTY_PANEL = """
<div class="result-panel result-empty">
  <p class="result-title">Your new image will appear here</p>
  <p class="result-hint">Start by uploading an image and describing the new vehicle.</p>
</div>
"""

LOADING_PANEL = """
<div class="result-panel result-loading">
  <div class="spinner"></div>
  <p class="result-title">AI is creating...</p>
  <p class="result-hint">This may take a moment.</p>
</div>
"""


def render_result_panel(state: UIState) -> str:
    """Render the result panel HTML for the current display state.

    Exactly one of loading, error, result or empty is rendered.

    Args:
        state: UI state

    Returns:
        HTML string for the result panel
    """
    display = state.display_state()

    if display == "loading":
        return LOADING_PANEL
    if display == "error":
        return (
            '<div class="result-panel result-error">'
            '<p class="result-title">Something went wrong</p>'
            f'<p class="result-hint">{html.escape(state.error or "")}</p>'
            "</div>"
        )
    if display == "result":
        return (
            '<div class="result-panel result-image">'
            f'<img src="{html.escape(state.generated_image_url, quote=True)}" '
            'alt="Generated result" />'
            "</div>"
        )
    return EMPTY_PANEL


class EditFormUI:
    """All Gradio components of the edit form.

    Built inside an active ``gr.Blocks`` context. Left column holds the
    upload control, prompt input and submit button; right column holds the
    result panel.
    """

    def __init__(self):
        with gr.Row():
            with gr.Column(scale=1):
                self.image = gr.Image(
                    label=f"1. Upload the original image (PNG, JPG, WEBP, up to {MAX_UPLOAD_MB}MB)",
                    type="filepath",
                    image_mode=None,  # pass the uploaded file through unconverted
                    sources=["upload", "clipboard"],
                    height=400,
                )
                self.prompt = gr.Textbox(
                    label="2. Enter the new vehicle type",
                    placeholder="e.g. a sports motorbike, a steam train, ...",
                    lines=1,
                    interactive=False,
                )
                self.submit = gr.Button(
                    "Generate new image",
                    variant="primary",
                    interactive=False,
                )

            with gr.Column(scale=1):
                self.result = gr.HTML(value=EMPTY_PANEL)

    def get_output_components(self) -> list[gr.components.Component]:
        """Components updated by every form handler, in handler return order."""
        return [self.prompt, self.submit, self.result]
