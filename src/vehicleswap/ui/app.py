"""Gradio UI for Vehicle Swap."""

import logging
import sys

import gradio as gr

from vehicleswap.core.config import ConfigurationError, config
from vehicleswap.core.edit_client import ImageEditClient, create_edit_client

from .components import EditFormUI
from .handlers import clear_image, select_image, submit_edit, update_prompt
from .models import UIState

# Configure logging
logging.basicConfig(
    level=config.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_ui(client: ImageEditClient) -> tuple[gr.Blocks, str]:
    """Create the Gradio UI.

    Args:
        client: Image edit client shared by all sessions

    Returns:
        Tuple of (Gradio Blocks app, custom CSS string)
    """
    custom_css = """
    .result-panel {
        min-height: 400px;
        display: flex;
        flex-direction: column;
        align-items: center;
        justify-content: center;
        text-align: center;
    }
    .result-panel img {
        max-height: 600px;
        width: 100%;
        object-fit: contain;
        border-radius: 8px;
    }
    .result-title { font-weight: 600; font-size: 1.1rem; }
    .result-hint { color: #9ca3af; font-size: 0.9rem; }
    .result-error .result-title, .result-error .result-hint { color: #f87171; }
    .spinner {
        width: 48px;
        height: 48px;
        border: 4px solid #4b5563;
        border-top-color: #818cf8;
        border-radius: 50%;
        animation: spin 1s linear infinite;
    }
    @keyframes spin { to { transform: rotate(360deg); } }
    """

    app = gr.Blocks(title="Vehicle Swap")

    with app:
        # Session state - one instance per user
        ui_state = gr.State(UIState())

        gr.Markdown(
            """
            # Vehicle Swap
            ### Use AI to change the type of vehicle in your photo
            """
        )

        form = EditFormUI()
        outputs = form.get_output_components() + [ui_state]

        async def on_submit(prompt, state):
            async for update in submit_edit(prompt, state, client):
                yield update

        form.image.upload(
            fn=select_image,
            inputs=[form.image, form.prompt, ui_state],
            outputs=outputs,
        )
        form.image.clear(
            fn=clear_image,
            inputs=[form.prompt, ui_state],
            outputs=outputs,
        )
        form.prompt.change(
            fn=update_prompt,
            inputs=[form.prompt, ui_state],
            outputs=[form.submit, ui_state],
        )
        form.submit.click(
            fn=on_submit,
            inputs=[form.prompt, ui_state],
            outputs=outputs,
        )

    return app, custom_css


def main():
    """Main entry point for the application."""
    logger.info("Starting Vehicle Swap...")
    logger.info(f"Configuration: {config.model_dump()}")

    try:
        client = create_edit_client(config)
    except ConfigurationError as e:
        logger.error(f"Startup failed: {e}")
        sys.exit(1)

    app, custom_css = create_ui(client)

    logger.info(f"Launching Gradio UI on {config.server_name}:{config.server_port}")

    app.launch(
        server_name=config.server_name,
        server_port=config.server_port,
        share=config.share,
        show_error=True,
        inbrowser=False,
        css=custom_css,
    )


if __name__ == "__main__":
    main()
