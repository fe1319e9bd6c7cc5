"""Gradio user interface for Vehicle Swap."""
