"""Element renderers producing HTML fragments for the form body."""

from .choices import option_id, render_radio, split_options
from .context import RenderContext
from .inputs import (
    render_email,
    render_hidden,
    render_label,
    render_number,
    render_range,
    render_text_input,
    render_textarea,
)
from .text import render_paragraph

__all__ = [
    "RenderContext",
    "option_id",
    "render_email",
    "render_hidden",
    "render_label",
    "render_number",
    "render_paragraph",
    "render_radio",
    "render_range",
    "render_text_input",
    "render_textarea",
    "split_options",
]
