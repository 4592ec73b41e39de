"""Rendering helpers for radio groups."""

from __future__ import annotations

import html
from typing import List

from .attributes import format_attributes, required_attribute
from .context import RenderContext


def split_options(value: str) -> List[str]:
    return [option.strip() for option in value.split(",") if option.strip()]


def option_id(key: str, option: str) -> str:
    return f"{key}-option-{option.lower()}"


def render_radio(ctx: RenderContext) -> None:
    """Render one radio input and label per comma-separated option."""
    ctx.body_lines.append(f"<span>{html.escape(ctx.directive.title or ctx.title)}</span>")
    for option in split_options(ctx.value):
        radio_id = option_id(ctx.key, option)
        attrs = format_attributes([
            ("type", "radio"),
            ("id", radio_id),
            ("value", option.lower()),
            ("name", ctx.key),
            *required_attribute(ctx.required),
        ])
        label_attrs = format_attributes([("for", radio_id)])
        ctx.body_lines.append("<span>")
        ctx.body_lines.append(f"<input {attrs}/>")
        ctx.body_lines.append(f"<label {label_attrs}>{html.escape(option)}</label>")
        ctx.body_lines.append("</span>")
