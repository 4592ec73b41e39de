"""Rendering helpers for inline text."""

from __future__ import annotations

from .context import RenderContext


def render_paragraph(ctx: RenderContext) -> None:
    # Inline markup in paragraph text is passed through unescaped.
    ctx.body_lines.append(f"<p>{ctx.value}</p>")
