"""Rendering helpers for single-control form elements."""

from __future__ import annotations

import html

from .attributes import format_attributes, parse_constraint_pairs, required_attribute
from .context import RenderContext

EMAIL_PLACEHOLDER = "email@provider.tld"


def render_label(ctx: RenderContext) -> None:
    label = ctx.directive.title or ctx.title
    attrs = format_attributes([("for", ctx.key)])
    ctx.body_lines.append(f"<label {attrs}>{html.escape(label)}</label>")


def render_text_input(ctx: RenderContext) -> None:
    attrs = format_attributes([
        ("type", "text"),
        *required_attribute(ctx.required),
        ("placeholder", ctx.value),
        ("name", ctx.key),
    ])
    ctx.body_lines.append(f"<input {attrs}/>")


def render_textarea(ctx: RenderContext) -> None:
    attrs = format_attributes([
        *required_attribute(ctx.required),
        ("placeholder", ctx.value),
        ("name", ctx.key),
    ])
    ctx.body_lines.append(f"<textarea {attrs}></textarea>")


def render_hidden(ctx: RenderContext) -> None:
    attrs = format_attributes([
        ("type", "hidden"),
        *required_attribute(ctx.required),
        ("value", ctx.value),
        ("name", ctx.key),
    ])
    ctx.body_lines.append(f"<input {attrs}/>")


def render_email(ctx: RenderContext) -> None:
    pattern = [("pattern", ctx.value)] if ctx.value else []
    attrs = format_attributes([
        ("type", "email"),
        *required_attribute(ctx.required),
        ("placeholder", EMAIL_PLACEHOLDER),
        *pattern,
        ("name", ctx.key),
    ])
    ctx.body_lines.append(f"<input {attrs}/>")


def _render_constrained(ctx: RenderContext, input_type: str) -> None:
    attrs = format_attributes([
        ("type", input_type),
        *required_attribute(ctx.required),
        *parse_constraint_pairs(ctx.value),
        ("name", ctx.key),
    ])
    ctx.body_lines.append(f"<input {attrs}/>")


def render_number(ctx: RenderContext) -> None:
    _render_constrained(ctx, "number")


def render_range(ctx: RenderContext) -> None:
    _render_constrained(ctx, "range")
