"""Stylesheet rendering for the form and response pages."""

from __future__ import annotations

from typing import Optional

from mould.ast import Theme
from mould.templates import get_code_engine

DEFAULT_THEME = Theme(background="#fffaf0", title_color="#1d1d1d", body="#2b2b2b")

STYLESHEET_TEMPLATE = """<style>
  html {
    background: {{ theme.background }};
    color: {{ theme.body }};
    padding-left: 2rem;
    padding-right: 2rem;
    padding-top: 1rem;
  }
  h1 {
    color: {{ theme.title_color }};
  }
  * {
    padding: 0;
    margin-bottom: 0.5rem;
  }
  div {
    display: grid;
    max-width: 600px;
    align-items: center;
  }
</style>"""


def render_stylesheet(
    theme: Theme,
    *,
    external_css: Optional[str] = None,
    defaults: Theme = DEFAULT_THEME,
) -> str:
    """
    Return the ``<style>`` block shared by both pages.

    External CSS replaces the built-in stylesheet entirely, in which case
    the theme colours are ignored.
    """
    if external_css is not None:
        return f"<style>{external_css}</style>"
    return get_code_engine().render(
        STYLESHEET_TEMPLATE,
        {"theme": theme.resolved(defaults)},
        name="stylesheet",
    )


__all__ = ["DEFAULT_THEME", "STYLESHEET_TEMPLATE", "render_stylesheet"]
