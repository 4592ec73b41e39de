"""Jinja2-based template engine used by the artefact emitters."""

from .engine import (
    CompiledTemplate,
    TemplateCompilationError,
    TemplateEngine,
    TemplateError,
    TemplateRenderError,
    create_engine,
    get_code_engine,
    get_html_engine,
)

__all__ = [
    "CompiledTemplate",
    "TemplateCompilationError",
    "TemplateEngine",
    "TemplateError",
    "TemplateRenderError",
    "create_engine",
    "get_code_engine",
    "get_html_engine",
]
