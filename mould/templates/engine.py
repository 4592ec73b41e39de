"""
Template engine for Mould artefacts, built on a sandboxed Jinja2 environment.

Both the generated Python model module and the two HTML pages are rendered
from fixed template strings. Templates are immutable values: everything
they substitute (stylesheet, fragments, fields) is passed in explicitly at
render time.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional

from jinja2 import StrictUndefined, TemplateSyntaxError, UndefinedError
from jinja2.sandbox import SandboxedEnvironment


class TemplateError(Exception):
    """Base exception for template engine errors."""

    def __init__(
        self,
        message: str,
        *,
        template_name: Optional[str] = None,
        line_number: Optional[int] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.template_name = template_name
        self.line_number = line_number
        self.original_error = original_error


class TemplateCompilationError(TemplateError):
    """Raised when template compilation fails."""
    pass


class TemplateRenderError(TemplateError):
    """Raised when template rendering fails."""
    pass


@dataclass
class CompiledTemplate:
    """
    A compiled Jinja2 template ready for rendering.

    Templates are compiled once and can be rendered multiple times
    with different variable contexts.
    """

    name: str
    source: str
    template: Any  # jinja2.Template

    def render(self, variables: Dict[str, Any]) -> str:
        """
        Render template with provided variables.

        Raises:
            TemplateRenderError: If rendering fails
        """
        try:
            return self.template.render(**variables)
        except UndefinedError as e:
            raise TemplateRenderError(
                f"Undefined variable in template: {e}",
                template_name=self.name,
                original_error=e,
            )
        except Exception as e:
            raise TemplateRenderError(
                f"Template rendering failed: {e}",
                template_name=self.name,
                original_error=e,
            )


def _filter_py_string(value: Any) -> str:
    """Render a double-quoted Python string literal for generated source code."""
    return json.dumps(str(value), ensure_ascii=False)


class TemplateEngine:
    """
    Sandboxed Jinja2 engine shared by the artefact emitters.

    HTML pages are rendered with auto-escaping enabled; generated source
    code is rendered without it.
    """

    def __init__(self, *, autoescape: bool = False):
        self.env = SandboxedEnvironment(
            autoescape=autoescape,
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["py_string"] = _filter_py_string
        self._cache: Dict[str, CompiledTemplate] = {}

    def compile(self, source: str, *, name: str = "<template>") -> CompiledTemplate:
        """
        Compile a template from source string.

        Raises:
            TemplateCompilationError: If compilation fails
        """
        cached = self._cache.get(name)
        if cached is not None and cached.source == source:
            return cached
        try:
            template = self.env.from_string(source)
        except TemplateSyntaxError as e:
            raise TemplateCompilationError(
                f"Template syntax error: {e.message}",
                template_name=name,
                line_number=e.lineno,
                original_error=e,
            )
        compiled = CompiledTemplate(
            name=name,
            source=source,
            template=template,
        )
        self._cache[name] = compiled
        return compiled

    def render(
        self,
        template_source: str,
        variables: Dict[str, Any],
        *,
        name: str = "<template>",
    ) -> str:
        """Compile (or reuse) and render a template in one step."""
        return self.compile(template_source, name=name).render(variables)


def create_engine(*, autoescape: bool = False) -> TemplateEngine:
    """Factory function to create a configured template engine."""
    return TemplateEngine(autoescape=autoescape)


_code_engine: Optional[TemplateEngine] = None
_html_engine: Optional[TemplateEngine] = None


def get_code_engine() -> TemplateEngine:
    """Engine for generated source code and stylesheets (no escaping)."""
    global _code_engine
    if _code_engine is None:
        _code_engine = create_engine(autoescape=False)
    return _code_engine


def get_html_engine() -> TemplateEngine:
    """Engine for HTML pages (auto-escaping on)."""
    global _html_engine
    if _html_engine is None:
        _html_engine = create_engine(autoescape=True)
    return _html_engine
