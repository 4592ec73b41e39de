"""Code generation: naming, element dispatch, assembly and artefact emitters."""

from .assembler import assemble_form
from .dispatch import ELEMENT_RULES, ElementOutput, ElementRule, dispatch
from .models import render_model_module
from .naming import derive_key_and_title, title_case
from .pages import render_form_page, render_response_page
from .site import BuildReport, load_stylesheet, render_artifacts, write_artifacts
from .stylesheet import DEFAULT_THEME, render_stylesheet

__all__ = [
    "BuildReport",
    "DEFAULT_THEME",
    "ELEMENT_RULES",
    "ElementOutput",
    "ElementRule",
    "assemble_form",
    "derive_key_and_title",
    "dispatch",
    "load_stylesheet",
    "render_artifacts",
    "render_form_page",
    "render_model_module",
    "render_response_page",
    "render_stylesheet",
    "title_case",
    "write_artifacts",
]
