"""Dataclasses representing parsed form definitions and the assembled model."""

from .directives import METADATA_PREFIX, Directive, ElementKind
from .model import ExtractionSpec, FieldSpec, FormModel, PageMeta, Theme

__all__ = [
    "Directive",
    "ElementKind",
    "METADATA_PREFIX",
    "ExtractionSpec",
    "FieldSpec",
    "FormModel",
    "PageMeta",
    "Theme",
]
