"""Assembled form model shared by every artefact emitter."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List, Optional

from .directives import Directive


@dataclass(frozen=True)
class FieldSpec:
    """A generated answer field: attribute name, wire key and type."""

    key: str
    title: str
    required: bool = False
    label: str = ""
    element: str = "input"
    type_name: str = "str"
    line: Optional[int] = None


@dataclass(frozen=True)
class ExtractionSpec:
    """``answer.<attribute>`` is assigned the submitted value named ``key``."""

    attribute: str
    key: str


@dataclass
class Theme:
    """Optional theme colours; empty strings fall back to the defaults."""

    background: str = ""
    title_color: str = ""
    body: str = ""

    def resolved(self, defaults: "Theme") -> "Theme":
        return replace(
            self,
            background=self.background or defaults.background,
            title_color=self.title_color or defaults.title_color,
            body=self.body or defaults.body,
        )


@dataclass
class PageMeta:
    title: str = ""
    description: str = ""
    image: str = ""
    password: str = ""
    user: str = "mouldy"


@dataclass
class FormModel:
    """
    Ordered projection of a parsed form definition.

    ``body`` holds the HTML fragments of the form element itself, while
    ``fields`` and ``extractions`` list the generated answer fields in the
    same source order. ``content_fields`` names the page-level metadata
    present in the definition.
    """

    page: PageMeta = field(default_factory=PageMeta)
    theme: Theme = field(default_factory=Theme)
    content_fields: List[str] = field(default_factory=list)
    header: List[str] = field(default_factory=list)
    body: List[str] = field(default_factory=list)
    fields: List[FieldSpec] = field(default_factory=list)
    extractions: List[ExtractionSpec] = field(default_factory=list)
    skipped: List[Directive] = field(default_factory=list)

    @property
    def fragments(self) -> List[str]:
        return [*self.header, *self.body]


__all__ = ["FieldSpec", "ExtractionSpec", "Theme", "PageMeta", "FormModel"]
