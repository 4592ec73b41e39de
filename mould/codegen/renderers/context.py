"""Rendering context passed between element renderers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from mould.ast import Directive


@dataclass
class RenderContext:
    directive: Directive
    key: str
    title: str
    body_lines: List[str] = field(default_factory=list)

    @property
    def required(self) -> bool:
        return self.directive.required

    @property
    def value(self) -> str:
        return self.directive.value
