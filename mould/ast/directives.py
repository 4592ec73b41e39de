"""Directive AST nodes produced by the line parser."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


METADATA_PREFIX = "form-"


class ElementKind(str, Enum):
    """Element tags understood by the form compiler."""

    TITLE = "form-title"
    DESCRIPTION = "form-desc"
    IMAGE = "form-image"
    PASSWORD = "form-password"
    USER = "form-user"
    BACKGROUND = "form-bg"
    TITLE_COLOR = "form-titlecolor"
    FOREGROUND = "form-fg"
    PARAGRAPH = "form-paragraph"
    INPUT = "input"
    TEXTAREA = "textarea"
    HIDDEN = "hidden"
    EMAIL = "email"
    NUMBER = "number"
    RANGE = "range"
    RADIO = "radio"


@dataclass(frozen=True)
class Directive:
    """
    One parsed line of a form definition.

    ``element`` is kept as the raw tag so unknown elements survive parsing
    and can be reported by the dispatcher instead of vanishing silently.
    ``value`` is the trimmed text after the first ``=``.
    """

    element: str
    title: str = ""
    key: str = ""
    required: bool = False
    value: str = ""
    line: Optional[int] = None

    @property
    def is_metadata(self) -> bool:
        return self.element.startswith(METADATA_PREFIX)


__all__ = ["Directive", "ElementKind", "METADATA_PREFIX"]
