"""Unified error model for Mould."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class ErrorLocation:
    path: Optional[str] = None
    line: Optional[int] = None
    column: Optional[int] = None

    def describe(self) -> str:
        if self.path and self.line is not None and self.column is not None:
            return f"{self.path}:{self.line}:{self.column}"
        if self.path and self.line is not None:
            return f"{self.path}:{self.line}"
        if self.line is not None:
            return f"line {self.line}"
        if self.path:
            return self.path
        return "unknown location"


class MouldError(Exception):
    """Base class for all compiler errors surfaced to users."""

    code: Optional[str] = None
    hint: Optional[str] = None

    def __init__(
        self,
        message: str,
        *,
        path: Optional[str] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
        code: Optional[str] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.source_line = source_line
        self.location = ErrorLocation(path=path, line=line, column=column)
        self.path = path
        self.line = line
        self.column = column
        if code is not None:
            self.code = code
        if hint is not None:
            self.hint = hint

    def format(self) -> str:
        """
        Describe the error on one line per part: message and location, the
        offending definition line when known, then the hint.

        >>> print(MouldSyntaxError("No '='", path="form.txt", line=2, source_line="input[Name]").format())
        No '=' (form.txt:2; MOULD_SYNTAX)
            2 | input[Name]
        """
        meta_parts = []
        location_desc = self.location.describe()
        if location_desc != "unknown location":
            meta_parts.append(location_desc)
        if self.code:
            meta_parts.append(self.code)
        lines = [f"{self.message} ({'; '.join(meta_parts)})" if meta_parts else self.message]
        if self.source_line is not None:
            gutter = str(self.line) if self.line is not None else ""
            lines.append(f"    {gutter} | {self.source_line.rstrip()}")
        if self.hint:
            lines.append(f"Hint: {self.hint}")
        return "\n".join(lines)


class MouldSyntaxError(MouldError):
    """Raised when a form definition line cannot be parsed."""

    code = "MOULD_SYNTAX"


class MouldCodegenError(MouldError):
    """Raised when an artefact cannot be generated from the form model."""

    code = "MOULD_CODEGEN"


__all__ = [
    "MouldError",
    "MouldSyntaxError",
    "MouldCodegenError",
    "ErrorLocation",
]
