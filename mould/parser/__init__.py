"""Parser entry points for Mould form definitions."""

from .lines import parse_format, parse_line

__all__ = ["parse_format", "parse_line"]
