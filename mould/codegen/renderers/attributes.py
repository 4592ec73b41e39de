"""HTML attribute helpers for element renderers."""

from __future__ import annotations

import html
from typing import List, Optional, Sequence, Tuple

Attribute = Tuple[str, Optional[str]]


def format_attributes(attributes: Sequence[Attribute]) -> str:
    """Join attributes; a ``None`` value renders the bare attribute name."""
    parts = []
    for name, value in attributes:
        if value is None:
            parts.append(name)
        else:
            parts.append(f'{name}="{html.escape(value, quote=True)}"')
    return " ".join(parts)


def required_attribute(required: bool) -> List[Attribute]:
    return [("required", None)] if required else []


def parse_constraint_pairs(value: str) -> List[Attribute]:
    """
    Split ``"min=1, max=5"`` into attribute pairs.

    Names are passed through unchecked; a pair without ``=`` becomes a bare
    attribute and empty pairs are skipped.
    """
    attributes: List[Attribute] = []
    for pair in value.split(","):
        pair = pair.strip()
        if not pair:
            continue
        name, sep, raw = pair.partition("=")
        name = name.strip()
        if not sep:
            attributes.append((name, None))
        else:
            attributes.append((name, raw.strip()))
    return attributes
