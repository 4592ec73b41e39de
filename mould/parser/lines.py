"""Line parser for the form definition format."""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from mould.ast import METADATA_PREFIX, Directive
from mould.errors import MouldSyntaxError

logger = logging.getLogger(__name__)

_METADATA_RE = re.compile(r"^form-\w+$")
_ELEMENT_RE = re.compile(
    r"^(?P<required>!)?(?P<element>[^\s\[\]!#]+)"
    r"\[(?P<title>[^\]]*)\]"
    r"(?:\s*#(?P<key>\S+))?$"
)


def parse_line(
    line: str,
    lineno: Optional[int] = None,
    *,
    strict: bool = False,
    path: Optional[str] = None,
) -> Optional[Directive]:
    """
    Parse a single definition line.

    Returns ``None`` for blank lines and, unless ``strict`` is set, for
    lines that do not match either directive shape.
    """
    if not line.strip():
        return None

    splitter = line.find("=")
    if splitter < 0:
        if strict:
            raise MouldSyntaxError(
                "Directive line has no '=' separator",
                path=path,
                line=lineno,
                source_line=line,
                hint="Write directives as 'element[Title] = value'",
            )
        logger.warning("Rejecting line %s without '=': %r", lineno, line)
        return None

    left = line[:splitter].strip()
    value = line[splitter + 1:].strip()

    if left.startswith(METADATA_PREFIX) and _METADATA_RE.match(left):
        return Directive(element=left, value=value, line=lineno)

    match = _ELEMENT_RE.match(left)
    if match is None:
        if strict:
            raise MouldSyntaxError(
                f"Unrecognised directive {left!r}",
                path=path,
                line=lineno,
                source_line=line,
                hint="Expected 'form-<name>' or '[!]element[Title][#key]'",
            )
        logger.debug("Dropping unparseable line %s: %r", lineno, line)
        return None

    return Directive(
        element=match.group("element"),
        title=match.group("title"),
        key=(match.group("key") or "").strip(),
        required=match.group("required") == "!",
        value=value,
        line=lineno,
    )


def parse_format(text: str, *, strict: bool = False, path: Optional[str] = None) -> List[Directive]:
    """Parse a whole form definition into directives, preserving line order."""
    directives: List[Directive] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        directive = parse_line(line, lineno, strict=strict, path=path)
        if directive is not None:
            directives.append(directive)
    logger.debug("Parsed %d directive(s) from %s", len(directives), path or "<string>")
    return directives


__all__ = ["parse_format", "parse_line"]
