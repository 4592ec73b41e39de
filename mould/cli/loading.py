"""Loading form definitions for CLI commands."""

from __future__ import annotations

import logging
from pathlib import Path

from mould.ast import FormModel
from mould.codegen import assemble_form
from mould.parser import parse_format

from .errors import CLIFileNotFoundError

logger = logging.getLogger(__name__)


def read_form_source(path: Path, *, strict: bool = False) -> str:
    """
    Read a form definition, dropping a leading byte-order mark.

    An unreadable file is logged and treated as an empty definition unless
    ``strict`` is set, in which case it is fatal.
    """
    try:
        return path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        if strict:
            raise CLIFileNotFoundError(
                f"Could not read form definition {path}: {exc}",
                hint="Check the path passed to --input",
                context={"path": str(path)},
            ) from exc
        logger.error("Could not read form definition %s: %s", path, exc)
        return ""


def load_form(path: Path, *, strict: bool = False, default_user: str = "mouldy") -> FormModel:
    """Read, parse and assemble the form definition at ``path``."""
    source = read_form_source(path, strict=strict)
    directives = parse_format(source, strict=strict, path=str(path))
    return assemble_form(directives, default_user=default_user)
