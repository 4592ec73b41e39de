"""
Mould form compiler package.

Mould reads a small line-oriented form definition and compiles it into
three artefacts that always agree with each other:

* ``ast``: dataclasses for parsed directives and the assembled form model.
* ``parser``: the line parser turning raw text into directives.
* ``codegen``: key/title derivation, the element dispatch table, the
  document assembler and the emitters for the generated Python models,
  the form page and the response page.
* ``cli``: the ``mould`` command that ties everything together.

The generated model module is plain Pydantic, so a form server can import
it, parse a submission with ``FormAnswer.parse_post`` and echo the result
back through the response page.
"""

import re
from importlib import metadata as _metadata
from pathlib import Path


def _local_version() -> str | None:
    """Read the version from a source checkout's pyproject.toml."""
    pyproject = Path(__file__).resolve().parents[1] / "pyproject.toml"
    try:
        text = pyproject.read_text(encoding="utf-8")
    except OSError:
        return None
    match = re.search(r'^version\s*=\s*"([^"]+)"', text, flags=re.MULTILINE)
    return match.group(1) if match else None


try:
    __version__ = _metadata.version("mould")
except _metadata.PackageNotFoundError:  # pragma: no cover - source tree
    __version__ = _local_version() or "0.0.0"

__all__ = ["__version__"]
