"""
Output formatting for CLI operations.

This module provides the status lines printed by the build command.
"""

import json
from dataclasses import asdict
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - used for type hints only
    from mould.ast import FormModel
    from mould.codegen import BuildReport


def print_success(message: str) -> None:
    """
    Print success message with checkmark prefix.

    Examples:
        >>> print_success("Build completed successfully")
        ✓ Build completed successfully
    """
    print(f"✓ {message}")


def print_error(message: str) -> None:
    """
    Print error message with cross prefix.

    Examples:
        >>> print_error("Build failed")
        ✗ Build failed
    """
    print(f"✗ {message}")


def print_warning(message: str) -> None:
    """
    Print warning message with warning prefix.

    Examples:
        >>> print_warning("Unknown element skipped")
        ⚠ Unknown element skipped
    """
    print(f"⚠ {message}")


def print_build_report(report: "BuildReport") -> None:
    """Print one line per written or failed artefact."""
    for path in report.written:
        print_success(f"Wrote {path}")
    for path, detail in report.failures.items():
        print_error(f"Could not write {path}: {detail}")


def print_form_model(model: "FormModel") -> None:
    """Pretty-print the assembled form model as JSON."""
    print(json.dumps(asdict(model), indent=2, ensure_ascii=False))
