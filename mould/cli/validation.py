"""
Validation for CLI arguments and configuration.

This module provides reusable validation functions for CLI operations.
"""

import os
from pathlib import Path
from typing import Any, Optional

from .errors import CLIValidationError


def validate_path(value: Any, *, allow_none: bool = False, must_exist: bool = False) -> Optional[Path]:
    """
    Validate and convert value to Path.

    Args:
        value: Value to validate (string, PathLike, or None)
        allow_none: Whether None is acceptable
        must_exist: Whether the path must exist on the filesystem

    Raises:
        CLIValidationError: If value is not a valid path type or doesn't exist when must_exist=True

    Examples:
        >>> validate_path("/tmp/form.txt")
        PosixPath('/tmp/form.txt')
        >>> validate_path(None, allow_none=True)
    """
    if value is None:
        if allow_none:
            return None
        raise CLIValidationError(
            "Path value cannot be None",
            hint="Provide a valid file or directory path"
        )

    if isinstance(value, (str, os.PathLike)):
        path = Path(value)

        if must_exist and not path.exists():
            raise CLIValidationError(
                f"Path does not exist: {path}",
                hint="Ensure the file or directory exists before running this command"
            )

        return path

    raise CLIValidationError(
        f"Expected path-like value, got {type(value).__name__}",
        hint="Provide a string or Path object"
    )


def validate_package_name(value: Any, *, allow_none: bool = False) -> Optional[str]:
    """
    Validate the generated package name, which must be importable.

    Examples:
        >>> validate_package_name("myform")
        'myform'
        >>> validate_package_name("my-form")
        Traceback (most recent call last):
        ...
        mould.cli.errors.CLIValidationError: Package name 'my-form' is not a valid Python identifier
    """
    if value is None:
        if allow_none:
            return None
        raise CLIValidationError(
            "Package name cannot be None",
            hint="Provide a package name such as 'myform'"
        )
    if not isinstance(value, str) or not value.isidentifier():
        raise CLIValidationError(
            f"Package name {value!r} is not a valid Python identifier",
            hint="Use letters, digits and underscores only"
        )
    return value
