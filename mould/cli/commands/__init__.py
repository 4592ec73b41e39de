"""CLI command implementations."""

from .build import cmd_build, resolve_build_config

__all__ = ["cmd_build", "resolve_build_config"]
