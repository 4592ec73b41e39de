"""
Build command implementation.

Compiles a form definition into the generated model package, the form
page and the response page.
"""

import argparse
import logging
from pathlib import Path

from mould.codegen import load_stylesheet, write_artifacts
from mould.config import BuildConfig, load_build_config

from ..errors import CLIValidationError, handle_cli_exception
from ..loading import load_form
from ..output import print_build_report, print_form_model, print_warning
from ..validation import validate_package_name, validate_path

logger = logging.getLogger(__name__)


def resolve_build_config(args: argparse.Namespace) -> BuildConfig:
    """Merge the configuration file with command-line overrides."""
    workspace = validate_path(getattr(args, "workspace", None), allow_none=True) or Path.cwd()
    config_path = validate_path(getattr(args, "config", None), allow_none=True, must_exist=True)
    config = load_build_config(workspace, config_path)

    out = validate_path(getattr(args, "out", None), allow_none=True)
    stylesheet = validate_path(getattr(args, "stylesheet", None), allow_none=True)
    package = validate_package_name(getattr(args, "package", None), allow_none=True)
    strict = True if getattr(args, "strict", False) else None
    return config.with_overrides(
        out=out,
        stylesheet=stylesheet,
        package=package,
        strict=strict,
    )


def cmd_build(args: argparse.Namespace) -> None:
    """
    Handle the build command.

    This command:
    1. Resolves configuration from the config file and CLI args
    2. Reads, parses and assembles the form definition
    3. Writes each artefact independently and reports the outcome

    Raises:
        SystemExit: On a missing input flag or any fatal error
    """
    try:
        if not getattr(args, "input", None):
            raise CLIValidationError(
                "must pass --input <file containing form format>",
                hint="Example: mould --input form.txt",
            )
        source_path = validate_path(args.input)
        config = resolve_build_config(args)

        model = load_form(source_path, strict=config.strict, default_user=config.default_user)
        for directive in model.skipped:
            print_warning(f"Skipped unknown element {directive.element!r} on line {directive.line}")

        if getattr(args, "print_model", False):
            print_form_model(model)
            return

        external_css = load_stylesheet(config.stylesheet)
        report = write_artifacts(model, config, external_css)
        print_build_report(report)
        if not report.ok:
            logger.warning("%d artefact(s) could not be written", len(report.failures))
    except Exception as exc:
        handle_cli_exception(exc, verbose=getattr(args, "verbose", False))
