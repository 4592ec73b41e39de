"""
Mould CLI entry point.

Parses command-line arguments, configures logging and dispatches to the
build command.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from mould import __version__

from .commands import cmd_build

_LOG_LEVELS = {
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'warn': logging.WARNING,
    'warning': logging.WARNING,
    'error': logging.ERROR,
}


def _configure_logging(args: argparse.Namespace) -> None:
    """Configure the ``mould`` logger from the CLI flag or MOULD_LOG_LEVEL."""
    log_level = (
        getattr(args, 'log_level', None) or
        os.getenv('MOULD_LOG_LEVEL', 'warn')
    ).lower()
    numeric_level = _LOG_LEVELS.get(log_level, logging.WARNING)

    logger = logging.getLogger('mould')
    logger.setLevel(numeric_level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        # Prevent propagation to root logger to avoid duplicate messages
        logger.propagate = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Mould: compile a form definition into models and HTML templates",
        prog="mould",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        '--input', '-i',
        help='A file containing the form format to generate a form server from',
    )
    parser.add_argument(
        '--stylesheet',
        help="A single CSS file applied to the form (fully replaces mould's default styling)",
    )
    parser.add_argument(
        '--out', '-o',
        default=None,
        help='Output directory (defaults to the working directory)',
    )
    parser.add_argument(
        '--package',
        default=None,
        help='Name of the generated model package (default: myform)',
    )
    parser.add_argument(
        '--strict',
        action='store_true',
        help='Fail on unparseable lines and unreadable input instead of skipping them',
    )
    parser.add_argument(
        '--print-model',
        action='store_true',
        help='Print the assembled form model as JSON and exit',
    )
    parser.add_argument(
        '--config',
        default=None,
        help='Path to a mould.toml configuration file',
    )
    parser.add_argument(
        '--workspace',
        default=None,
        help='Directory searched for mould.toml (defaults to the working directory)',
    )
    parser.add_argument(
        '--log-level',
        choices=['debug', 'info', 'warn', 'error'],
        default=None,
        help='Set logging level (or set MOULD_LOG_LEVEL)',
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Print full tracebacks and detailed CLI errors (or set MOULD_VERBOSE=1)',
    )
    parser.set_defaults(func=cmd_build)
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """
    Main CLI entrypoint.

    Examples:
        >>> main(['--input', 'form.txt'])  # doctest: +SKIP
        ✓ Wrote myform/__init__.py
        ✓ Wrote myform/generated_form_model.py
        ✓ Wrote index-template.html
        ✓ Wrote response-template.html
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args)
    args.func(args)


__all__ = ["main", "build_parser"]
