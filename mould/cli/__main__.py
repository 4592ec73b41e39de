"""
Main entry point for the Mould CLI when run as a module.

This allows the CLI to be executed using:
    python -m mould.cli

or the equivalent ``mould`` console script.
"""

from . import main

if __name__ == '__main__':
    main()
