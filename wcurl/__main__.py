"""
Main entry point for the wcurl application.
This module handles top-level setup, exception handling, and CLI invocation.
"""

import logging
import os
import sys

import typer

from wcurl.cli.app import app
from wcurl.cli.formatters import print_error


def main() -> None:
    """Main entry point function."""
    if os.name == "nt":
        try:
            sys.stdout.reconfigure(encoding="utf-8")
            sys.stderr.reconfigure(encoding="utf-8")
        except (TypeError, AttributeError):
            pass

    log = logging.getLogger("wcurl")

    try:
        app()
    except (typer.Exit, typer.Abort):
        pass
    except Exception as e:
        print_error(e)
        log.debug("Full traceback:", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
