"""
lrexpr CLI utilities.

Shared helpers used by the CLI command modules.
"""

import logging
import os
import platform

import typer

from lrexpr._version import get_version


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"lrexpr {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Configure root logging for a CLI run.

    --verbose forces DEBUG; otherwise LOG_LEVEL is honoured (default WARNING).
    """
    if verbose:
        level = logging.DEBUG
    else:
        log_level = os.getenv("LOG_LEVEL", "WARNING").upper()
        level = getattr(logging, log_level, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
