"""
CSC CLI Utilities.

Shared utility functions used across CLI modules.
"""

import logging
import platform
from pathlib import Path

import typer

from csc._version import get_version

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        python_version = platform.python_version()
        python_impl = platform.python_implementation()

        install_location = Path(__file__).resolve().parents[1]

        typer.echo(f"CSC version {get_version()}")
        typer.echo("")
        typer.echo("Environment:")
        typer.echo(f"  Python:        {python_impl} {python_version}")
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        typer.echo(f"  Location:      {install_location}")

        raise typer.Exit()


def configure_logging(level: str) -> None:
    """Send csc log records to stderr at the given level."""
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger("csc").setLevel(getattr(logging, level.upper(), logging.WARNING))
