"""Encore CLI.

Command line front end for inspecting the error registry and trying out
classification and retry behaviour.

Package structure:
    cli/
    ├── __init__.py           # This file - app assembly
    ├── helpers.py            # Global option state, config loading
    ├── output.py             # Rich formatting
    └── commands/
        ├── __init__.py       # Command exports
        ├── registry.py       # codes, explain commands
        └── classify.py       # classify command
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from encore import __version__

from . import helpers as helpers
from .commands import classify, codes, explain
from .helpers import set_config_file, set_log_format, set_log_level
from .output import console

# =============================================================================
# Typer app definition
# =============================================================================

app = typer.Typer(
    name="encore",
    help="Error classification and retry tooling",
    add_completion=False,
)


# =============================================================================
# Global option callbacks
# =============================================================================


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"Encore v{__version__}")
        raise typer.Exit()


def log_level_callback(value: str | None) -> str | None:
    """Set log level from CLI option."""
    if value:
        set_log_level(value)
    return value


def log_format_callback(value: str | None) -> str | None:
    """Set log format from CLI option."""
    if value:
        set_log_format(value)
    return value


def config_callback(value: Path | None) -> Path | None:
    """Set config file path from CLI option."""
    if value:
        set_config_file(value)
    return value


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    log_level: Annotated[
        str | None,
        typer.Option(
            "--log-level",
            "-L",
            callback=log_level_callback,
            help="Logging level (DEBUG, INFO, WARNING, ERROR)",
            envvar="ENCORE_LOG_LEVEL",
        ),
    ] = None,
    log_format: Annotated[
        str | None,
        typer.Option(
            "--log-format",
            callback=log_format_callback,
            help="Log format: json or console",
            envvar="ENCORE_LOG_FORMAT",
        ),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            callback=config_callback,
            help="YAML configuration file",
            envvar="ENCORE_CONFIG",
        ),
    ] = None,
) -> None:
    """Encore - error classification and retry tooling."""


# =============================================================================
# Command registration
# =============================================================================

app.command()(codes)
app.command()(explain)
app.command()(classify)


__all__ = [
    "app",
    "main",
    "console",
]
