"""Shared utilities for Encore CLI commands.

This module contains helpers used across CLI command modules:
- Logging configuration driven by global options
- Config file loading (``--config``)
- Category option parsing
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

import typer
import yaml
from pydantic import ValidationError
from rich.console import Console

from encore.core.config import EncoreConfig
from encore.core.errors import ErrorCategory
from encore.core.logging import configure_logging

# =============================================================================
# Global CLI state
# =============================================================================


@dataclass
class CliState:
    """Options collected by the global callbacks.

    ``level``/``format`` left as None fall back to the config file's
    ``logging`` section, then to the built-in defaults.
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] | None = None
    format: Literal["json", "console"] | None = None
    config_file: Path | None = None
    config: EncoreConfig | None = None
    configured: bool = False


_state = CliState()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
LOG_FORMATS = ("json", "console")


def set_log_level(level: str) -> None:
    """Set the log level.

    Args:
        level: Log level string (DEBUG, INFO, WARNING, ERROR).
    """
    normalized = level.upper()
    if normalized not in LOG_LEVELS:
        choices = ", ".join(LOG_LEVELS)
        raise typer.BadParameter(f"Invalid log level '{level}'. Choose from: {choices}")
    _state.level = normalized  # type: ignore[assignment]


def set_log_format(fmt: str) -> None:
    """Set the log format (json or console)."""
    normalized = fmt.lower()
    if normalized not in LOG_FORMATS:
        choices = ", ".join(LOG_FORMATS)
        raise typer.BadParameter(f"Invalid log format '{fmt}'. Choose from: {choices}")
    _state.format = normalized  # type: ignore[assignment]


def set_config_file(path: Path | None) -> None:
    _state.config_file = path
    _state.config = None


def get_config(console: Console) -> EncoreConfig:
    """Load the config file given with ``--config``, or the defaults.

    Raises:
        typer.Exit: If the file cannot be read or fails validation.
    """
    if _state.config is not None:
        return _state.config

    if _state.config_file is None:
        _state.config = EncoreConfig()
        return _state.config

    try:
        _state.config = EncoreConfig.from_yaml(_state.config_file)
    except (OSError, yaml.YAMLError, ValidationError) as e:
        console.print(f"[red]Error loading config:[/red] {e}")
        raise typer.Exit(2) from None
    return _state.config


def configure_global_logging(console: Console) -> None:
    """Configure logging from global options and the config file.

    Only configures once per session.

    Raises:
        typer.Exit: If the config file is invalid.
    """
    if _state.configured:
        return

    config = get_config(console)
    configure_logging(
        level=_state.level or config.logging.level,
        format=_state.format or config.logging.format,
    )
    _state.configured = True


def reset_cli_state() -> None:
    """Reset all global CLI state (primarily for testing)."""
    global _state
    _state = CliState()


# =============================================================================
# Option parsing
# =============================================================================


def parse_category(value: str | None) -> ErrorCategory | None:
    """Resolve a ``--category`` value case-insensitively.

    Raises:
        typer.BadParameter: If the value names no category.
    """
    if value is None:
        return None
    lowered = value.lower()
    for category in ErrorCategory:
        if category.value.lower() == lowered or category.name.lower() == lowered:
            return category
    choices = ", ".join(c.value for c in ErrorCategory)
    raise typer.BadParameter(f"Unknown category '{value}'. Choose from: {choices}")
