"""Pytest fixtures for Encore tests."""

import logging
from pathlib import Path
from typing import Generator

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_logging_state() -> Generator[None, None, None]:
    """Reset logging and CLI state before and after each test.

    This ensures test isolation for logging configuration.
    """
    from encore.cli import helpers as cli_helpers

    cli_helpers.reset_cli_state()

    # Reset structlog to default state
    structlog.reset_defaults()

    # Clear all handlers from root logger
    root_logger = logging.getLogger()
    original_handlers = root_logger.handlers[:]
    original_level = root_logger.level
    for handler in original_handlers:
        root_logger.removeHandler(handler)

    yield

    cli_helpers.reset_cli_state()
    structlog.reset_defaults()

    # Restore original handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in original_handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(original_level)


@pytest.fixture
def sample_config_dict() -> dict:
    """Return a sample configuration dictionary."""
    return {
        "handling": {
            "show_details": True,
        },
        "display": {
            "include_code": True,
        },
        "retry": {
            "max_attempts": 5,
            "base_delay_ms": 500,
            "max_delay_ms": 4000,
        },
        "logging": {
            "level": "INFO",
            "format": "json",
        },
    }


@pytest.fixture
def sample_yaml_config(tmp_path: Path, sample_config_dict: dict) -> Path:
    """Create a sample YAML config file."""
    import yaml

    config_path = tmp_path / "encore.yaml"
    with open(config_path, "w") as f:
        yaml.dump(sample_config_dict, f)
    return config_path


@pytest.fixture
def diagnostics() -> list[dict]:
    """Collects diagnostic records; pass ``diagnostics.append`` as a sink."""
    return []
