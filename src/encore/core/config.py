"""Configuration models for Encore.

Pydantic models for the options recognised by the handling facade, the
display formatter and the retry engine. Defaults reproduce the built-in
behaviour, so every model can be constructed with no arguments.

An ``EncoreConfig`` can be loaded from YAML::

    handling:
      show_details: true
    retry:
      max_attempts: 5
    logging:
      level: INFO
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, model_validator


class HandleOptions(BaseModel):
    """Options for ``handle_error``."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    log_diagnostics: bool = Field(
        default=True,
        description="Emit a diagnostic record for every handled error",
    )
    show_details: bool = Field(
        default=False,
        description="Include description and technicalMessage in the result",
    )
    include_stack: bool = Field(
        default=False,
        description="Include the stack text (when available) in the result and diagnostic",
    )


class DisplayOptions(BaseModel):
    """Options for ``format_error_for_display``."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    include_code: bool = Field(default=False, description="Append ' (CODE)'")
    include_category: bool = Field(default=False, description="Append ' [Category]'")
    technical: bool = Field(
        default=False,
        description="Render the developer-facing message instead of the user message",
    )


class RetryConfig(BaseModel):
    """Configuration for retryability and exponential backoff.

    Delay for attempt N (1-based) is ``base_delay_ms * 2**(N-1)`` capped at
    ``max_delay_ms``, then raised to the throttling or rate-limit floor
    where those apply.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    max_attempts: int = Field(default=3, ge=1, description="Total attempts including the first")
    base_delay_ms: int = Field(default=1000, gt=0, description="Delay after the first failure")
    max_delay_ms: int = Field(default=30000, gt=0, description="Maximum backoff delay")
    throttle_floor_ms: int = Field(
        default=5000, ge=0, description="Minimum delay for FUNCTION_THROTTLED"
    )
    rate_limit_floor_ms: int = Field(
        default=3000, ge=0, description="Minimum delay for HTTP 429 failures"
    )

    @model_validator(mode="after")
    def _validate_delay_range(self) -> RetryConfig:
        if self.base_delay_ms > self.max_delay_ms:
            raise ValueError(
                f"base_delay_ms ({self.base_delay_ms}) must not exceed "
                f"max_delay_ms ({self.max_delay_ms})"
            )
        return self


class LogConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    format: Literal["json", "console"] = "console"


class EncoreConfig(BaseModel):
    """Top-level configuration."""

    model_config = ConfigDict(extra="forbid")

    handling: HandleOptions = Field(default_factory=HandleOptions)
    display: DisplayOptions = Field(default_factory=DisplayOptions)
    retry: RetryConfig = Field(default_factory=RetryConfig)
    logging: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def from_yaml(cls, path: Path) -> EncoreConfig:
        """Load configuration from a YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f)
        return cls.model_validate(data or {})

    @classmethod
    def from_yaml_string(cls, yaml_str: str) -> EncoreConfig:
        """Load configuration from a YAML string."""
        data = yaml.safe_load(yaml_str)
        return cls.model_validate(data or {})


DEFAULT_RETRY_CONFIG = RetryConfig()
DEFAULT_HANDLE_OPTIONS = HandleOptions()
DEFAULT_DISPLAY_OPTIONS = DisplayOptions()
