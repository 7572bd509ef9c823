"""Core domain models, configuration and error classification."""

from encore.core.config import (
    DisplayOptions,
    EncoreConfig,
    HandleOptions,
    LogConfig,
    RetryConfig,
)
from encore.core.errors import (
    ErrorCategory,
    ErrorDescriptor,
    HandledErrorResult,
    ParsedError,
    handle_error,
    parse_error,
)

__all__ = [
    "DisplayOptions",
    "EncoreConfig",
    "ErrorCategory",
    "ErrorDescriptor",
    "HandleOptions",
    "HandledErrorResult",
    "LogConfig",
    "ParsedError",
    "RetryConfig",
    "handle_error",
    "parse_error",
]
