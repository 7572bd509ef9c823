"""Structured logging infrastructure for Encore.

Provides structured logging using structlog with a component name bound to
every entry. Console output is human-readable; JSON output is intended for
log shippers.

Example usage:
    from encore.core.logging import get_logger, configure_logging

    # Configure once at startup
    configure_logging(level="DEBUG", format="console")

    # Get a component-specific logger
    logger = get_logger("retry")

    # Log with key/value fields
    logger.info("retry_scheduled", attempt=2, delay_ms=2000)

    # Bind context for a scope
    op_logger = logger.bind(operation="load_playlist")
    op_logger.debug("attempt_started")
"""

from __future__ import annotations

import logging
import sys
from datetime import UTC, datetime
from typing import Any, Literal

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

# Sensitive field patterns that should never be logged
SENSITIVE_PATTERNS = frozenset({
    "api_key",
    "apikey",
    "api-key",
    "token",
    "secret",
    "password",
    "credential",
    "cookie",
    "authorization",
})

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
LogFormat = Literal["json", "console"]


def _sanitize_value(key: str, value: Any) -> Any:
    """Return "[REDACTED]" for values whose key looks sensitive."""
    key_lower = key.lower()
    for pattern in SENSITIVE_PATTERNS:
        if pattern in key_lower:
            return "[REDACTED]"
    return value


def _sanitize_event_dict(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Structlog processor that redacts sensitive fields.

    Nested dicts (e.g. request headers carried by a failure) are sanitized
    one level deep.
    """
    sanitized: EventDict = {}
    for key, value in event_dict.items():
        if isinstance(value, dict):
            sanitized[key] = {
                k: _sanitize_value(str(k), v) for k, v in value.items()
            }
        else:
            sanitized[key] = _sanitize_value(key, value)
    return sanitized


def _add_timestamp(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Structlog processor that adds an ISO8601 UTC timestamp."""
    event_dict["timestamp"] = datetime.now(UTC).isoformat()
    return event_dict


class EncoreLogger:
    """Encore-specific logger wrapper around structlog.

    The logger is bound to a component name and can have additional context
    bound for a specific scope.

    Note: the underlying structlog logger is fetched lazily on every call so
    that loggers created at import time still respect configuration applied
    later via configure_logging().
    """

    def __init__(self, component: str, **initial_context: Any) -> None:
        self._component = component
        self._context: dict[str, Any] = {"component": component, **initial_context}

    @property
    def component(self) -> str:
        return self._component

    def _get_logger(self) -> structlog.stdlib.BoundLogger:
        logger: structlog.stdlib.BoundLogger = structlog.get_logger().bind(**self._context)
        return logger

    def bind(self, **context: Any) -> EncoreLogger:
        """Create a new logger with additional bound context."""
        new_logger = EncoreLogger.__new__(EncoreLogger)
        new_logger._component = self._component
        new_logger._context = {**self._context, **context}
        return new_logger

    def debug(self, event: str, **kw: Any) -> None:
        self._get_logger().debug(event, **kw)

    def info(self, event: str, **kw: Any) -> None:
        self._get_logger().info(event, **kw)

    def warning(self, event: str, **kw: Any) -> None:
        self._get_logger().warning(event, **kw)

    def error(self, event: str, **kw: Any) -> None:
        self._get_logger().error(event, **kw)

    def exception(self, event: str, **kw: Any) -> None:
        """Log an exception with traceback.

        Should be called from within an exception handler.
        """
        self._get_logger().exception(event, **kw)


def _get_processors(format: LogFormat, include_timestamps: bool) -> list[Processor]:  # noqa: A002
    """Build the structlog processor chain for the given output format."""
    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        _sanitize_event_dict,
    ]

    if include_timestamps:
        processors.append(_add_timestamp)

    processors.extend([
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ])

    if format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    return processors


def configure_logging(
    level: LogLevel = "WARNING",
    format: LogFormat = "console",  # noqa: A002
    include_timestamps: bool = True,
) -> None:
    """Configure Encore structured logging.

    This should be called once at application startup before any logging occurs.

    Args:
        level: Minimum log level to capture.
        format: "console" for human-readable output on stderr, "json" for
            one JSON object per line on stdout.
        include_timestamps: Whether to include ISO8601 timestamps in log entries.
    """
    log_level = getattr(logging, level)

    stream = sys.stdout if format == "json" else sys.stderr
    handler = logging.StreamHandler(stream)
    handler.setLevel(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)

    # cache_logger_on_first_use=False keeps module-level loggers in sync with
    # configuration applied after import.
    structlog.configure(
        processors=_get_processors(format, include_timestamps),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(component: str, **initial_context: Any) -> EncoreLogger:
    """Get an Encore logger for a component.

    Args:
        component: The component name (e.g., "errors", "retry", "cli").
        **initial_context: Additional context to bind.

    Returns:
        An EncoreLogger instance bound to the component.
    """
    return EncoreLogger(component, **initial_context)


__all__ = [
    "EncoreLogger",
    "LogFormat",
    "LogLevel",
    "SENSITIVE_PATTERNS",
    "configure_logging",
    "get_logger",
]
