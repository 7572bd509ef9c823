"""Handling facade: parse, report and shape failures for callers.

This module provides:
- handle_error(): Parse a failure, emit a diagnostic record, return a
  HandledErrorResult for presentation code
- create_error_response(): Fixed ``{success, error, timestamp}`` payload
  for programmatic consumers
- format_error_for_display(): One-line display string

None of these functions raise for any input value.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from encore.core.config import (
    DEFAULT_DISPLAY_OPTIONS,
    DEFAULT_HANDLE_OPTIONS,
    DisplayOptions,
    HandleOptions,
)
from encore.core.logging import get_logger
from encore.utils.time import utc_timestamp

from .classifier import is_actionable, should_contact_support
from .models import HandledErrorResult, ParsedError
from .parsers import parse_error

_logger = get_logger("errors")

DiagnosticSink = Callable[[dict[str, Any]], None]
"""Receives one structured diagnostic record per handled error."""


def _log_sink(record: dict[str, Any]) -> None:
    _logger.error("error_handled", **record)


def _emit(record: dict[str, Any], sink: DiagnosticSink) -> None:
    # A failing sink must never break classification.
    try:
        sink(record)
    except Exception:
        logging.getLogger(__name__).debug("diagnostic sink failed", exc_info=True)


def build_diagnostic_record(parsed: ParsedError, include_stack: bool) -> dict[str, Any]:
    """Structured record describing one handled error."""
    record: dict[str, Any] = {
        "code": parsed.code,
        "message": parsed.message,
        "category": parsed.category.value,
        "status_code": parsed.status_code,
        "original_error": parsed.original_error,
    }
    if include_stack and parsed.stack:
        record["stack"] = parsed.stack
    return record


def _merge(model: Any, overrides: dict[str, Any]) -> Any:
    if not overrides:
        return model
    return type(model).model_validate({**model.model_dump(), **overrides})


def handle_error(
    raw: Any,
    options: HandleOptions | None = None,
    *,
    sink: DiagnosticSink | None = None,
    **overrides: bool,
) -> HandledErrorResult:
    """Handle an error and return user-friendly information.

    Args:
        raw: Any failure value.
        options: Handling options; keyword overrides (``log_diagnostics``,
            ``show_details``, ``include_stack``) are applied on top.
        sink: Diagnostic sink. Defaults to the ``errors`` structlog logger.

    Returns:
        HandledErrorResult. ``description``/``technical_message`` are set
        only with ``show_details``; ``stack`` only with ``include_stack``.
    """
    opts: HandleOptions = _merge(options or DEFAULT_HANDLE_OPTIONS, overrides)
    parsed = parse_error(raw)

    if opts.log_diagnostics:
        _emit(build_diagnostic_record(parsed, opts.include_stack), sink or _log_sink)

    result = HandledErrorResult(
        code=parsed.code,
        message=parsed.user_message,
        category=parsed.category,
        status_code=parsed.status_code,
        actionable=is_actionable(parsed.code),
        contact_support=should_contact_support(parsed.code),
    )
    if opts.show_details:
        result.description = parsed.description
        result.technical_message = parsed.message
    if opts.include_stack and parsed.stack:
        result.stack = parsed.stack
    return result


def create_error_response(raw: Any) -> dict[str, Any]:
    """Create an error response object for API-like usage.

    Example::

        {
            "success": False,
            "error": {"code": "FUNCTION_INVOCATION_TIMEOUT", "message": "...",
                      "category": "Function", "statusCode": 504,
                      "actionable": True, "contactSupport": False},
            "timestamp": "2024-01-15T10:30:00.000Z",
        }
    """
    parsed = parse_error(raw)
    return {
        "success": False,
        "error": {
            "code": parsed.code,
            "message": parsed.user_message,
            "category": parsed.category.value,
            "statusCode": parsed.status_code,
            "actionable": parsed.actionable,
            "contactSupport": parsed.contact_support,
        },
        "timestamp": utc_timestamp(),
    }


def format_error_for_display(
    raw: Any,
    options: DisplayOptions | None = None,
    **overrides: bool,
) -> str:
    """Format an error for display.

    Renders the user message (or the technical message with
    ``technical``), optionally suffixed with ``(CODE)`` and ``[Category]``.
    """
    opts: DisplayOptions = _merge(options or DEFAULT_DISPLAY_OPTIONS, overrides)
    parsed = parse_error(raw)

    message = parsed.message if opts.technical else parsed.user_message
    if opts.include_code:
        message = f"{message} ({parsed.code})"
    if opts.include_category:
        message = f"{message} [{parsed.category.value}]"
    return message
