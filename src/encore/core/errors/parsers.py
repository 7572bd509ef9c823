"""Error parser: normalize any failure value into a ParsedError.

This module provides:
- parse_error(): Resolve a raw failure into a ParsedError (never raises)
- extract_error_code(): Best-effort code extraction without full parsing

Code extraction from exception messages is a heuristic: the first maximal
run of uppercase letters and underscores is taken as a candidate code. A
message such as ``"Failed: FUNCTION_THROTTLED"`` yields ``"F"``, which does
not resolve, and the synthesized ``UNKNOWN_ERROR`` descriptor is used. Only
a candidate that resolves in the registry is trusted.
"""

from __future__ import annotations

import re
from typing import Any

from .classifier import get_user_friendly_message
from .codes import (
    DEFAULT_STATUS_CODE,
    ERROR_CODE_HEADER,
    ERROR_ID_HEADER,
    GENERIC_USER_MESSAGE,
    HTTP_CODE_PREFIX,
    UNKNOWN_ERROR,
    ErrorCategory,
)
from .inputs import (
    CodeString,
    NativeException,
    PreParsed,
    ResponseLike,
    Unrecognized,
    format_stack,
    get_field,
    get_header,
    match_failure,
    safe_str,
)
from .models import ParsedError
from .registry import get_error_by_code

_CODE_CANDIDATE = re.compile(r"[A-Z_]+")


def _first_code_candidate(text: str) -> str | None:
    match = _CODE_CANDIDATE.search(text)
    return match.group(0) if match else None


def _coerce_category(value: Any) -> ErrorCategory:
    if isinstance(value, ErrorCategory):
        return value
    try:
        return ErrorCategory(value)
    except ValueError:
        return ErrorCategory.UNKNOWN


def _coerce_int(value: Any, default: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    return value


def _from_pre_parsed(variant: PreParsed) -> ParsedError:
    """Adopt an already-shaped value.

    A ParsedError is returned unchanged. Other shapes keep every field they
    carry (snake_case or camelCase); missing fields come from the registry
    entry for the code, or from the unknown-error defaults. A status record
    without a code arrives here as ``UNKNOWN_ERROR`` and keeps its status.
    """
    raw = variant.raw
    if isinstance(raw, ParsedError):
        return raw

    base = get_error_by_code(variant.code)
    is_exception = isinstance(raw, BaseException)
    if is_exception and safe_str(raw):
        fallback_message = safe_str(raw)
    elif variant.code == UNKNOWN_ERROR:
        fallback_message = "An unknown error occurred"
    else:
        fallback_message = variant.code
    fallback_user_message = (
        GENERIC_USER_MESSAGE if variant.code == UNKNOWN_ERROR else fallback_message
    )

    def pick(default: Any, *names: str) -> Any:
        value = get_field(raw, *names)
        return default if value is None else value

    message = safe_str(pick(base.message if base else fallback_message, "message"))
    return ParsedError(
        code=variant.code,
        category=_coerce_category(
            pick(base.category if base else ErrorCategory.UNKNOWN, "category")
        ),
        status_code=_coerce_int(
            get_field(raw, "status_code", "statusCode"),
            base.status_code if base else DEFAULT_STATUS_CODE,
        ),
        message=message,
        description=safe_str(pick(base.description if base else message, "description")),
        user_message=safe_str(
            pick(
                base.user_message if base else fallback_user_message,
                "user_message",
                "userMessage",
            )
        ),
        actionable=bool(pick(base.actionable if base else True, "actionable")),
        contact_support=bool(
            pick(base.contact_support if base else False, "contact_support", "contactSupport")
        ),
        original_error=pick(raw, "original_error", "originalError"),
        stack=pick(format_stack(raw) if is_exception else None, "stack"),
        http_status=get_field(raw, "http_status", "httpStatus"),
    )


def _from_code_string(variant: CodeString) -> ParsedError:
    descriptor = get_error_by_code(variant.raw)
    if descriptor:
        return ParsedError.from_descriptor(descriptor, original_error=variant.raw)

    return ParsedError(
        code=UNKNOWN_ERROR,
        category=ErrorCategory.UNKNOWN,
        status_code=DEFAULT_STATUS_CODE,
        message=variant.raw,
        description="An unknown error occurred",
        user_message=variant.raw,
        actionable=True,
        original_error=variant.raw,
    )


def _from_exception(variant: NativeException) -> ParsedError:
    candidate = _first_code_candidate(variant.message)
    descriptor = get_error_by_code(candidate)
    if descriptor:
        return ParsedError.from_descriptor(
            descriptor, original_error=variant.raw, stack=variant.stack
        )

    return ParsedError(
        code=UNKNOWN_ERROR,
        category=ErrorCategory.UNKNOWN,
        status_code=DEFAULT_STATUS_CODE,
        message=variant.message,
        description=variant.message,
        user_message=variant.message or "An unexpected error occurred",
        actionable=True,
        original_error=variant.raw,
        stack=variant.stack,
    )


def _from_response(variant: ResponseLike) -> ParsedError:
    header_code = get_header(variant.headers, ERROR_CODE_HEADER) or get_header(
        variant.headers, ERROR_ID_HEADER
    )
    descriptor = get_error_by_code(header_code)
    if descriptor:
        return ParsedError.from_descriptor(
            descriptor, original_error=variant.raw, http_status=variant.status
        )

    status = variant.status
    return ParsedError(
        code=f"{HTTP_CODE_PREFIX}{status}",
        category=ErrorCategory.HTTP,
        status_code=status,
        message=variant.status_text or f"HTTP {status} Error",
        description=variant.status_text,
        user_message=get_user_friendly_message(
            None, f"Server returned an error ({status})"
        ),
        actionable=400 <= status < 500,
        original_error=variant.raw,
        http_status=status,
    )


def _from_unrecognized(variant: Unrecognized) -> ParsedError:
    return ParsedError(
        code=UNKNOWN_ERROR,
        category=ErrorCategory.UNKNOWN,
        status_code=DEFAULT_STATUS_CODE,
        message="An unknown error occurred",
        description="Unable to parse error information",
        user_message=GENERIC_USER_MESSAGE,
        actionable=True,
        original_error=variant.raw,
    )


def parse_error(raw: Any) -> ParsedError:
    """Parse a failure from any source into a ParsedError.

    Args:
        raw: A code string, an exception, a response-like failure, an
            already-classified value, or anything else.

    Returns:
        A ParsedError. Unrecognized input yields the ``UNKNOWN_ERROR``
        descriptor; this function never raises.
    """
    variant = match_failure(raw)
    if isinstance(variant, PreParsed):
        return _from_pre_parsed(variant)
    if isinstance(variant, CodeString):
        return _from_code_string(variant)
    if isinstance(variant, NativeException):
        return _from_exception(variant)
    if isinstance(variant, ResponseLike):
        return _from_response(variant)
    return _from_unrecognized(variant)


def extract_error_code(raw: Any) -> str | None:
    """Extract an error code from a failure without resolving it.

    Sources are tried in order: the value itself when it is a string, a
    ``code`` field, the first uppercase/underscore run of the message, the
    ``x-vercel-error`` response header, then ``response.data.error.code``.
    The returned code is not guaranteed to be registered.
    """
    if not raw:
        return None

    if isinstance(raw, str):
        return raw

    code = get_field(raw, "code")
    if code:
        return safe_str(code)

    message = safe_str(raw) if isinstance(raw, BaseException) else get_field(raw, "message")
    if message:
        candidate = _first_code_candidate(safe_str(message))
        if candidate:
            return candidate

    response = get_field(raw, "response")
    header_code = get_header(get_field(response, "headers"), ERROR_CODE_HEADER)
    if header_code:
        return header_code

    body_code = get_field(get_field(get_field(response, "data"), "error"), "code")
    if body_code:
        return safe_str(body_code)

    return None
