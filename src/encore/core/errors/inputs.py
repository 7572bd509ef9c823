"""Raw failure shapes accepted by the parser.

A failure can arrive as almost anything: a bare registry code, an
exception, an HTTP-response-like object or a value that was already
classified. ``match_failure`` inspects the raw value once and returns
exactly one variant of the ``FailureInput`` union, so downstream code
switches on a type instead of inspecting attributes.

Precedence (first match wins):

1. ``PreParsed`` - any non-string value carrying a non-empty string ``code``
2. ``CodeString`` - a ``str``
3. ``NativeException`` - a ``BaseException`` instance
4. ``ResponseLike`` - a value whose ``response`` has an integer ``status``
5. ``PreParsed`` - a record with an integer ``status_code``/``statusCode``
   but no code, adopted under ``UNKNOWN_ERROR`` so its status is kept
6. ``Unrecognized`` - everything else, including None

Both attribute access and mapping keys are accepted for field lookups, so
``{"response": {"status": 503}}`` and an object with ``.response.status``
match the same variant.

Matching never raises: a failing ``__str__`` reads as an empty message and
a failing header lookup reads as a missing header.
"""

from __future__ import annotations

import traceback
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .codes import UNKNOWN_ERROR


def get_field(obj: Any, *names: str) -> Any:
    """Return the first non-None field of ``obj`` among ``names``.

    Mappings are read by key, other objects by attribute. Returns None when
    nothing matches or ``obj`` is None.
    """
    if obj is None:
        return None
    for name in names:
        if isinstance(obj, Mapping):
            value = obj.get(name)
        else:
            value = getattr(obj, name, None)
        if value is not None:
            return value
    return None


def safe_str(value: Any) -> str:
    """``str(value)``, or an empty string when conversion raises."""
    try:
        return str(value)
    except Exception:
        return ""


def get_header(headers: Any, name: str) -> str | None:
    """Read a header from a mapping or any object with a ``get`` method.

    Plain mappings are searched case-insensitively when the exact key is
    missing. Empty values count as absent, and so does a lookup that raises.
    """
    if headers is None:
        return None
    getter = getattr(headers, "get", None)
    if not callable(getter):
        return None
    try:
        value = getter(name)
        if value is None and isinstance(headers, Mapping):
            lowered = name.lower()
            for key, candidate in headers.items():
                if isinstance(key, str) and key.lower() == lowered:
                    value = candidate
                    break
    except Exception:
        return None
    if value is None or value == "":
        return None
    return safe_str(value) or None


def format_stack(exc: BaseException) -> str | None:
    """Formatted traceback for an exception that has been raised, else None."""
    if exc.__traceback__ is None:
        return None
    return "".join(traceback.format_exception(exc))


# =============================================================================
# Variants
# =============================================================================


@dataclass(frozen=True)
class PreParsed:
    """A value that already carries a ``code`` field, or a bare status record."""

    raw: Any
    code: str


@dataclass(frozen=True)
class CodeString:
    """A bare code string, or free text that may not be a code at all."""

    raw: str


@dataclass(frozen=True)
class NativeException:
    """An exception instance."""

    raw: BaseException
    message: str
    stack: str | None


@dataclass(frozen=True)
class ResponseLike:
    """A failure wrapping an HTTP response."""

    raw: Any
    status: int
    status_text: str
    headers: Any


@dataclass(frozen=True)
class Unrecognized:
    """Anything else."""

    raw: Any


FailureInput = PreParsed | CodeString | NativeException | ResponseLike | Unrecognized


def _int_field(obj: Any, *names: str) -> int | None:
    value = get_field(obj, *names)
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def match_failure(raw: Any) -> FailureInput:
    """Select the single variant describing ``raw``."""
    if not isinstance(raw, str):
        code = get_field(raw, "code")
        if isinstance(code, str) and code:
            return PreParsed(raw=raw, code=code)

    if isinstance(raw, str):
        return CodeString(raw=raw)

    if isinstance(raw, BaseException):
        return NativeException(raw=raw, message=safe_str(raw), stack=format_stack(raw))

    response = get_field(raw, "response")
    status = _int_field(response, "status", "status_code")
    if status is not None:
        return ResponseLike(
            raw=raw,
            status=status,
            status_text=safe_str(
                get_field(response, "statusText", "status_text", "reason") or ""
            ),
            headers=get_field(response, "headers"),
        )

    if _int_field(raw, "status_code", "statusCode") is not None:
        return PreParsed(raw=raw, code=UNKNOWN_ERROR)

    return Unrecognized(raw=raw)
