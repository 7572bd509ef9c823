"""Error categories and sentinel codes.

This module provides:
- ErrorCategory: The fixed enumeration of error categories
- UNKNOWN_ERROR / HTTP_CODE_PREFIX: Codes synthesized for failures that
  do not resolve in the registry
- RETRYABLE_STATUS_CODES / RETRYABLE_CODES: Inputs to the retry policy

Category Taxonomy
=================

| Category   | Covers                                                        |
|------------|---------------------------------------------------------------|
| Function   | Invocation failure, timeout, throttling, payload too large   |
| Deployment | Blocked, deleted, disabled, not found, paused, redirecting   |
| DNS        | Hostname empty, not found, resolve failed, private, server   |
| Cache      | Fallback body too large                                       |
| Runtime    | Infinite loop, deprecated middleware runtime                  |
| Image      | Invalid, failed, unauthorized, too many redirects             |
| Request    | Method, header, URL and range errors                          |
| Routing    | Cannot match, external target errors, forks, fs checks        |
| Sandbox    | Not found, not listening, stopped                             |
| Internal   | Platform-side failures; users should contact support         |
| Unknown    | Synthesized fallback for unrecognised failures               |
| HTTP       | Synthesized from a bare HTTP response status                  |
"""

from __future__ import annotations

from enum import Enum


class ErrorCategory(str, Enum):
    """Categories of errors.

    Values are the display names used in API payloads and formatted
    messages (e.g. ``"[Function]"``).
    """

    FUNCTION = "Function"
    DEPLOYMENT = "Deployment"
    DNS = "DNS"
    CACHE = "Cache"
    RUNTIME = "Runtime"
    IMAGE = "Image"
    REQUEST = "Request"
    ROUTING = "Routing"
    SANDBOX = "Sandbox"
    INTERNAL = "Internal"
    UNKNOWN = "Unknown"
    HTTP = "HTTP"

    def __str__(self) -> str:
        return self.value


UNKNOWN_ERROR = "UNKNOWN_ERROR"
"""Code synthesized whenever a failure cannot be resolved in the registry."""

HTTP_CODE_PREFIX = "HTTP_"
"""Prefix for codes synthesized from a response status (``HTTP_503``)."""

DEFAULT_STATUS_CODE = 500

DEFAULT_USER_MESSAGE = "An error occurred. Please try again."
"""Fallback for ``get_user_friendly_message`` when the code is unknown."""

GENERIC_USER_MESSAGE = "An unexpected error occurred. Please try again."
"""User message for failures of an unrecognised shape."""

ERROR_CODE_HEADER = "x-vercel-error"
ERROR_ID_HEADER = "x-vercel-id"

RETRYABLE_STATUS_CODES: frozenset[int] = frozenset({408, 429, 500, 502, 503, 504})

RETRYABLE_CODES: frozenset[str] = frozenset({
    "FUNCTION_INVOCATION_TIMEOUT",
    "EDGE_FUNCTION_INVOCATION_TIMEOUT",
    "MIDDLEWARE_INVOCATION_TIMEOUT",
    "FUNCTION_THROTTLED",
    "DNS_HOSTNAME_SERVER_ERROR",
    "ROUTER_EXTERNAL_TARGET_CONNECTION_ERROR",
    "ROUTER_EXTERNAL_TARGET_HANDSHAKE_ERROR",
})

THROTTLED_CODE = "FUNCTION_THROTTLED"
RATE_LIMIT_STATUS = 429
