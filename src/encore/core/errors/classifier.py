"""Classifier utilities: total lookups over the error registry.

Every function here accepts any code value (including None or an unknown
string) and returns a defined default instead of raising:

| Function                    | Default for unknown codes          |
|-----------------------------|------------------------------------|
| get_error_category          | ErrorCategory.UNKNOWN              |
| get_error_status_code       | 500                                |
| is_actionable               | True                               |
| should_contact_support      | False                              |
| get_user_friendly_message   | the supplied fallback              |
"""

from __future__ import annotations

from .codes import DEFAULT_STATUS_CODE, DEFAULT_USER_MESSAGE, ErrorCategory
from .registry import get_error_by_code


def get_user_friendly_message(
    code: object,
    fallback: str = DEFAULT_USER_MESSAGE,
) -> str:
    """Return the descriptor's user message, or ``fallback`` if the code is unknown."""
    descriptor = get_error_by_code(code)
    return descriptor.user_message if descriptor else fallback


def should_contact_support(code: object) -> bool:
    """Check if the user should be told to contact support."""
    descriptor = get_error_by_code(code)
    return descriptor.contact_support if descriptor else False


def is_actionable(code: object) -> bool:
    """Check if the user can act on the error (retry, change input)."""
    descriptor = get_error_by_code(code)
    return descriptor.actionable if descriptor else True


def get_error_category(code: object) -> ErrorCategory:
    descriptor = get_error_by_code(code)
    return descriptor.category if descriptor else ErrorCategory.UNKNOWN


def get_error_status_code(code: object) -> int:
    descriptor = get_error_by_code(code)
    return descriptor.status_code if descriptor else DEFAULT_STATUS_CODE
