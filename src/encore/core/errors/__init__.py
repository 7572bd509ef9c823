"""Error classification and handling.

Re-exports all public symbols of the errors package.
"""

from encore.core.errors.codes import (
    HTTP_CODE_PREFIX,
    RETRYABLE_CODES,
    RETRYABLE_STATUS_CODES,
    UNKNOWN_ERROR,
    ErrorCategory,
)
from encore.core.errors.models import ErrorDescriptor, HandledErrorResult, ParsedError
from encore.core.errors.registry import (
    APPLICATION_ERRORS,
    PLATFORM_ERRORS,
    REGISTRY,
    ErrorRegistry,
    RegistryLayer,
    get_error_by_code,
)
from encore.core.errors.inputs import (
    CodeString,
    FailureInput,
    NativeException,
    PreParsed,
    ResponseLike,
    Unrecognized,
    match_failure,
)
from encore.core.errors.classifier import (
    get_error_category,
    get_error_status_code,
    get_user_friendly_message,
    is_actionable,
    should_contact_support,
)
from encore.core.errors.parsers import extract_error_code, parse_error
from encore.core.errors.handler import (
    DiagnosticSink,
    create_error_response,
    format_error_for_display,
    handle_error,
)

__all__ = [
    "HTTP_CODE_PREFIX",
    "RETRYABLE_CODES",
    "RETRYABLE_STATUS_CODES",
    "UNKNOWN_ERROR",
    "ErrorCategory",
    "ErrorDescriptor",
    "HandledErrorResult",
    "ParsedError",
    "APPLICATION_ERRORS",
    "PLATFORM_ERRORS",
    "REGISTRY",
    "ErrorRegistry",
    "RegistryLayer",
    "get_error_by_code",
    "CodeString",
    "FailureInput",
    "NativeException",
    "PreParsed",
    "ResponseLike",
    "Unrecognized",
    "match_failure",
    "get_error_category",
    "get_error_status_code",
    "get_user_friendly_message",
    "is_actionable",
    "should_contact_support",
    "extract_error_code",
    "parse_error",
    "DiagnosticSink",
    "create_error_response",
    "format_error_for_display",
    "handle_error",
]
