"""Data models for error classification.

This module provides:
- ErrorDescriptor: Static registry entry describing one error code
- ParsedError: A descriptor combined with context from one failure
- HandledErrorResult: Caller-facing shape produced by the handling facade

Python attributes are snake_case. ``to_dict()`` renders the camelCase wire
shape consumed by presentation code and API clients.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .codes import ErrorCategory


@dataclass(frozen=True)
class ErrorDescriptor:
    """Canonical static record for one error code.

    Attributes:
        code: Unique UPPER_SNAKE_CASE identifier, equal to the registry key.
        category: Category from the fixed enumeration.
        status_code: Nominal HTTP status for the error.
        message: Developer-facing summary.
        description: Long-form explanation.
        user_message: End-user facing text.
        actionable: Whether the user can do something about it.
        contact_support: Whether the user should contact support.
    """

    code: str
    category: ErrorCategory
    status_code: int
    message: str
    description: str
    user_message: str
    actionable: bool = True
    contact_support: bool = False

    def __post_init__(self) -> None:
        if not self.code:
            raise ValueError("code must be non-empty")
        if self.status_code <= 0:
            raise ValueError(f"status_code must be positive, got {self.status_code}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "category": self.category.value,
            "statusCode": self.status_code,
            "message": self.message,
            "description": self.description,
            "userMessage": self.user_message,
            "actionable": self.actionable,
            "contactSupport": self.contact_support,
        }


@dataclass(frozen=True)
class ParsedError:
    """Runtime instance combining a descriptor with one failure occurrence.

    Created per failure by ``parse_error`` and never mutated afterwards.
    Re-parsing a ParsedError returns the same object.
    """

    code: str
    category: ErrorCategory
    status_code: int
    message: str
    description: str
    user_message: str
    actionable: bool = True
    contact_support: bool = False
    original_error: Any = field(default=None, compare=False, repr=False)
    """The raw input this error was parsed from (read-only reference)."""

    stack: str | None = field(default=None, compare=False, repr=False)
    """Formatted traceback, when the raw input was an exception."""

    http_status: int | None = None
    """Transport status, when a response carried one distinct from status_code."""

    @classmethod
    def from_descriptor(
        cls,
        descriptor: ErrorDescriptor,
        original_error: Any,
        stack: str | None = None,
        http_status: int | None = None,
    ) -> ParsedError:
        return cls(
            code=descriptor.code,
            category=descriptor.category,
            status_code=descriptor.status_code,
            message=descriptor.message,
            description=descriptor.description,
            user_message=descriptor.user_message,
            actionable=descriptor.actionable,
            contact_support=descriptor.contact_support,
            original_error=original_error,
            stack=stack,
            http_status=http_status,
        )

    @property
    def descriptor(self) -> ErrorDescriptor:
        """The descriptor fields of this error, without occurrence context."""
        return ErrorDescriptor(
            code=self.code,
            category=self.category,
            status_code=self.status_code,
            message=self.message,
            description=self.description,
            user_message=self.user_message,
            actionable=self.actionable,
            contact_support=self.contact_support,
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "code": self.code,
            "category": self.category.value,
            "statusCode": self.status_code,
            "message": self.message,
            "description": self.description,
            "userMessage": self.user_message,
            "actionable": self.actionable,
            "contactSupport": self.contact_support,
        }
        if self.stack is not None:
            result["stack"] = self.stack
        if self.http_status is not None:
            result["httpStatus"] = self.http_status
        return result


@dataclass
class HandledErrorResult:
    """Caller-facing result of ``handle_error``.

    ``message`` is the user-facing message. ``description`` and
    ``technical_message`` are only populated when details were requested,
    ``stack`` only when stack inclusion was requested and a stack exists.
    """

    code: str
    message: str
    category: ErrorCategory
    status_code: int
    actionable: bool
    contact_support: bool
    description: str | None = None
    technical_message: str | None = None
    stack: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Render the wire shape; optional keys appear only when populated."""
        result: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "category": self.category.value,
            "statusCode": self.status_code,
            "actionable": self.actionable,
            "contactSupport": self.contact_support,
        }
        if self.description is not None:
            result["description"] = self.description
        if self.technical_message is not None:
            result["technicalMessage"] = self.technical_message
        if self.stack is not None:
            result["stack"] = self.stack
        return result
