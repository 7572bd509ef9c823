"""Tests for the classifier utilities."""

import pytest

from encore.core.errors import (
    REGISTRY,
    ErrorCategory,
    get_error_category,
    get_error_status_code,
    get_user_friendly_message,
    is_actionable,
    should_contact_support,
)

UNKNOWN_INPUTS = [None, "", "NOT_A_REAL_CODE", 503, ["NOT_FOUND"]]


class TestKnownCodes:
    """Lookups for registered codes return descriptor fields."""

    def test_user_message(self) -> None:
        assert (
            get_user_friendly_message("FUNCTION_INVOCATION_TIMEOUT")
            == "The request took too long to process. Please try again."
        )

    def test_category(self) -> None:
        assert get_error_category("DNS_HOSTNAME_EMPTY") == ErrorCategory.DNS

    def test_status_code(self) -> None:
        assert get_error_status_code("INFINITE_LOOP_DETECTED") == 508

    def test_support_and_actionable_for_platform_code(self) -> None:
        assert should_contact_support("INTERNAL_CACHE_ERROR") is True
        assert is_actionable("INTERNAL_CACHE_ERROR") is False

    def test_support_and_actionable_for_application_code(self) -> None:
        assert should_contact_support("URL_TOO_LONG") is False
        assert is_actionable("URL_TOO_LONG") is True

    @pytest.mark.parametrize("code", sorted(REGISTRY))
    def test_lookups_agree_with_registry(self, code: str) -> None:
        descriptor = REGISTRY[code]
        assert get_error_category(code) == descriptor.category
        assert get_error_status_code(code) == descriptor.status_code
        assert is_actionable(code) is descriptor.actionable
        assert should_contact_support(code) is descriptor.contact_support


class TestUnknownCodes:
    """Lookups are total and fall back to fixed defaults."""

    @pytest.mark.parametrize("code", UNKNOWN_INPUTS)
    def test_defaults(self, code: object) -> None:
        assert get_error_category(code) == ErrorCategory.UNKNOWN
        assert get_error_status_code(code) == 500
        assert is_actionable(code) is True
        assert should_contact_support(code) is False

    def test_default_user_message(self) -> None:
        assert get_user_friendly_message("NOPE") == "An error occurred. Please try again."

    def test_custom_fallback(self) -> None:
        assert get_user_friendly_message(None, "Server returned an error (502)") == (
            "Server returned an error (502)"
        )

    def test_fallback_ignored_for_known_code(self) -> None:
        assert get_user_friendly_message("NOT_FOUND", "fallback") == (
            "The page you're looking for doesn't exist."
        )
