"""Tests for the error taxonomy registry."""

import re

import pytest

from encore.core.errors import (
    APPLICATION_ERRORS,
    PLATFORM_ERRORS,
    REGISTRY,
    ErrorCategory,
    ErrorDescriptor,
    ErrorRegistry,
    RegistryLayer,
    get_error_by_code,
)


def _descriptor(code: str, **overrides: object) -> ErrorDescriptor:
    fields: dict = {
        "code": code,
        "category": ErrorCategory.FUNCTION,
        "status_code": 500,
        "message": f"{code} message",
        "description": f"{code} description",
        "user_message": f"{code} user message",
    }
    fields.update(overrides)
    return ErrorDescriptor(**fields)


# ============================================================================
# Registry contents
# ============================================================================


class TestRegistryContents:
    """Tests for the built-in partitions."""

    def test_keys_match_descriptor_codes(self) -> None:
        for code, descriptor in REGISTRY.items():
            assert descriptor.code == code

    def test_codes_are_upper_snake_case(self) -> None:
        pattern = re.compile(r"^[A-Z][A-Z0-9_]*$")
        for code in REGISTRY:
            assert pattern.match(code), f"{code} is not UPPER_SNAKE_CASE"

    def test_status_codes_are_positive(self) -> None:
        for descriptor in REGISTRY.values():
            assert descriptor.status_code > 0

    def test_size_counts_shared_code_once(self) -> None:
        assert len(APPLICATION_ERRORS) == 54
        assert len(PLATFORM_ERRORS) == 22
        assert len(REGISTRY) == 75

    def test_platform_entries_require_support(self) -> None:
        for descriptor in PLATFORM_ERRORS:
            assert descriptor.category == ErrorCategory.INTERNAL
            assert descriptor.contact_support is True
            assert descriptor.actionable is False

    def test_known_entry(self) -> None:
        descriptor = REGISTRY["FUNCTION_INVOCATION_TIMEOUT"]
        assert descriptor.category == ErrorCategory.FUNCTION
        assert descriptor.status_code == 504
        assert descriptor.actionable is True
        assert descriptor.contact_support is False

    def test_to_dict_uses_camel_case(self) -> None:
        data = REGISTRY["NOT_FOUND"].to_dict()
        assert data == {
            "code": "NOT_FOUND",
            "category": "Deployment",
            "statusCode": 404,
            "message": "Resource not found",
            "description": "The requested resource could not be found.",
            "userMessage": "The page you're looking for doesn't exist.",
            "actionable": True,
            "contactSupport": False,
        }


# ============================================================================
# Merge policy
# ============================================================================


class TestMergePolicy:
    """Tests for layered merging."""

    def test_platform_layer_wins_shared_code(self) -> None:
        descriptor = get_error_by_code("FUNCTION_THROTTLED")
        assert descriptor is not None
        assert descriptor.category == ErrorCategory.INTERNAL
        assert descriptor.status_code == 500
        assert descriptor.contact_support is True
        assert descriptor.actionable is False

    def test_overridden_codes_report_winning_layer(self) -> None:
        assert REGISTRY.overridden_codes == {"FUNCTION_THROTTLED": "platform"}

    def test_authoritative_layer(self) -> None:
        assert REGISTRY.authoritative_layer("FUNCTION_THROTTLED") == "platform"
        assert REGISTRY.authoritative_layer("NOT_FOUND") == "application"
        assert REGISTRY.authoritative_layer("NOPE") is None

    def test_later_layer_replaces_whole_entry(self) -> None:
        registry = ErrorRegistry(
            RegistryLayer("first", (_descriptor("SHARED", status_code=503, actionable=True),)),
            RegistryLayer("second", (_descriptor("SHARED", message="second"),)),
        )
        entry = registry["SHARED"]
        assert entry.message == "second"
        assert entry.status_code == 500

    def test_duplicate_code_within_layer_rejected(self) -> None:
        layer = RegistryLayer("dup", (_descriptor("A"), _descriptor("A")))
        with pytest.raises(ValueError, match="Duplicate code 'A'"):
            ErrorRegistry(layer)

    def test_layers_in_merge_order(self) -> None:
        assert REGISTRY.layers == ("application", "platform")


# ============================================================================
# Lookup
# ============================================================================


class TestLookup:
    """Tests for total lookup."""

    @pytest.mark.parametrize("code", [None, "", "UNKNOWN_CODE_XYZ", 42, ["NOT_FOUND"]])
    def test_unknown_or_invalid_is_absent(self, code: object) -> None:
        assert get_error_by_code(code) is None

    def test_lookup_is_case_sensitive(self) -> None:
        assert get_error_by_code("not_found") is None

    def test_registry_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            REGISTRY["NEW_CODE"] = _descriptor("NEW_CODE")  # type: ignore[index]

    def test_descriptor_is_frozen(self) -> None:
        descriptor = REGISTRY["NOT_FOUND"]
        with pytest.raises(AttributeError):
            descriptor.status_code = 200  # type: ignore[misc]

    def test_codes_in_category(self) -> None:
        sandbox = REGISTRY.codes_in(ErrorCategory.SANDBOX)
        assert [d.code for d in sandbox] == [
            "SANDBOX_NOT_FOUND",
            "SANDBOX_NOT_LISTENING",
            "SANDBOX_STOPPED",
        ]

    def test_codes_in_synthesized_category_is_empty(self) -> None:
        assert REGISTRY.codes_in(ErrorCategory.HTTP) == []


class TestErrorDescriptorValidation:
    """Tests for descriptor construction checks."""

    def test_empty_code_rejected(self) -> None:
        with pytest.raises(ValueError, match="code"):
            _descriptor("")

    def test_non_positive_status_rejected(self) -> None:
        with pytest.raises(ValueError, match="status_code"):
            _descriptor("X", status_code=0)
