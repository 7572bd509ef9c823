"""Tests for the retry policy (retryability and backoff)."""

import pytest

from encore.core.config import RetryConfig
from encore.core.errors import ErrorCategory, ParsedError
from encore.execution import (
    RetryDecision,
    backoff_schedule,
    get_retry_delay_ms,
    is_retryable,
    recommend,
)

from tests.helpers import response_failure


def _parsed(code: str, status_code: int) -> ParsedError:
    return ParsedError(
        code=code,
        category=ErrorCategory.HTTP,
        status_code=status_code,
        message=code,
        description=code,
        user_message=code,
    )


# ============================================================================
# is_retryable
# ============================================================================


class TestIsRetryable:
    """Tests for is_retryable()."""

    @pytest.mark.parametrize("status", [408, 429, 500, 502, 503, 504])
    def test_retryable_statuses(self, status: int) -> None:
        assert is_retryable(response_failure(status)) is True

    @pytest.mark.parametrize("status", [505, 508, 599])
    def test_any_server_error_is_retryable(self, status: int) -> None:
        assert is_retryable(_parsed(f"HTTP_{status}", status)) is True

    @pytest.mark.parametrize("status", [400, 401, 403, 404, 409, 413, 422])
    def test_client_errors_are_not_retryable(self, status: int) -> None:
        assert is_retryable(response_failure(status)) is False

    @pytest.mark.parametrize(
        "code",
        [
            "FUNCTION_INVOCATION_TIMEOUT",
            "EDGE_FUNCTION_INVOCATION_TIMEOUT",
            "MIDDLEWARE_INVOCATION_TIMEOUT",
            "FUNCTION_THROTTLED",
            "DNS_HOSTNAME_SERVER_ERROR",
            "ROUTER_EXTERNAL_TARGET_CONNECTION_ERROR",
            "ROUTER_EXTERNAL_TARGET_HANDSHAKE_ERROR",
        ],
    )
    def test_transient_codes(self, code: str) -> None:
        assert is_retryable(code) is True

    def test_transient_code_with_client_status(self) -> None:
        assert is_retryable(_parsed("FUNCTION_INVOCATION_TIMEOUT", 400)) is True

    def test_not_found_header_is_not_retryable(self) -> None:
        raw = response_failure(404, headers={"x-vercel-error": "RESOURCE_NOT_FOUND"})
        assert is_retryable(raw) is False

    def test_service_unavailable_response(self) -> None:
        assert is_retryable(response_failure(503)) is True

    def test_unknown_failure_defaults_to_retryable(self) -> None:
        # UNKNOWN_ERROR carries status 500.
        assert is_retryable(RuntimeError("boom")) is True

    def test_registered_client_error(self) -> None:
        assert is_retryable("URL_TOO_LONG") is False

    @pytest.mark.parametrize("key", ["statusCode", "status_code"])
    def test_status_record_client_error(self, key: str) -> None:
        assert is_retryable({key: 404}) is False

    @pytest.mark.parametrize("key", ["statusCode", "status_code"])
    def test_status_record_server_error(self, key: str) -> None:
        assert is_retryable({key: 503}) is True


# ============================================================================
# get_retry_delay_ms
# ============================================================================


class TestGetRetryDelay:
    """Tests for get_retry_delay_ms()."""

    @pytest.mark.parametrize(
        ("attempt", "expected"),
        [(1, 1000), (2, 2000), (3, 4000), (4, 8000), (5, 16000), (6, 30000), (7, 30000)],
    )
    def test_exponential_with_cap(self, attempt: int, expected: int) -> None:
        assert get_retry_delay_ms(response_failure(503), attempt) == expected

    def test_default_attempt_is_first(self) -> None:
        assert get_retry_delay_ms(response_failure(503)) == 1000

    def test_huge_attempt_stays_capped(self) -> None:
        assert get_retry_delay_ms(response_failure(503), 10_000) == 30000

    def test_throttled_floor(self) -> None:
        assert get_retry_delay_ms("FUNCTION_THROTTLED", 1) == 5000
        assert get_retry_delay_ms("FUNCTION_THROTTLED", 3) == 5000
        assert get_retry_delay_ms("FUNCTION_THROTTLED", 4) == 8000

    def test_throttled_via_header(self) -> None:
        raw = response_failure(503, headers={"x-vercel-error": "FUNCTION_THROTTLED"})
        assert get_retry_delay_ms(raw, 1) == 5000

    def test_rate_limit_floor(self) -> None:
        parsed = _parsed("HTTP_429", 429)
        assert get_retry_delay_ms(parsed, 1) == 3000
        assert get_retry_delay_ms(parsed, 2) == 3000
        assert get_retry_delay_ms(parsed, 3) == 4000

    @pytest.mark.parametrize("key", ["statusCode", "status_code"])
    def test_rate_limit_floor_for_status_record(self, key: str) -> None:
        assert get_retry_delay_ms({key: 429}, 1) == 3000
        assert get_retry_delay_ms({key: 429}, 3) == 4000

    @pytest.mark.parametrize("attempt", [0, -1])
    def test_invalid_attempt(self, attempt: int) -> None:
        with pytest.raises(ValueError, match="attempt must be >= 1"):
            get_retry_delay_ms(response_failure(503), attempt)

    def test_custom_config(self) -> None:
        config = RetryConfig(base_delay_ms=100, max_delay_ms=250)
        delays = [get_retry_delay_ms(response_failure(503), n, config) for n in (1, 2, 3)]
        assert delays == [100, 200, 250]


# ============================================================================
# backoff_schedule / recommend
# ============================================================================


class TestBackoffSchedule:
    """Tests for backoff_schedule()."""

    def test_default_attempts(self) -> None:
        assert backoff_schedule(response_failure(503)) == [1000, 2000]

    def test_explicit_attempts(self) -> None:
        assert backoff_schedule(response_failure(503), 6) == [1000, 2000, 4000, 8000, 16000]

    def test_single_attempt_has_no_waits(self) -> None:
        assert backoff_schedule(response_failure(503), 1) == []

    def test_not_retryable_has_no_waits(self) -> None:
        assert backoff_schedule(response_failure(404), 5) == []

    def test_config_max_attempts(self) -> None:
        assert backoff_schedule("FUNCTION_THROTTLED", config=RetryConfig(max_attempts=4)) == [
            5000,
            5000,
            5000,
        ]


class TestRecommend:
    """Tests for recommend()."""

    def test_retryable_before_last_attempt(self) -> None:
        decision = recommend(response_failure(503), attempt=2, max_attempts=3)
        assert decision == RetryDecision(should_retry=True, delay_ms=2000, reason="retryable")

    def test_exhausted(self) -> None:
        decision = recommend(response_failure(503), attempt=3, max_attempts=3)
        assert decision.should_retry is False
        assert decision.reason == "attempts_exhausted"
        assert decision.delay_ms == 0

    def test_not_retryable(self) -> None:
        decision = recommend(response_failure(404), attempt=1, max_attempts=3)
        assert decision.should_retry is False
        assert decision.reason == "not_retryable"

    def test_to_dict(self) -> None:
        decision = recommend("FUNCTION_THROTTLED", attempt=1, max_attempts=2)
        assert decision.to_dict() == {
            "should_retry": True,
            "delay_ms": 5000,
            "reason": "retryable",
        }
