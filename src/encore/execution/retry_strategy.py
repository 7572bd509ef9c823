"""Retry policy: retryability and exponential backoff.

Decides whether a classified failure may be re-attempted and how long to
wait first:

- Retryable when the status is one of 408/429/500/502/503/504, when the
  code is a known transient code (timeouts, throttling, DNS server errors,
  external target connection/handshake errors), or when the status is >= 500.
- Delay for attempt N (1-based) is ``1000 * 2**(N-1)`` ms capped at 30 s,
  with a 5 s floor for ``FUNCTION_THROTTLED`` and a 3 s floor for HTTP 429.

Example usage:
    from encore.execution.retry_strategy import recommend

    decision = recommend(err, attempt=1, max_attempts=3)
    if decision.should_retry:
        await asyncio.sleep(decision.delay_ms / 1000)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from encore.core.config import DEFAULT_RETRY_CONFIG, RetryConfig
from encore.core.errors import (
    RETRYABLE_CODES,
    RETRYABLE_STATUS_CODES,
    ParsedError,
    parse_error,
)
from encore.core.errors.codes import RATE_LIMIT_STATUS, THROTTLED_CODE

# Exponents beyond this always hit the cap; avoids huge intermediate ints.
_MAX_EXPONENT = 62


def is_retryable(error: Any) -> bool:
    """Check if the operation that produced ``error`` may be re-attempted.

    Args:
        error: A ParsedError or any raw failure (parsed first).
    """
    parsed = parse_error(error)
    return (
        parsed.status_code in RETRYABLE_STATUS_CODES
        or parsed.code in RETRYABLE_CODES
        or parsed.status_code >= 500
    )


def get_retry_delay_ms(
    error: Any,
    attempt: int = 1,
    config: RetryConfig | None = None,
) -> int:
    """Get the backoff delay in milliseconds before the next attempt.

    Args:
        error: A ParsedError or any raw failure (parsed first).
        attempt: The attempt that just failed (1-based).
        config: Backoff parameters; defaults reproduce 1s, 2s, 4s ... 30s.

    Returns:
        Delay in milliseconds.

    Raises:
        ValueError: If attempt is less than 1.
    """
    if attempt < 1:
        raise ValueError(f"attempt must be >= 1, got {attempt}")
    cfg = config or DEFAULT_RETRY_CONFIG
    parsed = parse_error(error)

    exponent = min(attempt - 1, _MAX_EXPONENT)
    delay = min(cfg.base_delay_ms * 2**exponent, cfg.max_delay_ms)

    if parsed.code == THROTTLED_CODE:
        delay = max(delay, cfg.throttle_floor_ms)
    if parsed.status_code == RATE_LIMIT_STATUS:
        delay = max(delay, cfg.rate_limit_floor_ms)

    return delay


def backoff_schedule(
    error: Any,
    max_attempts: int | None = None,
    config: RetryConfig | None = None,
) -> list[int]:
    """Delays (ms) a retry loop would wait between attempts for this error.

    Empty when the error is not retryable or only one attempt is allowed.
    """
    cfg = config or DEFAULT_RETRY_CONFIG
    attempts = cfg.max_attempts if max_attempts is None else max_attempts
    parsed = parse_error(error)
    if not is_retryable(parsed):
        return []
    return [get_retry_delay_ms(parsed, n, cfg) for n in range(1, attempts)]


@dataclass(frozen=True)
class RetryDecision:
    """Outcome of evaluating one failed attempt.

    Attributes:
        should_retry: Whether another attempt should be made.
        delay_ms: Wait before the next attempt (0 when not retrying).
        reason: Short machine-friendly reason, used in log events.
    """

    should_retry: bool
    delay_ms: int
    reason: str

    def to_dict(self) -> dict[str, object]:
        return {
            "should_retry": self.should_retry,
            "delay_ms": self.delay_ms,
            "reason": self.reason,
        }


def recommend(
    error: ParsedError | Any,
    attempt: int,
    max_attempts: int,
    config: RetryConfig | None = None,
) -> RetryDecision:
    """Decide what to do after ``attempt`` of ``max_attempts`` failed."""
    parsed = parse_error(error)
    if not is_retryable(parsed):
        return RetryDecision(should_retry=False, delay_ms=0, reason="not_retryable")
    if attempt >= max_attempts:
        return RetryDecision(should_retry=False, delay_ms=0, reason="attempts_exhausted")
    return RetryDecision(
        should_retry=True,
        delay_ms=get_retry_delay_ms(parsed, attempt, config),
        reason="retryable",
    )
