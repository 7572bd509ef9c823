"""Execution layer for Encore.

Contains the retry policy and the retry-aware async wrapper.
"""

from encore.execution.error_handler import (
    ErrorHandler,
    LoopState,
    RetryLoop,
    run_with_retry,
)
from encore.execution.retry_strategy import (
    RetryDecision,
    backoff_schedule,
    get_retry_delay_ms,
    is_retryable,
    recommend,
)

__all__ = [
    "ErrorHandler",
    "LoopState",
    "RetryDecision",
    "RetryLoop",
    "backoff_schedule",
    "get_retry_delay_ms",
    "is_retryable",
    "recommend",
    "run_with_retry",
]
