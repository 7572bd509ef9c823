"""Retry-aware async wrapper and consumer-facing error state.

``RetryLoop`` drives one invocation of an async operation through its
attempts::

    IDLE -> RUNNING --success--> IDLE (result returned)
               |
               +--failure, retryable, attempt < max--> WAITING -> RUNNING
               |
               +--failure, not retryable or attempt == max--> ERRORED
                                                   (original exception re-raised)

Each loop owns its attempt counter, busy flag and last error; concurrent
loops share nothing but the read-only registry. Attempts are strictly
sequential. The only suspension points are the operation itself and the
backoff wait. Cancelling the task running a loop propagates
``asyncio.CancelledError`` immediately; it is never classified or retried.

``ErrorHandler`` is the stateful object UI code holds on to: it exposes
the last error, its handled details and a loading flag, and offers
``handle_error``, ``clear_error``, ``with_error_handling`` and ``retry``.

Example:
    handler = ErrorHandler(on_error=lambda details, err: show_toast(details.message))
    playlist = await handler.retry(lambda: client.fetch_playlist(playlist_id))
"""

from __future__ import annotations

import asyncio
import functools
from collections.abc import Awaitable, Callable
from enum import Enum
from typing import Any, Generic, ParamSpec, TypeVar

from encore.core.config import DEFAULT_RETRY_CONFIG, HandleOptions, RetryConfig
from encore.core.errors import HandledErrorResult, handle_error, parse_error
from encore.core.errors.handler import DiagnosticSink
from encore.core.logging import get_logger

from .retry_strategy import recommend

_logger = get_logger("retry")

T = TypeVar("T")
P = ParamSpec("P")


class LoopState(str, Enum):
    """Lifecycle of a single retry invocation."""

    IDLE = "idle"
    RUNNING = "running"
    WAITING = "waiting"
    ERRORED = "errored"
    CANCELLED = "cancelled"


class RetryLoop(Generic[T]):
    """One bounded retry invocation around an async operation.

    Args:
        operation: Zero-argument callable returning an awaitable.
        max_attempts: Total attempts including the first (default from config).
        config: Backoff parameters.
        on_attempt: Called with the attempt number before each attempt.
        on_failure: Called with the final exception before it is re-raised.
    """

    def __init__(
        self,
        operation: Callable[[], Awaitable[T]],
        *,
        max_attempts: int | None = None,
        config: RetryConfig | None = None,
        on_attempt: Callable[[int], None] | None = None,
        on_failure: Callable[[Exception], Any] | None = None,
    ) -> None:
        self.config = config or DEFAULT_RETRY_CONFIG
        self.max_attempts = self.config.max_attempts if max_attempts is None else max_attempts
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {self.max_attempts}")

        self._operation = operation
        self._on_attempt = on_attempt
        self._on_failure = on_failure

        self.state = LoopState.IDLE
        self.attempt = 0
        self.is_loading = False
        self.last_error: Exception | None = None
        self.delays_ms: list[int] = []

    async def run(self) -> T:
        """Run the operation until success, a non-retryable failure, or exhaustion.

        Returns:
            The operation's result.

        Raises:
            Exception: The original exception from the last failed attempt.
        """
        try:
            return await self._run()
        except asyncio.CancelledError:
            self.state = LoopState.CANCELLED
            raise
        finally:
            self.is_loading = False

    async def _run(self) -> T:
        attempt = 0
        while True:
            attempt += 1
            self.attempt = attempt
            self.state = LoopState.RUNNING
            self.is_loading = True
            self.last_error = None
            if self._on_attempt:
                self._on_attempt(attempt)

            try:
                result = await self._operation()
            except Exception as err:
                self.last_error = err
                parsed = parse_error(err)
                decision = recommend(parsed, attempt, self.max_attempts, self.config)

                if not decision.should_retry:
                    self.state = LoopState.ERRORED
                    self.is_loading = False
                    event = (
                        "retry_exhausted"
                        if decision.reason == "attempts_exhausted"
                        else "retry_not_retryable"
                    )
                    _logger.warning(
                        event,
                        attempt=attempt,
                        max_attempts=self.max_attempts,
                        code=parsed.code,
                        status_code=parsed.status_code,
                    )
                    if self._on_failure:
                        self._on_failure(err)
                    raise

                _logger.warning(
                    "retry_scheduled",
                    attempt=attempt,
                    max_attempts=self.max_attempts,
                    delay_ms=decision.delay_ms,
                    code=parsed.code,
                    status_code=parsed.status_code,
                )
                self.state = LoopState.WAITING
                self.delays_ms.append(decision.delay_ms)
                await asyncio.sleep(decision.delay_ms / 1000)
            else:
                self.state = LoopState.IDLE
                if attempt > 1:
                    _logger.info("retry_succeeded", attempt=attempt)
                return result


async def run_with_retry(
    operation: Callable[[], Awaitable[T]],
    max_attempts: int | None = None,
    *,
    config: RetryConfig | None = None,
    options: HandleOptions | None = None,
    sink: DiagnosticSink | None = None,
) -> T:
    """Run ``operation`` in a fresh RetryLoop; the final failure is handled then re-raised."""
    loop: RetryLoop[T] = RetryLoop(
        operation,
        max_attempts=max_attempts,
        config=config,
        on_failure=lambda err: handle_error(err, options, sink=sink),
    )
    return await loop.run()


class ErrorHandler:
    """Error state holder for UI code.

    Attributes are read-only views: ``error`` (last raw failure),
    ``error_details`` (its HandledErrorResult), ``is_loading`` and
    ``has_error``.

    Args:
        on_error: Called with ``(details, raw_error)`` after every handled error.
        auto_log: Emit a diagnostic record for handled errors.
        show_details: Include description/technical message in details.
        config: Retry configuration for ``retry``.
        sink: Diagnostic sink passed to the handling facade.
    """

    def __init__(
        self,
        on_error: Callable[[HandledErrorResult, Any], None] | None = None,
        *,
        auto_log: bool = True,
        show_details: bool = False,
        config: RetryConfig | None = None,
        sink: DiagnosticSink | None = None,
    ) -> None:
        self._on_error = on_error
        self.auto_log = auto_log
        self.show_details = show_details
        self.config = config or DEFAULT_RETRY_CONFIG
        self._sink = sink

        self._error: Any = None
        self._error_details: HandledErrorResult | None = None
        self._in_flight = 0

    @property
    def error(self) -> Any:
        return self._error

    @property
    def error_details(self) -> HandledErrorResult | None:
        return self._error_details

    @property
    def is_loading(self) -> bool:
        """True while any ``retry`` or wrapped call is still running."""
        return self._in_flight > 0

    @property
    def has_error(self) -> bool:
        return self._error is not None

    def handle_error(self, err: Any, **overrides: bool) -> HandledErrorResult:
        """Handle an error, store it as the current error and notify ``on_error``."""
        options = {
            "log_diagnostics": self.auto_log,
            "show_details": self.show_details,
            **overrides,
        }
        details = handle_error(err, sink=self._sink, **options)

        self._error = err
        self._error_details = details

        if self._on_error:
            try:
                self._on_error(details, err)
            except Exception:
                _logger.exception("on_error_callback_failed", code=details.code)
        return details

    def clear_error(self) -> None:
        self._error = None
        self._error_details = None

    def with_error_handling(
        self, fn: Callable[P, Awaitable[T]]
    ) -> Callable[P, Awaitable[T]]:
        """Wrap an async callable: track loading, handle and re-raise failures.

        No retries are attempted.
        """

        @functools.wraps(fn)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            self._in_flight += 1
            self.clear_error()
            try:
                result = await fn(*args, **kwargs)
            except Exception as err:
                self._in_flight -= 1
                self.handle_error(err)
                raise
            except BaseException:
                self._in_flight -= 1
                raise
            self._in_flight -= 1
            return result

        return wrapper

    async def retry(
        self,
        fn: Callable[[], Awaitable[T]],
        max_attempts: int | None = None,
    ) -> T:
        """Retry ``fn`` with exponential backoff.

        Args:
            fn: Zero-argument async callable.
            max_attempts: Total attempts (default 3).

        Returns:
            The first successful result.

        Raises:
            Exception: The original failure once it is not retryable or
                attempts are exhausted. It has been handled (stored and
                reported) before being raised.
        """
        released = False

        def release() -> None:
            nonlocal released
            if not released:
                released = True
                self._in_flight -= 1

        def fail(err: Exception) -> None:
            # Loading ends before the failure is reported.
            release()
            self.handle_error(err)

        loop: RetryLoop[T] = RetryLoop(
            fn,
            max_attempts=max_attempts,
            config=self.config,
            on_attempt=self._begin_attempt,
            on_failure=fail,
        )
        self._in_flight += 1
        try:
            return await loop.run()
        finally:
            release()

    def _begin_attempt(self, attempt: int) -> None:
        self.clear_error()
