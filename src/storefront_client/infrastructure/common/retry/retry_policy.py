from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeVar

import structlog
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential_jitter,
)

from storefront_client.core.exceptions import StorefrontError

logger = structlog.get_logger()

_T = TypeVar("_T")


def _is_transient(exc: BaseException) -> bool:
    return isinstance(exc, StorefrontError) and exc.retryable


def _log_retry(state: RetryCallState) -> None:
    exc = state.outcome.exception() if state.outcome else None
    logger.warning(
        "Retrying storefront backend read",
        processing_status="RETRYING",
        processing_attempts=state.attempt_number,
        error_type=type(exc).__name__ if exc else None,
        error_details=str(exc) if exc else None,
        error_retryable=True,
        source_system="StorefrontBackend",
    )


@dataclass(frozen=True)
class RetryPolicy:
    """Re-runs a call while it fails with a retryable ``StorefrontError``.

    Only idempotent reads get more than one attempt; the last error is re-raised as is.
    """

    max_attempts: int = 1
    initial_wait: float = 0.25
    max_wait: float = 5.0

    async def run(self, fn: Callable[[], Awaitable[_T]]) -> _T:
        if self.max_attempts <= 1:
            return await fn()
        retrying = AsyncRetrying(
            retry=retry_if_exception(_is_transient),
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential_jitter(initial=self.initial_wait, max=self.max_wait),
            before_sleep=_log_retry,
            reraise=True,
        )
        return await retrying(fn)
