r"""Callback types for observing retry sequences.

Three lifecycle hooks are available:
- on_retry: Called after a failure, before waiting for the next attempt
- on_success: Called when a result is accepted
- on_failure: Called when the budget is exhausted, before the error is raised

Example:
    ```pycon
    >>> import asyncio
    >>> from aretry import create_retry
    >>> from aretry.callbacks import RetryInfo
    >>> seen = []
    >>> def log_retry(info: RetryInfo) -> None:
    ...     seen.append((info.attempt, info.delay))
    ...
    >>> retry = create_retry(delay=0, on_retry=log_retry)
    >>> values = iter([1, 2, 3])
    >>> asyncio.run(retry(lambda: next(values), until=lambda result: result == 3))
    3
    >>> seen
    [(1, 0), (2, 0)]

    ```
"""

from __future__ import annotations

__all__ = [
    "FailureInfo",
    "RetryInfo",
    "SuccessInfo",
    "invoke_on_failure",
    "invoke_on_retry",
    "invoke_on_success",
]

import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass
class RetryInfo:
    """Information passed to on_retry callback.

    Attributes:
        attempt: The number of failed attempts so far, i.e. the value of
            ``context.attempt`` after it was incremented.
        delay: The wait in milliseconds before the next attempt, or ``None``
            if no delay is configured.
        error: The failure that triggered the retry.
    """

    attempt: int
    delay: float | None
    error: BaseException


@dataclass
class SuccessInfo:
    """Information passed to on_success callback.

    Attributes:
        attempt: The number of failed attempts before the accepted one.
        result: The accepted result.
        total_time: Total time spent in the sequence including waits (seconds).
    """

    attempt: int
    result: Any
    total_time: float


@dataclass
class FailureInfo:
    """Information passed to on_failure callback.

    Attributes:
        attempt: The number of failed attempts before giving up.
        error: The last failure.
        total_time: Total time spent in the sequence including waits (seconds).
    """

    attempt: int
    error: BaseException
    total_time: float


def invoke_on_retry(
    on_retry: Callable[[RetryInfo], None] | None,
    *,
    attempt: int,
    delay: float | None,
    error: BaseException,
) -> None:
    """Invoke on_retry callback if provided."""
    if on_retry is not None:
        on_retry(RetryInfo(attempt=attempt, delay=delay, error=error))


def invoke_on_success(
    on_success: Callable[[SuccessInfo], None] | None,
    *,
    attempt: int,
    result: Any,
    start_time: float,
) -> None:
    """Invoke on_success callback if provided.

    Args:
        on_success: Optional callback to invoke when a result is accepted.
        attempt: The number of failed attempts before the accepted one.
        result: The accepted result.
        start_time: The ``time.monotonic`` timestamp when the sequence started.
    """
    if on_success is not None:
        on_success(
            SuccessInfo(
                attempt=attempt,
                result=result,
                total_time=time.monotonic() - start_time,
            )
        )


def invoke_on_failure(
    on_failure: Callable[[FailureInfo], None] | None,
    *,
    attempt: int,
    error: BaseException,
    start_time: float,
) -> None:
    """Invoke on_failure callback if provided.

    Args:
        on_failure: Optional callback to invoke when the budget is exhausted.
        attempt: The number of failed attempts before giving up.
        error: The last failure.
        start_time: The ``time.monotonic`` timestamp when the sequence started.
    """
    if on_failure is not None:
        on_failure(
            FailureInfo(
                attempt=attempt,
                error=error,
                total_time=time.monotonic() - start_time,
            )
        )
