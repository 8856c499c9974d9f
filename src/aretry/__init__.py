r"""aretry - Retry asynchronous operations with composable backoff.

This package re-invokes an operation when it raises or when its result is
rejected by a validation predicate, waiting between attempts according to a
delay strategy, until the result is accepted or the retry budget runs out.

Key Features:
    - Works with plain functions and coroutine functions
    - Validation predicate (``until``) that can force a retry on a result
    - Delay strategies: constant, linear, exponential and Fibonacci
    - Jitter combinator for any fixed delay or strategy
    - Reusable executors with per-call option overrides
    - Callbacks and structured logging for observability

All delays are expressed in milliseconds.

Example:
    ```pycon
    >>> import asyncio
    >>> from aretry import create_retry, jitter, linear_delay
    >>> retry = create_retry(times=5, delay=jitter(linear_delay(base=1, scale=1)))
    >>> values = iter([None, None, "ready"])
    >>> asyncio.run(retry(lambda: next(values), until=lambda result: result is not None))
    'ready'

    ```
"""

from __future__ import annotations

__all__ = [
    "RetryContext",
    "RetryError",
    "RetryExecutor",
    "RetryOptions",
    "TooManyRetriesError",
    "UntilMismatchError",
    "__version__",
    "constant_delay",
    "create_retry",
    "default_retry",
    "exponential_delay",
    "fibonacci_delay",
    "is_too_many_retries_error",
    "is_until_mismatch_error",
    "jitter",
    "linear_delay",
    "sleep",
]

from importlib.metadata import PackageNotFoundError, version

from aretry.backoff import constant_delay, exponential_delay, fibonacci_delay, jitter, linear_delay
from aretry.exceptions import (
    RetryError,
    TooManyRetriesError,
    UntilMismatchError,
    is_too_many_retries_error,
    is_until_mismatch_error,
)
from aretry.retry import RetryContext, RetryExecutor, RetryOptions, create_retry, default_retry
from aretry.utils.sleep import sleep

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
