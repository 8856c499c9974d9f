r"""Asynchronous retry executor.

This module provides the ``RetryExecutor`` class that invokes an operation
until its result is accepted or the retry budget is exhausted.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

import inspect
import logging
import time
from typing import TYPE_CHECKING, Any, TypeVar

from aretry.exceptions import TooManyRetriesError, UntilMismatchError
from aretry.retry.config import RetryOptions
from aretry.retry.context import RetryContext
from aretry.retry.decider import RetryDecider
from aretry.retry.manager import CallbackManager
from aretry.retry.strategy import RetryStrategy
from aretry.utils.sleep import sleep
from aretry.utils.structured_logging import (
    clear_retry_id,
    get_retry_id,
    log_structured,
    new_retry_id,
    set_retry_id,
)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class RetryExecutor:
    """Runs an operation with automatic retries.

    An executor holds default options and can be called any number of
    times, including concurrently. Each call resolves its own options and
    owns its own ``RetryContext``, so calls never share state. The only
    exception is a stateful delay strategy such as ``FibonacciDelay``, which
    keeps advancing across calls when it is passed as an executor default.

    The sequence for one call:
    - Invoke the operation, awaiting the result if needed
    - If it returns and ``until`` accepts the result, return it
    - An exception raised by the operation or by ``until`` counts as a
      failure
    - Otherwise, if ``times`` is set and more than ``times`` failures were
      already recorded, raise ``TooManyRetriesError``
    - Record the failure, wait for the configured delay and try again

    Args:
        options: The default options of this executor.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry.retry import RetryExecutor, RetryOptions
        >>> executor = RetryExecutor(RetryOptions(delay=None, times=5))
        >>> results = iter([0.1, 0.5, 0.95])
        >>> asyncio.run(executor(lambda: next(results), until=lambda result: result > 0.9))
        0.95

        ```
    """

    def __init__(self, options: RetryOptions | None = None) -> None:
        self.options = options if options is not None else RetryOptions()

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(options={self.options!r})"

    async def __call__(self, operation: Callable[[], T | Awaitable[T]], **overrides: Any) -> T:
        """Run ``operation`` until it is accepted or the budget runs out.

        Args:
            operation: A zero-argument callable. It may be a plain function
                or a coroutine function.
            **overrides: Options overriding the executor defaults for this
                call only (``delay``, ``times``, ``until``, ``on_retry``,
                ``on_success``, ``on_failure``).

        Returns:
            The first result accepted by the ``until`` predicate.

        Raises:
            TooManyRetriesError: If the budget is exhausted. The last failure
                is chained as the cause.
            TypeError: If an unknown option is given.
            ValueError: If an option has an invalid value.
        """
        options = self.options.merge(**overrides)
        owns_retry_id = get_retry_id() is None
        if owns_retry_id:
            set_retry_id(new_retry_id())
        try:
            return await self._run(operation, options)
        finally:
            if owns_retry_id:
                clear_retry_id()

    async def _run(self, operation: Callable[[], T | Awaitable[T]], options: RetryOptions) -> T:
        context = RetryContext()
        decider = RetryDecider(options.times, options.until)
        strategy = RetryStrategy(options.delay)
        callbacks = CallbackManager(options)
        start_time = time.monotonic()

        while True:
            try:
                result = operation()
                if inspect.isawaitable(result):
                    result = await result
                context.result = result
                accepted = await decider.accepts(result)
            except Exception as exc:  # noqa: BLE001
                # Errors from the operation and from ``until`` are both retried
                failure: BaseException = exc
            else:
                if accepted:
                    callbacks.on_success(context.attempt, result, start_time)
                    return result
                failure = UntilMismatchError(result)

            log_structured(
                logger,
                logging.DEBUG,
                f"Attempt {context.attempt + 1} failed: {failure!r}",
                attempt=context.attempt,
                error_type=type(failure).__name__,
            )

            if decider.is_exhausted(context.attempt):
                callbacks.on_failure(context.attempt, failure, start_time)
                logger.debug(
                    f"Giving up after {context.attempt + 1} attempts (times={options.times})"
                )
                raise TooManyRetriesError(failure, attempts=context.attempt + 1) from failure

            context.attempt += 1

            delay = await strategy.calculate_delay(context)
            callbacks.on_retry(context.attempt, delay, failure)
            if delay is not None:
                context.previous_delay = delay
                log_structured(
                    logger,
                    logging.DEBUG,
                    f"Retrying in {delay}ms",
                    attempt=context.attempt,
                    delay=delay,
                )
                await sleep(delay)
