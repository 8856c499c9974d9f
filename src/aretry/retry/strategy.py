r"""Resolution of the configured delay for the next attempt."""

from __future__ import annotations

__all__ = ["RetryStrategy"]

import inspect
import logging
from typing import TYPE_CHECKING

from aretry.backoff.constant import ConstantDelay

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from aretry.retry.context import RetryContext

logger: logging.Logger = logging.getLogger(__name__)


class RetryStrategy:
    """Compute the wait before the next attempt.

    Args:
        delay: A fixed number of milliseconds, a delay strategy, or ``None``
            for no wait.

    Attributes:
        delay: The configured delay.
        strategy: The delay strategy resolved from ``delay``. A fixed number
            is wrapped in a ``ConstantDelay``.
    """

    def __init__(
        self, delay: float | Callable[[RetryContext], float | Awaitable[float]] | None
    ) -> None:
        self.delay = delay
        self.strategy: Callable[[RetryContext], float | Awaitable[float]] | None = (
            ConstantDelay(delay) if delay is not None and not callable(delay) else delay
        )

    async def calculate_delay(self, context: RetryContext) -> float | None:
        """Resolve the delay for the next attempt.

        Strategy results are awaited when they are awaitable. The value is
        clamped at 0.

        Args:
            context: The retry context, already incremented for the failure.

        Returns:
            The delay in milliseconds, or ``None`` if no delay is configured.
        """
        if self.strategy is None:
            return None
        delay = self.strategy(context)
        if inspect.isawaitable(delay):
            delay = await delay
        delay = max(delay, 0)
        logger.debug(f"Waiting {delay}ms before attempt {context.attempt + 1}")
        return delay
