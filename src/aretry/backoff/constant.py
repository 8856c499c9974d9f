r"""Constant delay strategy."""

from __future__ import annotations

__all__ = ["ConstantDelay", "constant_delay"]

from typing import TYPE_CHECKING

from aretry.backoff.base import BaseDelayStrategy, check_non_negative

if TYPE_CHECKING:
    from aretry.retry.context import RetryContext


class ConstantDelay(BaseDelayStrategy):
    """Constant delay strategy.

    Returns the same delay for every retry attempt, regardless of the
    attempt number.

    Args:
        delay: The fixed delay in milliseconds (default: 500).

    Example:
        ```pycon
        >>> from aretry.backoff import ConstantDelay
        >>> from aretry.retry.context import RetryContext
        >>> strategy = ConstantDelay(delay=250)
        >>> strategy(RetryContext(attempt=0))
        250
        >>> strategy(RetryContext(attempt=10))
        250

        ```
    """

    def __init__(self, delay: float = 500) -> None:
        check_non_negative("delay", delay)
        self.delay = delay

    def __call__(self, context: RetryContext) -> float:  # noqa: ARG002
        return self.delay

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(delay={self.delay})"


def constant_delay(delay: float = 500) -> ConstantDelay:
    """Create a constant delay strategy.

    Args:
        delay: The fixed delay in milliseconds.

    Returns:
        The delay strategy.
    """
    return ConstantDelay(delay=delay)
