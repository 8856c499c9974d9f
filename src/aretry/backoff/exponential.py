r"""Exponential delay strategy."""

from __future__ import annotations

__all__ = ["ExponentialDelay", "exponential_delay"]

from typing import TYPE_CHECKING

from aretry.backoff.base import BaseDelayStrategy, check_non_negative

if TYPE_CHECKING:
    from aretry.retry.context import RetryContext


class ExponentialDelay(BaseDelayStrategy):
    """Exponential delay strategy.

    Calculates delay as: scale ** attempt * base, except for the first two
    attempts which both wait ``base``. The power law only applies from
    attempt 2 onward, so the sequence for the defaults is
    100, 100, 400, 800, 1600, ...

    Args:
        base: The base delay in milliseconds (default: 100).
        scale: The growth factor (default: 2).

    Example:
        ```pycon
        >>> from aretry.backoff import ExponentialDelay
        >>> from aretry.retry.context import RetryContext
        >>> strategy = ExponentialDelay()
        >>> [strategy(RetryContext(attempt=i)) for i in range(1, 6)]
        [100, 400, 800, 1600, 3200]
        >>> strategy(RetryContext(attempt=0))
        100

        ```
    """

    def __init__(self, base: float = 100, scale: float = 2) -> None:
        check_non_negative("base", base)
        check_non_negative("scale", scale)
        self.base = base
        self.scale = scale

    def __call__(self, context: RetryContext) -> float:
        if context.attempt <= 1:
            return self.base
        return self.scale**context.attempt * self.base

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(base={self.base}, scale={self.scale})"


def exponential_delay(base: float = 100, scale: float = 2) -> ExponentialDelay:
    """Create an exponential delay strategy.

    Args:
        base: The base delay in milliseconds.
        scale: The growth factor.

    Returns:
        The delay strategy.
    """
    return ExponentialDelay(base=base, scale=scale)
