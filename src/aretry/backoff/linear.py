r"""Linear delay strategy."""

from __future__ import annotations

__all__ = ["LinearDelay", "linear_delay"]

from typing import TYPE_CHECKING

from aretry.backoff.base import BaseDelayStrategy, check_non_negative

if TYPE_CHECKING:
    from aretry.retry.context import RetryContext


class LinearDelay(BaseDelayStrategy):
    """Linear delay strategy.

    Calculates delay as: base + attempt * scale.

    The delay grows by ``scale`` milliseconds after every failed attempt,
    starting from ``base``. It is a pure function of ``context.attempt``.

    Args:
        base: The delay offset in milliseconds (default: 0).
        scale: The step added per attempt in milliseconds (default: 100).

    Example:
        ```pycon
        >>> from aretry.backoff import LinearDelay
        >>> from aretry.retry.context import RetryContext
        >>> strategy = LinearDelay()
        >>> [strategy(RetryContext(attempt=i)) for i in range(4)]
        [0, 100, 200, 300]
        >>> strategy = LinearDelay(base=200)
        >>> [strategy(RetryContext(attempt=i)) for i in (1, 2)]
        [300, 400]

        ```
    """

    def __init__(self, base: float = 0, scale: float = 100) -> None:
        check_non_negative("base", base)
        check_non_negative("scale", scale)
        self.base = base
        self.scale = scale

    def __call__(self, context: RetryContext) -> float:
        return self.base + context.attempt * self.scale

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(base={self.base}, scale={self.scale})"


def linear_delay(base: float = 0, scale: float = 100) -> LinearDelay:
    """Create a linear delay strategy.

    Args:
        base: The delay offset in milliseconds.
        scale: The step added per attempt in milliseconds.

    Returns:
        The delay strategy.
    """
    return LinearDelay(base=base, scale=scale)
