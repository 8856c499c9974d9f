r"""Fibonacci delay strategy."""

from __future__ import annotations

__all__ = ["FibonacciDelay", "fibonacci_delay"]

from typing import TYPE_CHECKING

from aretry.backoff.base import BaseDelayStrategy, check_non_negative

if TYPE_CHECKING:
    from aretry.retry.context import RetryContext


class FibonacciDelay(BaseDelayStrategy):
    """Fibonacci delay strategy.

    Unlike the other strategies, this one is a stateful generator: every
    call advances the sequence by one term and returns the new term
    multiplied by ``scale``. The attempt number of the context is ignored.
    With the defaults the delays are 1000, 2000, 3000, 5000, 8000, ...

    Each instance owns its own sequence, so two strategies never share
    progress. Use ``reset`` to rewind an instance to its initial state.

    Args:
        start: Number of terms to skip before the first call (default: 0).
        scale: The multiplier applied to each term, in milliseconds
            (default: 1000).

    Example:
        ```pycon
        >>> from aretry.backoff import FibonacciDelay
        >>> from aretry.retry.context import RetryContext
        >>> strategy = FibonacciDelay()
        >>> context = RetryContext()
        >>> [strategy(context) for _ in range(6)]
        [1000, 2000, 3000, 5000, 8000, 13000]
        >>> strategy = FibonacciDelay(start=3)
        >>> strategy(context)
        5000

        ```
    """

    def __init__(self, start: int = 0, scale: float = 1000) -> None:
        check_non_negative("start", start)
        check_non_negative("scale", scale)
        self.start = start
        self.scale = scale
        self.reset()

    def reset(self) -> None:
        """Rewind the sequence to the term selected by ``start``."""
        self._current, self._previous = self._seed(self.start)

    @staticmethod
    def _seed(start: int) -> tuple[int, int]:
        """Advance the ``(current, previous)`` pair ``start`` times.

        Args:
            start: The number of steps to advance from ``(1, 0)``.

        Returns:
            The ``(current, previous)`` pair.
        """
        current, previous = 1, 0
        for _ in range(start):
            current, previous = current + previous, current
        return current, previous

    def __call__(self, context: RetryContext) -> float:  # noqa: ARG002
        self._current, self._previous = self._current + self._previous, self._current
        return self._current * self.scale

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(start={self.start}, scale={self.scale})"


def fibonacci_delay(start: int = 0, scale: float = 1000) -> FibonacciDelay:
    """Create a Fibonacci delay strategy.

    Args:
        start: Number of terms to skip before the first call.
        scale: The multiplier applied to each term, in milliseconds.

    Returns:
        The delay strategy.
    """
    return FibonacciDelay(start=start, scale=scale)
