r"""Jitter combinator randomizing any delay strategy."""

from __future__ import annotations

__all__ = ["Jitter", "jitter"]

import math
import random
from numbers import Real
from typing import TYPE_CHECKING

from aretry.backoff.base import BaseDelayStrategy
from aretry.backoff.constant import ConstantDelay

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.retry.context import RetryContext


class Jitter(BaseDelayStrategy):
    """Randomize the output of a delay within ``[0, 2n]``.

    The source is resolved once at construction: a number is wrapped in a
    ``ConstantDelay``, a callable is used as is. On every call the base
    delay ``n`` is computed from the source, then a random amount in
    ``[1, ceil(n)]`` is either added or subtracted with equal probability.
    The result is clamped to ``[0, 2n]``, which only matters for fractional
    delays since the amount is rounded up. No state is kept between calls.

    Args:
        source: A fixed delay in milliseconds or a delay strategy.

    Raises:
        TypeError: If ``source`` is neither a number nor a callable.

    Example:
        ```pycon
        >>> from aretry.backoff import Jitter, LinearDelay
        >>> from aretry.retry.context import RetryContext
        >>> strategy = Jitter(LinearDelay(base=100))
        >>> 0 <= strategy(RetryContext(attempt=2)) <= 600
        True
        >>> 0 <= Jitter(50)(RetryContext()) <= 100
        True

        ```
    """

    def __init__(self, source: float | Callable[[RetryContext], float]) -> None:
        if isinstance(source, Real) and not isinstance(source, bool):
            self.source: Callable[[RetryContext], float] = ConstantDelay(delay=source)
        elif callable(source):
            self.source = source
        else:
            msg = f"jitter expects a number or a delay strategy, got {type(source).__name__}"
            raise TypeError(msg)

    def __call__(self, context: RetryContext) -> float:
        direction = 1 if random.random() > 0.5 else -1  # noqa: S311
        n = self.source(context)
        amount = math.ceil(random.random() * n)  # noqa: S311
        return max(min(n + direction * amount, 2 * n), 0)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(source={self.source!r})"


def jitter(amount_or_delay: float | Callable[[RetryContext], float]) -> Jitter:
    """Wrap a fixed amount or a delay strategy with random jitter.

    Args:
        amount_or_delay: A fixed delay in milliseconds or a delay strategy.

    Returns:
        The jittered delay strategy.
    """
    return Jitter(amount_or_delay)
