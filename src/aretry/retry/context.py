r"""Mutable state threaded through one retry sequence."""

from __future__ import annotations

__all__ = ["RetryContext"]

from dataclasses import dataclass
from typing import Any


@dataclass
class RetryContext:
    """State of a single retry sequence.

    One context is created per retry call and discarded when the call
    returns or raises. Delay strategies receive it to compute the next wait.

    Attributes:
        attempt: Number of failed attempts so far. Starts at 0 and is
            incremented by one after each failure.
        result: The value returned by the most recent successful invocation.
        previous_delay: The delay in milliseconds waited before the current
            attempt.

    Example:
        ```pycon
        >>> from aretry.retry.context import RetryContext
        >>> context = RetryContext()
        >>> context.attempt, context.previous_delay
        (0, 0)
        >>> RetryContext(attempt=3).attempt
        3

        ```
    """

    attempt: int = 0
    result: Any = None
    previous_delay: float = 0
