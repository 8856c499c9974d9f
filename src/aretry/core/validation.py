r"""Parameter validation for retry options.

These checks run when a ``RetryOptions`` record is built so that invalid
configuration fails at setup time instead of in the middle of a retry
sequence.
"""

from __future__ import annotations

__all__ = ["validate_callback", "validate_delay", "validate_times"]

from numbers import Real
from typing import Any


def validate_delay(delay: Any) -> None:
    """Validate the ``delay`` option.

    Args:
        delay: ``None``, a non-negative number of milliseconds, or a
            callable delay strategy.

    Raises:
        ValueError: If ``delay`` is a negative number.
        TypeError: If ``delay`` is neither a number nor a callable.

    Example:
        ```pycon
        >>> from aretry.core.validation import validate_delay
        >>> validate_delay(500)
        >>> validate_delay(None)
        >>> validate_delay(lambda context: 100)
        >>> validate_delay(-1)
        Traceback (most recent call last):
        ...
        ValueError: delay must be >= 0, got -1

        ```
    """
    if delay is None or callable(delay):
        return
    if not isinstance(delay, Real) or isinstance(delay, bool):
        msg = f"delay must be a number or a delay strategy, got {type(delay).__name__}"
        raise TypeError(msg)
    if delay < 0:
        msg = f"delay must be >= 0, got {delay}"
        raise ValueError(msg)


def validate_times(times: Any) -> None:
    """Validate the ``times`` option.

    Args:
        times: ``None`` (unbounded) or a number of retries >= 0.
            ``math.inf`` is accepted.

    Raises:
        ValueError: If ``times`` is negative.
        TypeError: If ``times`` is not a number.

    Example:
        ```pycon
        >>> import math
        >>> from aretry.core.validation import validate_times
        >>> validate_times(3)
        >>> validate_times(math.inf)
        >>> validate_times(None)
        >>> validate_times(-1)
        Traceback (most recent call last):
        ...
        ValueError: times must be >= 0, got -1

        ```
    """
    if times is None:
        return
    if not isinstance(times, Real) or isinstance(times, bool):
        msg = f"times must be a number, got {type(times).__name__}"
        raise TypeError(msg)
    if times < 0:
        msg = f"times must be >= 0, got {times}"
        raise ValueError(msg)


def validate_callback(name: str, value: Any) -> None:
    """Check that an optional hook is callable.

    Raises:
        TypeError: If ``value`` is set but not callable.
    """
    if value is not None and not callable(value):
        msg = f"{name} must be callable, got {type(value).__name__}"
        raise TypeError(msg)
