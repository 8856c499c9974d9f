r"""Abstract base class for delay strategies."""

from __future__ import annotations

__all__ = ["BaseDelayStrategy", "check_non_negative"]

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aretry.retry.context import RetryContext


class BaseDelayStrategy(ABC):
    """Abstract base class for delay strategies.

    A delay strategy maps the context of a retry sequence to the number of
    milliseconds to wait before the next attempt. Instances are callable so
    they can be used anywhere a plain ``context -> delay`` function is
    accepted.
    """

    @abstractmethod
    def __call__(self, context: RetryContext) -> float:
        """Compute the delay before the next attempt.

        Args:
            context: The retry context. ``context.attempt`` is the number of
                failed attempts so far.

        Returns:
            The delay in milliseconds.
        """


def check_non_negative(name: str, value: float) -> None:
    """Raise a ``ValueError`` if ``value`` is negative.

    Example:
        ```pycon
        >>> from aretry.backoff.base import check_non_negative
        >>> check_non_negative("scale", 2)
        >>> check_non_negative("scale", -1)
        Traceback (most recent call last):
        ...
        ValueError: scale must be non-negative, got -1

        ```
    """
    if value < 0:
        msg = f"{name} must be non-negative, got {value}"
        raise ValueError(msg)
