r"""Configuration record for retry behavior.

Options are resolved in three layers: the generic defaults of
``RetryOptions``, the defaults of a retry executor, and the overrides passed
to a single call. Each layer produces a new immutable record through
``RetryOptions.merge``.
"""

from __future__ import annotations

__all__ = ["DEFAULT_DELAY", "DEFAULT_TIMES", "UNSET", "RetryOptions"]

from dataclasses import dataclass, fields, replace
from typing import TYPE_CHECKING, Any

from aretry.core.validation import validate_callback, validate_delay, validate_times

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from aretry.callbacks import FailureInfo, RetryInfo, SuccessInfo
    from aretry.retry.context import RetryContext

# Default wait between two attempts, in milliseconds
DEFAULT_DELAY = 500

# Default maximum number of retries (not counting the first attempt)
DEFAULT_TIMES = 3


class _Unset:
    """Marker for an option that was not provided."""

    _instance: _Unset | None = None

    def __new__(cls) -> _Unset:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


@dataclass(frozen=True)
class RetryOptions:
    """Configuration of a retry sequence.

    Args:
        delay: Wait between attempts. Either a fixed number of milliseconds,
            a delay strategy (``RetryContext -> number``, possibly returning
            an awaitable), or ``None`` to retry immediately without waiting.
        times: Maximum number of retries. ``None`` or ``math.inf`` retries
            until the result is accepted.
        until: Optional predicate over a successful result. When it returns
            a falsy value the result is rejected and the operation is retried.
            May be a coroutine function.
        on_retry: Optional callback invoked before each wait.
        on_success: Optional callback invoked when a result is accepted.
        on_failure: Optional callback invoked when the budget is exhausted.

    Example:
        ```pycon
        >>> from aretry.retry.config import RetryOptions
        >>> options = RetryOptions()
        >>> options.delay, options.times
        (500, 3)
        >>> merged = options.merge(times=5)
        >>> merged.times
        5
        >>> options.times  # Original unchanged
        3
        >>> options.merge(times=None).times is None  # Explicit None is kept
        True

        ```
    """

    delay: float | Callable[[RetryContext], float | Awaitable[float]] | None = DEFAULT_DELAY
    times: float | None = DEFAULT_TIMES
    until: Callable[[Any], bool | Awaitable[bool]] | None = None
    on_retry: Callable[[RetryInfo], None] | None = None
    on_success: Callable[[SuccessInfo], None] | None = None
    on_failure: Callable[[FailureInfo], None] | None = None

    def __post_init__(self) -> None:
        """Validate configuration parameters after initialization.

        Raises:
            ValueError: If ``delay`` or ``times`` is negative.
            TypeError: If an option has the wrong type.
        """
        validate_delay(self.delay)
        validate_times(self.times)
        validate_callback("until", self.until)
        validate_callback("on_retry", self.on_retry)
        validate_callback("on_success", self.on_success)
        validate_callback("on_failure", self.on_failure)

    def merge(self, **overrides: Any) -> RetryOptions:
        """Create a new record with the given options overridden.

        Options passed as ``UNSET`` keep the current value. Any other value,
        including ``None``, replaces it.

        Args:
            **overrides: Options to override.

        Returns:
            A new ``RetryOptions`` instance.

        Raises:
            TypeError: If an unknown option name is given.
        """
        names = {field.name for field in fields(self)}
        unknown = sorted(set(overrides) - names)
        if unknown:
            msg = f"Unknown retry option(s): {', '.join(unknown)}"
            raise TypeError(msg)
        return replace(self, **{k: v for k, v in overrides.items() if v is not UNSET})
