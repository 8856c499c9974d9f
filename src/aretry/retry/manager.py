r"""Callback manager for retry lifecycle events."""

from __future__ import annotations

__all__ = ["CallbackManager"]

from typing import TYPE_CHECKING, Any

from aretry.callbacks import invoke_on_failure, invoke_on_retry, invoke_on_success

if TYPE_CHECKING:
    from aretry.retry.config import RetryOptions


class CallbackManager:
    """Dispatch lifecycle events to the callbacks of a ``RetryOptions``.

    Attributes:
        options: The options holding the callbacks.
    """

    def __init__(self, options: RetryOptions) -> None:
        self.options = options

    def on_retry(self, attempt: int, delay: float | None, error: BaseException) -> None:
        invoke_on_retry(self.options.on_retry, attempt=attempt, delay=delay, error=error)

    def on_success(self, attempt: int, result: Any, start_time: float) -> None:
        invoke_on_success(
            self.options.on_success, attempt=attempt, result=result, start_time=start_time
        )

    def on_failure(self, attempt: int, error: BaseException, start_time: float) -> None:
        invoke_on_failure(
            self.options.on_failure, attempt=attempt, error=error, start_time=start_time
        )
