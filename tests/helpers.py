r"""Operations with scripted outcomes used across the test suite."""

from __future__ import annotations

__all__ = ["AsyncFlakyOperation", "FlakyOperation", "failing", "succeed_after"]

from typing import Any


class FlakyOperation:
    """Operation that replays a script of outcomes.

    Each call consumes the next item of ``outcomes``. Exceptions (instances
    or classes) are raised, anything else is returned. The last outcome is
    repeated once the script is exhausted.
    """

    def __init__(self, *outcomes: Any) -> None:
        if not outcomes:
            msg = "at least one outcome is required"
            raise ValueError(msg)
        self.outcomes = outcomes
        self.calls = 0

    def _next(self) -> Any:
        outcome = self.outcomes[min(self.calls, len(self.outcomes) - 1)]
        self.calls += 1
        if isinstance(outcome, BaseException) or (
            isinstance(outcome, type) and issubclass(outcome, BaseException)
        ):
            raise outcome
        return outcome

    def __call__(self) -> Any:
        return self._next()


class AsyncFlakyOperation(FlakyOperation):
    """Coroutine version of ``FlakyOperation``."""

    async def __call__(self) -> Any:
        return self._next()


def failing(exc: BaseException | type[BaseException] | None = None) -> FlakyOperation:
    """Create an operation that always raises."""
    return FlakyOperation(exc if exc is not None else RuntimeError)


def succeed_after(failures: int, result: Any = "ok") -> FlakyOperation:
    """Create an operation that raises ``failures`` times, then returns
    ``result``."""
    return FlakyOperation(*([RuntimeError] * failures), result)
