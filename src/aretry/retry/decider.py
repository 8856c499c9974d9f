r"""Decision logic for accepting results and stopping a retry sequence."""

from __future__ import annotations

__all__ = ["RetryDecider"]

import inspect
import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

logger: logging.Logger = logging.getLogger(__name__)


class RetryDecider:
    """Decides whether a result is accepted and whether to give up.

    Args:
        times: Maximum number of retries, or ``None`` for no limit.
        until: Optional predicate over a successful result.
    """

    def __init__(
        self,
        times: float | None,
        until: Callable[[Any], bool | Awaitable[bool]] | None = None,
    ) -> None:
        self.times = times
        self.until = until

    async def accepts(self, result: Any) -> bool:
        """Evaluate the ``until`` predicate against a successful result.

        Args:
            result: The value returned by the operation.

        Returns:
            ``True`` if no predicate is configured or if it passes.
        """
        if self.until is None:
            return True
        passed = self.until(result)
        if inspect.isawaitable(passed):
            passed = await passed
        if not passed:
            logger.debug(f"until predicate rejected result {result!r}")
        return bool(passed)

    def is_exhausted(self, attempt: int) -> bool:
        """Indicate whether the retry budget is used up.

        The check runs before the attempt counter is incremented for the
        current failure.

        Args:
            attempt: The number of failed attempts recorded so far.

        Returns:
            ``True`` if ``times`` is set and ``attempt`` exceeds it.
        """
        return self.times is not None and attempt > self.times
