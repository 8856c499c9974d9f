r"""Non-blocking suspension primitive used between retry attempts."""

from __future__ import annotations

__all__ = ["sleep"]

import asyncio


async def sleep(duration: float) -> None:
    """Suspend the current task for ``duration`` milliseconds.

    Other tasks scheduled on the event loop keep running while the caller
    is suspended. Cancelling the calling task interrupts the wait.

    Args:
        duration: The time to wait in milliseconds. Must be >= 0.

    Raises:
        ValueError: If ``duration`` is negative.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry.utils.sleep import sleep
        >>> asyncio.run(sleep(1))

        ```
    """
    if duration < 0:
        msg = f"duration must be non-negative, got {duration}"
        raise ValueError(msg)
    await asyncio.sleep(duration / 1000)
