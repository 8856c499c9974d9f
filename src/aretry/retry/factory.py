r"""Factory for retry executors bound to default options."""

from __future__ import annotations

__all__ = ["create_retry", "default_retry"]

from typing import Any

from aretry.retry.config import RetryOptions
from aretry.retry.executor import RetryExecutor


def create_retry(**defaults: Any) -> RetryExecutor:
    """Create a reusable retry entry point.

    The given options are merged over the generic defaults (``delay=500``,
    ``times=3``). Each call of the returned executor can override them
    again.

    Args:
        **defaults: Default options of the executor.

    Returns:
        The retry executor.

    Raises:
        TypeError: If an unknown option is given.
        ValueError: If an option has an invalid value.

    Example:
        ```pycon
        >>> import asyncio
        >>> import math
        >>> import random
        >>> from aretry import create_retry
        >>> retry = create_retry(times=math.inf, delay=0)
        >>> result = asyncio.run(retry(random.random, until=lambda result: result > 0.9))
        >>> result > 0.9
        True

        ```
    """
    return RetryExecutor(RetryOptions().merge(**defaults))


default_retry: RetryExecutor = create_retry()
