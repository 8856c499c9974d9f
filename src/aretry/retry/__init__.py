r"""Retry engine.

Public API:
    - RetryOptions: Immutable configuration of a retry sequence
    - RetryContext: Mutable state of one retry sequence
    - RetryExecutor: Asynchronous retry executor
    - RetryDecider: Logic for accepting results and giving up
    - RetryStrategy: Resolution of the delay before the next attempt
    - CallbackManager: Dispatch of lifecycle callbacks
    - create_retry: Factory for executors with default options
    - default_retry: Executor with the generic defaults
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_DELAY",
    "DEFAULT_TIMES",
    "UNSET",
    "CallbackManager",
    "RetryContext",
    "RetryDecider",
    "RetryExecutor",
    "RetryOptions",
    "RetryStrategy",
    "create_retry",
    "default_retry",
]

from aretry.retry.config import DEFAULT_DELAY, DEFAULT_TIMES, UNSET, RetryOptions
from aretry.retry.context import RetryContext
from aretry.retry.decider import RetryDecider
from aretry.retry.executor import RetryExecutor
from aretry.retry.factory import create_retry, default_retry
from aretry.retry.manager import CallbackManager
from aretry.retry.strategy import RetryStrategy
