r"""Delay strategies for retry sequences.

This package provides the strategies used to compute the wait between two
attempts: constant, linear, exponential and Fibonacci delays, plus a jitter
combinator that randomizes any of them. All delays are in milliseconds.
"""

from __future__ import annotations

__all__ = [
    "BaseDelayStrategy",
    "ConstantDelay",
    "ExponentialDelay",
    "FibonacciDelay",
    "Jitter",
    "LinearDelay",
    "constant_delay",
    "exponential_delay",
    "fibonacci_delay",
    "jitter",
    "linear_delay",
]

from aretry.backoff.base import BaseDelayStrategy
from aretry.backoff.constant import ConstantDelay, constant_delay
from aretry.backoff.exponential import ExponentialDelay, exponential_delay
from aretry.backoff.fibonacci import FibonacciDelay, fibonacci_delay
from aretry.backoff.jittered import Jitter, jitter
from aretry.backoff.linear import LinearDelay, linear_delay
