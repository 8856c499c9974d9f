r"""Unit tests for ConstantDelay strategy."""

from __future__ import annotations

import pytest

from aretry.backoff import ConstantDelay, constant_delay
from aretry.retry.context import RetryContext


def test_constant_delay_ignores_attempt() -> None:
    """Test that the same delay is returned for every attempt."""
    strategy = ConstantDelay(delay=250)
    assert [strategy(RetryContext(attempt=i)) for i in range(5)] == [250] * 5


def test_constant_delay_default_value() -> None:
    assert ConstantDelay().delay == 500


def test_constant_delay_zero() -> None:
    assert ConstantDelay(delay=0)(RetryContext()) == 0


def test_constant_delay_invalid_delay() -> None:
    with pytest.raises(ValueError, match=r"delay must be non-negative"):
        ConstantDelay(delay=-1)


def test_constant_delay_factory() -> None:
    strategy = constant_delay(42)
    assert isinstance(strategy, ConstantDelay)
    assert strategy(RetryContext(attempt=7)) == 42


def test_constant_delay_repr() -> None:
    assert repr(ConstantDelay(delay=10)) == "ConstantDelay(delay=10)"
