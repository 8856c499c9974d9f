r"""Unit tests for the delay strategy base class."""

from __future__ import annotations

import pytest

from aretry.backoff import BaseDelayStrategy
from aretry.backoff.base import check_non_negative
from aretry.retry.context import RetryContext


def test_base_delay_strategy_is_abstract() -> None:
    """Test that BaseDelayStrategy cannot be instantiated."""
    with pytest.raises(TypeError):
        BaseDelayStrategy()  # type: ignore[abstract]


def test_custom_delay_strategy() -> None:
    """Test that a subclass only needs to implement __call__."""

    class SquareDelay(BaseDelayStrategy):
        def __call__(self, context: RetryContext) -> float:
            return context.attempt**2

    strategy = SquareDelay()
    assert strategy(RetryContext(attempt=3)) == 9


@pytest.mark.parametrize("value", [0, 0.0, 1, 2.5])
def test_check_non_negative_accepts(value: float) -> None:
    check_non_negative("value", value)


def test_check_non_negative_rejects_negative() -> None:
    with pytest.raises(ValueError, match=r"value must be non-negative, got -0.5"):
        check_non_negative("value", -0.5)
