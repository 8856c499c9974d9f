r"""Unit tests for the Jitter combinator."""

from __future__ import annotations

import random
from unittest.mock import patch

import pytest

from aretry.backoff import ConstantDelay, Jitter, LinearDelay, jitter, linear_delay
from aretry.retry.context import RetryContext

LINEAR_EXPECTED = [100, 200, 300, 400, 500, 600, 700, 800, 900, 1000]


@pytest.mark.parametrize("value", [0.25, 0.75])
@pytest.mark.parametrize("amount", [1, 2, 3])
def test_jitter_fixed_amount_bounds(value: float, amount: int) -> None:
    """Test that jitter never goes above 2n or below 0."""
    with patch("aretry.backoff.jittered.random.random", return_value=value):
        delay = jitter(amount)(RetryContext(attempt=0))
    assert 0 <= delay <= 2 * amount


@pytest.mark.parametrize("value", [0.25, 0.75])
def test_jitter_composition_bounds(value: float) -> None:
    strategy = jitter(linear_delay(base=100))
    with patch("aretry.backoff.jittered.random.random", return_value=value):
        for attempt, expected in enumerate(LINEAR_EXPECTED):
            delay = strategy(RetryContext(attempt=attempt))
            assert 0 <= delay <= 2 * expected


def test_jitter_subtracts_when_draw_is_low() -> None:
    with patch("aretry.backoff.jittered.random.random", return_value=0.25):
        assert jitter(100)(RetryContext()) == 75  # 100 - ceil(0.25 * 100)


def test_jitter_adds_when_draw_is_high() -> None:
    with patch("aretry.backoff.jittered.random.random", return_value=0.75):
        assert jitter(100)(RetryContext()) == 175  # 100 + ceil(0.75 * 100)


def test_jitter_direction_then_amount() -> None:
    """Test that the first draw picks the direction and the second one the
    amount."""
    with patch("aretry.backoff.jittered.random.random", side_effect=[0.9, 0.5]):
        assert jitter(10)(RetryContext()) == 15


def test_jitter_amount_is_rounded_up() -> None:
    with patch("aretry.backoff.jittered.random.random", side_effect=[0.9, 0.01]):
        assert jitter(10)(RetryContext()) == 11  # 10 + ceil(0.1)


def test_jitter_clamps_at_zero() -> None:
    """Test that a fractional base cannot produce a negative delay."""
    with patch("aretry.backoff.jittered.random.random", return_value=0.1):
        assert jitter(0.5)(RetryContext()) == 0


def test_jitter_zero_amount() -> None:
    assert jitter(0)(RetryContext()) == 0


def test_jitter_bounds_with_real_randomness() -> None:
    rng_state = random.getstate()
    random.seed(12345)
    try:
        strategy = jitter(linear_delay(base=100))
        for _ in range(200):
            for attempt, expected in enumerate(LINEAR_EXPECTED):
                assert 0 <= strategy(RetryContext(attempt=attempt)) <= 2 * expected
    finally:
        random.setstate(rng_state)


def test_jitter_resolves_number_once() -> None:
    strategy = Jitter(250)
    assert isinstance(strategy.source, ConstantDelay)
    assert strategy.source.delay == 250


def test_jitter_keeps_strategy() -> None:
    source = LinearDelay()
    assert Jitter(source).source is source


def test_jitter_accepts_plain_function() -> None:
    with patch("aretry.backoff.jittered.random.random", return_value=0.75):
        assert jitter(lambda context: 10 * context.attempt)(RetryContext(attempt=2)) == 35


@pytest.mark.parametrize("source", ["100", None, [1, 2]])
def test_jitter_invalid_source(source: object) -> None:
    with pytest.raises(TypeError, match=r"jitter expects a number or a delay strategy"):
        jitter(source)  # type: ignore[arg-type]


def test_jitter_invalid_amount() -> None:
    with pytest.raises(ValueError, match=r"delay must be non-negative"):
        jitter(-5)


def test_jitter_clamps_at_twice_the_delay() -> None:
    """Test that a fractional base cannot exceed twice its value on the add
    branch."""
    with patch("aretry.backoff.jittered.random.random", side_effect=[0.9, 0.1]):
        assert jitter(0.5)(RetryContext()) == 1.0  # 0.5 + ceil(0.05) = 1.5


@pytest.mark.parametrize("value", [0.01, 0.5, 0.99])
@pytest.mark.parametrize("amount", [0.1, 0.5, 2.5, 99.9])
def test_jitter_fractional_amount_bounds(value: float, amount: float) -> None:
    with patch("aretry.backoff.jittered.random.random", side_effect=[0.9, value]):
        assert 0 <= jitter(amount)(RetryContext()) <= 2 * amount


def test_jitter_negative_source_is_clamped() -> None:
    with patch("aretry.backoff.jittered.random.random", return_value=0.75):
        assert jitter(lambda context: -10)(RetryContext()) == 0
