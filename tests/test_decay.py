from __future__ import annotations

import pytest

from parkstatus.status.decay import weight

_MINUTE_MS = 60_000


def test_fresh_vote_has_full_weight() -> None:
    assert weight(0) == 1.0


def test_weight_halves_after_half_life() -> None:
    assert weight(120 * _MINUTE_MS) == pytest.approx(0.5)
    assert weight(240 * _MINUTE_MS) == pytest.approx(0.25)


def test_weight_strictly_decreasing_and_positive() -> None:
    ages = [0, 1, _MINUTE_MS, 60 * _MINUTE_MS, 600 * _MINUTE_MS, 10_000 * _MINUTE_MS]
    weights = [weight(age) for age in ages]
    assert all(a > b for a, b in zip(weights, weights[1:]))
    assert all(0.0 < w <= 1.0 for w in weights)


def test_negative_age_is_clamped_to_zero() -> None:
    assert weight(-5 * _MINUTE_MS) == 1.0


def test_custom_half_life() -> None:
    assert weight(30 * _MINUTE_MS, half_life_minutes=30) == pytest.approx(0.5)


def test_non_positive_half_life_rejected() -> None:
    with pytest.raises(ValueError):
        weight(0, half_life_minutes=0)
