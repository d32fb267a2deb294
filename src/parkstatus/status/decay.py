"""Exponential time-decay of vote weights."""

from __future__ import annotations

import math

from parkstatus._constants import HALF_LIFE_MINUTES

_MS_PER_MINUTE = 60_000.0


def weight(age_millis: float, *, half_life_minutes: float = HALF_LIFE_MINUTES) -> float:
    """Weight in ``(0, 1]`` of a vote that is *age_millis* old.

    ``exp(-ln 2 / H * age_minutes)``: 1.0 for a fresh vote, 0.5 after one
    half-life.  Negative ages (clock skew) count as zero.
    """
    if half_life_minutes <= 0:
        raise ValueError(f"half_life_minutes must be positive, got {half_life_minutes}")
    age_minutes = max(0.0, float(age_millis)) / _MS_PER_MINUTE
    return math.exp(-math.log(2.0) / half_life_minutes * age_minutes)
