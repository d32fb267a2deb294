"""Geodesic distance and the voting proximity gate."""

from __future__ import annotations

from geopy.distance import geodesic

from parkstatus._constants import PROXIMITY_THRESHOLD_METERS
from parkstatus.models.geo import Position


def distance_meters(a: Position, b: Position) -> float:
    """WGS-84 geodesic distance between two positions in meters."""
    return float(geodesic(a.as_tuple(), b.as_tuple()).meters)


def rounded_distance_meters(a: Position, b: Position) -> int:
    return int(round(distance_meters(a, b)))


def is_within_reach(
    observer: Position | None,
    target: Position,
    threshold_meters: float = PROXIMITY_THRESHOLD_METERS,
) -> bool:
    """Whether an observer may submit a vote for *target*.

    An unknown observer position is permitted: the check is advisory and
    missing location capability must not block contributions.  The
    boundary is inclusive.
    """
    if observer is None:
        return True
    return distance_meters(observer, target) <= threshold_meters
