"""Merge candidate locations into distance-ranked display rows."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from parkstatus import geo
from parkstatus._constants import NEARBY_LIMIT
from parkstatus.models.geo import Position
from parkstatus.models.location import Location
from parkstatus.models.row import DisplayRow

_logger = logging.getLogger(__name__)


def resolve_observer(observer: Position | None, fallback: Position) -> Position:
    """Observer position, or *fallback* when it is unknown."""
    return observer if observer is not None else fallback


def merge_nearby(
    locations: Iterable[Location | None],
    observer: Position,
    *,
    limit: int = NEARBY_LIMIT,
) -> list[DisplayRow]:
    """Build rows sorted by rounded geodesic distance from *observer*.

    Entries without an id or position are skipped.  The sort is stable, so
    equidistant locations keep the provider's order.  Every row starts with
    the loading placeholder status.
    """
    rows: list[DisplayRow] = []
    for location in locations:
        if location is None or not getattr(location, "id", None) or getattr(location, "position", None) is None:
            _logger.debug("Skipping location without id or position: %r", location)
            continue
        rows.append(
            DisplayRow(
                location_id=location.id,
                display_name=location.display_name,
                position=location.position,
                external_map_uri=location.external_map_uri,
                distance_meters=geo.rounded_distance_meters(observer, location.position),
            )
        )

    rows.sort(key=lambda row: row.distance_meters)
    return rows[:limit]
