"""Places search result ingestion + parsing."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from pydantic import ValidationError

from parkstatus.exceptions import ParkStatusDataError
from parkstatus.models.location import Location

_logger = logging.getLogger(__name__)


def parse_location(item: Any) -> Location:
    """Parse one places result, raising :class:`ParkStatusDataError` when unusable."""
    if isinstance(item, Location):
        return item
    if not isinstance(item, dict):
        raise ParkStatusDataError(f"place entry is not an object: {type(item).__name__}")
    try:
        return Location.model_validate(item)
    except ValidationError as exc:
        raise ParkStatusDataError(f"invalid place entry: {exc.error_count()} error(s)") from exc


def parse_locations(items: Iterable[Any]) -> list[Location]:
    """Parse places results, dropping entries without an id or position."""
    locations: list[Location] = []
    for index, item in enumerate(items):
        try:
            locations.append(parse_location(item))
        except ParkStatusDataError as exc:
            _logger.debug("Dropping place #%d: %s", index, exc)
    return locations


def parse_search_response(payload: Any) -> list[Location]:
    """Extract locations from a ``places:searchNearby`` response body."""
    if not isinstance(payload, dict):
        return []
    places = payload.get("places")
    if not isinstance(places, list):
        return []
    return parse_locations(places)
