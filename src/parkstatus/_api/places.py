"""Places provider: nearby parking search.

Endpoint:
  - POST /v1/places:searchNearby
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

from parkstatus._constants import PLACES_FIELD_MASK, PLACES_INCLUDED_TYPES
from parkstatus._transport import Transport
from parkstatus.config import ParkStatusConfig
from parkstatus.ingestion.places import parse_search_response
from parkstatus.models.location import Location
from parkstatus.models.requests import NearbySearchRequest

_logger = logging.getLogger(__name__)


class PlacesProvider(Protocol):
    """Read-only source of candidate locations around a center."""

    async def search_nearby(self, request: NearbySearchRequest) -> list[Location]:
        ...


def build_search_body(request: NearbySearchRequest) -> dict[str, Any]:
    """Request body for a distance-ranked parking search."""
    return {
        "includedTypes": list(PLACES_INCLUDED_TYPES),
        "maxResultCount": request.max_results,
        "rankPreference": "DISTANCE",
        "locationRestriction": {
            "circle": {
                "center": {
                    "latitude": request.center.latitude,
                    "longitude": request.center.longitude,
                },
                "radius": float(request.radius_meters),
            }
        },
    }


class GooglePlacesClient:
    """:class:`PlacesProvider` backed by the Places API ``searchNearby`` call."""

    def __init__(self, config: ParkStatusConfig, transport: Transport) -> None:
        self._config = config
        self._transport = transport

    async def search_nearby(self, request: NearbySearchRequest) -> list[Location]:
        """Return parsed locations; malformed entries are dropped."""
        url = f"{self._config.places_base_url}/v1/places:searchNearby"
        headers = {
            "X-Goog-Api-Key": self._config.places_api_key,
            "X-Goog-FieldMask": PLACES_FIELD_MASK,
        }
        payload = await self._transport.request_json(
            "POST",
            url,
            payload=build_search_body(request),
            headers=headers,
        )
        locations = parse_search_response(payload)
        _logger.debug("Nearby results: %d", len(locations))
        return locations
