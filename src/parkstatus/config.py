"""Client configuration for parkstatus."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from parkstatus._constants import (
    FALLBACK_LATITUDE,
    FALLBACK_LONGITUDE,
    FIRESTORE_BASE_URL,
    FIRESTORE_DATABASE,
    HALF_LIFE_MINUTES,
    LIST_RADIUS_METERS,
    MAP_RADIUS_METERS,
    MAX_VOTES,
    NEARBY_LIMIT,
    PLACES_BASE_URL,
    PROXIMITY_THRESHOLD_METERS,
)
from parkstatus.exceptions import ParkStatusConfigError
from parkstatus.models.geo import Position


@dataclasses.dataclass(frozen=True)
class ParkStatusConfig:
    """Client configuration.

    Parameters
    ----------
    places_api_key : str
        API key for the places provider (``X-Goog-Api-Key``).
    project_id : str
        Project hosting the vote store documents.
    vote_store_token : str or None
        Optional bearer token for the vote store.  Without it requests
        are sent unauthenticated and rely on the store's public rules.
    places_base_url : str
        Places provider base URL.
    vote_store_base_url : str
        Vote store REST base URL.
    database : str
        Vote store database id.
    list_radius_meters : float
        Search radius for the list view.
    map_radius_meters : float
        Search radius for the map view.
    nearby_limit : int
        Maximum number of locations per refresh.
    proximity_threshold_meters : float
        Maximum observer distance for submitting a vote.
    half_life_minutes : float
        Vote weight half-life.
    max_votes : int
        Newest votes fetched per location.
    fallback_latitude : float
        Latitude used when the observer position is unknown.
    fallback_longitude : float
        Longitude used when the observer position is unknown.
    voter_key : str or None
        Default opaque voter identifier for submissions.
    http_timeout : float
        Total timeout in seconds for a single HTTP request.
    """

    places_api_key: str = ""
    project_id: str = ""
    vote_store_token: str | None = None
    places_base_url: str = PLACES_BASE_URL
    vote_store_base_url: str = FIRESTORE_BASE_URL
    database: str = FIRESTORE_DATABASE
    list_radius_meters: float = LIST_RADIUS_METERS
    map_radius_meters: float = MAP_RADIUS_METERS
    nearby_limit: int = NEARBY_LIMIT
    proximity_threshold_meters: float = PROXIMITY_THRESHOLD_METERS
    half_life_minutes: float = HALF_LIFE_MINUTES
    max_votes: int = MAX_VOTES
    fallback_latitude: float = FALLBACK_LATITUDE
    fallback_longitude: float = FALLBACK_LONGITUDE
    voter_key: str | None = None
    http_timeout: float = 15.0

    def __post_init__(self) -> None:
        for name in ("list_radius_meters", "map_radius_meters", "half_life_minutes", "http_timeout"):
            if getattr(self, name) <= 0:
                raise ParkStatusConfigError(f"{name} must be positive, got {getattr(self, name)}")
        if self.proximity_threshold_meters < 0:
            raise ParkStatusConfigError("proximity_threshold_meters must not be negative")
        if self.nearby_limit < 1:
            raise ParkStatusConfigError(f"nearby_limit must be at least 1, got {self.nearby_limit}")
        if self.max_votes < 1:
            raise ParkStatusConfigError(f"max_votes must be at least 1, got {self.max_votes}")
        if not -90.0 <= self.fallback_latitude <= 90.0 or not -180.0 <= self.fallback_longitude <= 180.0:
            raise ParkStatusConfigError("fallback position is out of range")

    @property
    def fallback_position(self) -> Position:
        """Observer position used when none can be determined."""
        return Position(latitude=self.fallback_latitude, longitude=self.fallback_longitude)

    @classmethod
    def from_env(cls, **overrides: Any) -> ParkStatusConfig:
        """Create configuration from environment variables.

        Reads ``PARKSTATUS_*`` variables.  Explicit keyword arguments
        override environment values.

        Raises
        ------
        ParkStatusConfigError
            If a numeric variable cannot be parsed.
        """
        env = os.environ

        _ENV_STR_MAP = {
            "PARKSTATUS_PLACES_API_KEY": "places_api_key",
            "PARKSTATUS_PROJECT_ID": "project_id",
            "PARKSTATUS_VOTE_STORE_TOKEN": "vote_store_token",
            "PARKSTATUS_PLACES_BASE_URL": "places_base_url",
            "PARKSTATUS_VOTE_STORE_BASE_URL": "vote_store_base_url",
            "PARKSTATUS_DATABASE": "database",
            "PARKSTATUS_VOTER_KEY": "voter_key",
        }
        _ENV_FLOAT_MAP = {
            "PARKSTATUS_LIST_RADIUS": "list_radius_meters",
            "PARKSTATUS_MAP_RADIUS": "map_radius_meters",
            "PARKSTATUS_PROXIMITY_THRESHOLD": "proximity_threshold_meters",
            "PARKSTATUS_HALF_LIFE_MINUTES": "half_life_minutes",
            "PARKSTATUS_FALLBACK_LATITUDE": "fallback_latitude",
            "PARKSTATUS_FALLBACK_LONGITUDE": "fallback_longitude",
            "PARKSTATUS_HTTP_TIMEOUT": "http_timeout",
        }
        _ENV_INT_MAP = {
            "PARKSTATUS_NEARBY_LIMIT": "nearby_limit",
            "PARKSTATUS_MAX_VOTES": "max_votes",
        }

        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_STR_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        for mapping, convert in ((_ENV_FLOAT_MAP, float), (_ENV_INT_MAP, int)):
            for env_key, field_name in mapping.items():
                val = env.get(env_key)
                if val is None or field_name in overrides:
                    continue
                try:
                    config_kwargs[field_name] = convert(val)
                except ValueError as exc:
                    raise ParkStatusConfigError(f"{env_key} is not a valid number: {val!r}") from exc

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
