"""Candidate parking location model."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, Field, field_validator

from parkstatus._constants import DEFAULT_DISPLAY_NAME
from parkstatus.models._base import ParkBaseModel
from parkstatus.models.geo import Position


class Location(ParkBaseModel):
    """A parking site returned by the places provider.

    Parameters
    ----------
    id : str
        Provider place identifier, stable across observers.
    display_name : str
        Human readable name; ``"Parking"`` when the provider omits it.
    position : Position
        Site coordinates.
    external_map_uri : str or None
        Deep link into an external maps application.
    """

    id: str = Field(validation_alias=AliasChoices("id", "placeId", "location_id", "locationId"))
    display_name: str = Field(
        default=DEFAULT_DISPLAY_NAME,
        validation_alias=AliasChoices("displayName", "display_name", "name"),
    )
    position: Position = Field(validation_alias=AliasChoices("position", "location"))
    external_map_uri: str | None = Field(
        default=None,
        validation_alias=AliasChoices("externalMapUri", "external_map_uri", "googleMapsUri", "mapsUri"),
    )

    @field_validator("id")
    @classmethod
    def _id_non_empty(cls, value: str) -> str:
        ident = value.strip()
        if not ident:
            raise ValueError("id must be non-empty")
        return ident

    @field_validator("display_name", mode="before")
    @classmethod
    def _unwrap_localized_text(cls, value: Any) -> Any:
        # Places returns {"text": ..., "languageCode": ...}
        if isinstance(value, dict):
            value = value.get("text")
        if value is None or not str(value).strip():
            return DEFAULT_DISPLAY_NAME
        return str(value).strip()
