"""Pydantic request models for client entrypoints.

These models provide a consistent "validate → normalize → execute" flow.
They are used internally by :class:`parkstatus.client.ParkStatusClient`.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from parkstatus.models.geo import Position
from parkstatus.models.vote import VoteStatus


class LocationRequest(BaseModel):
    """Request addressing a single location."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_default=True,
        str_strip_whitespace=True,
    )

    location_id: str

    @field_validator("location_id")
    @classmethod
    def _location_id_non_empty(cls, value: str) -> str:
        location_id = value.strip()
        if not location_id:
            raise ValueError("location_id must be non-empty")
        return location_id


class NearbySearchRequest(BaseModel):
    """Parameters of one places search."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    center: Position
    radius_meters: float = Field(gt=0, le=50_000)
    max_results: int = Field(default=20, ge=1, le=20)


class VoteSubmission(LocationRequest):
    voter_key: str
    status: VoteStatus

    @field_validator("voter_key")
    @classmethod
    def _voter_key_non_empty(cls, value: str) -> str:
        key = value.strip()
        if not key:
            raise ValueError("voter_key must be non-empty")
        if "/" in key:
            raise ValueError("voter_key must not contain '/'")
        return key
