"""Data models for parking locations, votes and aggregated statuses."""

from parkstatus.models._base import ParkBaseModel
from parkstatus.models.geo import Position
from parkstatus.models.location import Location
from parkstatus.models.requests import LocationRequest, NearbySearchRequest, VoteSubmission
from parkstatus.models.row import DisplayRow, format_distance
from parkstatus.models.status import (
    GLYPH_NEUTRAL,
    TEXT_LOADING,
    TEXT_NO_DATA,
    TEXT_UNAVAILABLE,
    AggregationResult,
    StatusState,
    Verdict,
    display_for,
    vote_option_label,
)
from parkstatus.models.vote import Vote, VoteStatus

__all__ = [
    "GLYPH_NEUTRAL",
    "TEXT_LOADING",
    "TEXT_NO_DATA",
    "TEXT_UNAVAILABLE",
    "AggregationResult",
    "DisplayRow",
    "Location",
    "LocationRequest",
    "NearbySearchRequest",
    "ParkBaseModel",
    "Position",
    "StatusState",
    "Verdict",
    "Vote",
    "VoteStatus",
    "VoteSubmission",
    "display_for",
    "format_distance",
    "vote_option_label",
]
