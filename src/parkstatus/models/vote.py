"""Occupancy vote model."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import Annotated, Any

from pydantic import AliasChoices, BeforeValidator, Field, field_validator

from parkstatus.ingestion.normalize import parse_timestamp
from parkstatus.models._base import ParkBaseModel


class VoteStatus(StrEnum):
    """Occupancy level reported by a single voter."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"

    @property
    def wire(self) -> str:
        """Value stored in the vote store (``GREEN``/``YELLOW``/``RED``)."""
        return _TO_WIRE[self]

    @classmethod
    def from_wire(cls, value: Any) -> VoteStatus | None:
        """Map a stored status to a level, ``None`` when unrecognised.

        Only the exact stored strings ``GREEN``, ``YELLOW`` and ``RED`` are
        recognised; anything else is never defaulted to a level.
        """
        if isinstance(value, VoteStatus):
            return value
        if not isinstance(value, str):
            return None
        return _FROM_WIRE.get(value)


_TO_WIRE: dict[VoteStatus, str] = {
    VoteStatus.LOW: "GREEN",
    VoteStatus.MEDIUM: "YELLOW",
    VoteStatus.HIGH: "RED",
}
_FROM_WIRE: dict[str, VoteStatus] = {wire: status for status, wire in _TO_WIRE.items()}


def _require_timestamp(value: Any) -> datetime:
    parsed = parse_timestamp(value)
    if parsed is None:
        raise ValueError(f"unparseable timestamp: {value!r}")
    return parsed


UtcTimestamp = Annotated[datetime, BeforeValidator(_require_timestamp)]
"""Datetime coerced to UTC from RFC 3339 strings or epoch seconds/milliseconds."""


class Vote(ParkBaseModel):
    """One occupancy report for a location.

    Parameters
    ----------
    location_id : str
        Location the vote belongs to.
    voter_key : str
        Opaque per-voter key; one stored vote per voter and location.
    status : VoteStatus
        Reported occupancy level.
    submitted_at : datetime
        Server-assigned submission instant (UTC).
    """

    location_id: str
    voter_key: str = ""
    status: VoteStatus
    submitted_at: UtcTimestamp = Field(validation_alias=AliasChoices("submittedAt", "submitted_at", "timestamp"))

    @field_validator("status", mode="before")
    @classmethod
    def _parse_status(cls, value: Any) -> VoteStatus:
        status = VoteStatus.from_wire(value)
        if status is None:
            raise ValueError(f"unknown vote status: {value!r}")
        return status
