"""Display row model: a location joined with distance and status."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from parkstatus.models.geo import Position
from parkstatus.models.status import (
    GLYPH_NEUTRAL,
    TEXT_LOADING,
    AggregationResult,
    StatusState,
    Verdict,
)


def format_distance(meters: int) -> str:
    """Render a distance: integer meters below 1 km, else km with one decimal."""
    if meters < 1000:
        return f"{meters} m"
    return f"{meters / 1000:.1f} km"


class DisplayRow(BaseModel):
    """One entry of the nearby list.

    Rows are immutable.  A row starts with the loading placeholder and is
    replaced by :meth:`with_status` exactly once per refresh cycle.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    location_id: str
    display_name: str
    position: Position
    external_map_uri: str | None = None
    distance_meters: int = Field(ge=0)
    status_glyph: str = GLYPH_NEUTRAL
    status_text: str = TEXT_LOADING
    verdict: Verdict = Verdict.NONE
    status_state: StatusState = StatusState.LOADING

    def with_status(self, result: AggregationResult) -> DisplayRow:
        """Return a copy carrying *result*; all other fields unchanged."""
        return self.model_copy(
            update={
                "status_glyph": result.glyph,
                "status_text": result.text,
                "verdict": result.verdict,
                "status_state": result.state,
            }
        )

    @property
    def display_distance(self) -> str:
        return format_distance(self.distance_meters)
