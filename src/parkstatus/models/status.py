"""Aggregated occupancy status and its display table.

The glyph/text table lives here only; every call site (list rows,
single-location lookups, vote prompts) reads it through
:class:`AggregationResult` so the labels cannot drift apart.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from parkstatus.models.vote import VoteStatus


class Verdict(StrEnum):
    """Aggregated occupancy level for a location at a point in time."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    NONE = "NONE"

    @classmethod
    def from_vote_status(cls, status: VoteStatus | None) -> Verdict:
        if status is None:
            return cls.NONE
        return cls(status.value)


class StatusState(StrEnum):
    """Lifecycle of a row's status within one refresh cycle."""

    LOADING = "loading"
    READY = "ready"
    UNAVAILABLE = "unavailable"


GLYPH_NEUTRAL = "⚪"
TEXT_LOADING = "Ładowanie…"
TEXT_NO_DATA = "Brak danych – przytrzymaj, aby zgłosić"
TEXT_UNAVAILABLE = "Nie udało się pobrać statusu"

_DISPLAY: dict[Verdict, tuple[str, str]] = {
    Verdict.LOW: ("🟢", "Dużo wolnych miejsc"),
    Verdict.MEDIUM: ("🟡", "Średnie obłożenie"),
    Verdict.HIGH: ("🔴", "Prawie pełny"),
    Verdict.NONE: (GLYPH_NEUTRAL, TEXT_NO_DATA),
}


def display_for(verdict: Verdict) -> tuple[str, str]:
    """Return the ``(glyph, text)`` pair for *verdict*."""
    return _DISPLAY[verdict]


def vote_option_label(status: VoteStatus) -> str:
    """Label for a vote choice, e.g. ``"🟢  Dużo wolnych miejsc"``."""
    glyph, text = _DISPLAY[Verdict.from_vote_status(status)]
    return f"{glyph}  {text}"


class AggregationResult(BaseModel):
    """Outcome of aggregating one location's votes.

    Parameters
    ----------
    verdict : Verdict
        Winning level, ``NONE`` when no usable votes exist or the fetch failed.
    glyph : str
        Display glyph for the verdict.
    text : str
        Display text for the verdict.
    degraded : bool
        ``True`` when the vote fetch failed; distinguishes "status
        unavailable" from a genuine "no votes yet".
    total_weight : float
        Sum of decayed weights of all usable votes.
    vote_count : int
        Number of usable votes that contributed.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    verdict: Verdict
    glyph: str
    text: str
    degraded: bool = False
    total_weight: float = Field(default=0.0, ge=0.0)
    vote_count: int = Field(default=0, ge=0)

    @classmethod
    def for_verdict(cls, verdict: Verdict, *, total_weight: float = 0.0, vote_count: int = 0) -> AggregationResult:
        glyph, text = display_for(verdict)
        return cls(verdict=verdict, glyph=glyph, text=text, total_weight=total_weight, vote_count=vote_count)

    @classmethod
    def unavailable(cls) -> AggregationResult:
        """Degraded result for a location whose vote fetch failed."""
        return cls(verdict=Verdict.NONE, glyph=GLYPH_NEUTRAL, text=TEXT_UNAVAILABLE, degraded=True)

    @property
    def state(self) -> StatusState:
        return StatusState.UNAVAILABLE if self.degraded else StatusState.READY

    @property
    def label(self) -> str:
        """Glyph and text joined the way map snippets show them."""
        return f"{self.glyph}  {self.text}"
