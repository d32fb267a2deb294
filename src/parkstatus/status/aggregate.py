"""Reduce one location's votes to a single occupancy verdict."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from parkstatus._constants import HALF_LIFE_MINUTES
from parkstatus.ingestion.normalize import to_epoch_millis
from parkstatus.models.status import AggregationResult, Verdict
from parkstatus.models.vote import Vote, VoteStatus
from parkstatus.status.decay import weight


def aggregate_votes(
    votes: Iterable[Vote],
    now: datetime,
    *,
    half_life_minutes: float = HALF_LIFE_MINUTES,
) -> AggregationResult:
    """Aggregate *votes* as seen at instant *now*.

    Each vote adds its decayed weight to the bucket of its level; the
    bucket with the strictly greatest sum wins.  Any tie for the maximum
    falls back to the newest vote's level, ordered by ``(submitted_at,
    voter_key)`` so the outcome does not depend on input order.  No usable
    votes gives ``Verdict.NONE``.
    """
    now_ms = to_epoch_millis(now)
    sums: dict[VoteStatus, float] = {status: 0.0 for status in VoteStatus}
    newest: tuple[int, str] | None = None
    newest_status: VoteStatus | None = None
    count = 0

    for vote in votes:
        status = vote.status
        if not isinstance(status, VoteStatus):
            continue
        submitted_ms = to_epoch_millis(vote.submitted_at)
        sums[status] += weight(now_ms - submitted_ms, half_life_minutes=half_life_minutes)
        count += 1

        order_key = (submitted_ms, vote.voter_key)
        if newest is None or order_key > newest:
            newest = order_key
            newest_status = status

    total = sum(sums.values())
    if count == 0:
        return AggregationResult.for_verdict(Verdict.NONE)

    best = max(sums.values())
    leaders = [status for status, value in sums.items() if value == best]
    winner = leaders[0] if len(leaders) == 1 else newest_status

    return AggregationResult.for_verdict(
        Verdict.from_vote_status(winner),
        total_weight=total,
        vote_count=count,
    )
