"""Concurrent per-location status lookups for a batch of display rows.

One task is spawned per row and the batch is joined with
``asyncio.gather(..., return_exceptions=True)``: the join completes once
every lookup has settled, succeeded, failed or been cancelled.  Failed
and cancelled lookups settle as the degraded "unavailable" result.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Sequence
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from parkstatus._constants import HALF_LIFE_MINUTES, MAX_VOTES
from parkstatus.exceptions import ParkStatusError
from parkstatus.models.row import DisplayRow
from parkstatus.models.status import AggregationResult
from parkstatus.status.aggregate import aggregate_votes

if TYPE_CHECKING:
    from parkstatus._api.votes import VoteStore

_logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _settle(location_id: str, outcome: AggregationResult | BaseException) -> AggregationResult:
    """Map a lookup outcome to a result; failures and cancellations degrade."""
    if isinstance(outcome, AggregationResult):
        return outcome
    if not isinstance(outcome, asyncio.CancelledError):
        _logger.warning("Status lookup for %s failed unexpectedly", location_id, exc_info=outcome)
    return AggregationResult.unavailable()


class FanoutHandle:
    """In-flight batch of row lookups.

    Individual rows can be cancelled with :meth:`cancel`; the batch still
    completes through :meth:`wait`, with cancelled rows marked unavailable.
    """

    def __init__(
        self,
        rows: Sequence[DisplayRow],
        tasks: Sequence[asyncio.Task[AggregationResult]],
        now: datetime,
    ) -> None:
        self._rows = list(rows)
        self._tasks = list(tasks)
        self._now = now

    @property
    def now(self) -> datetime:
        """Instant every row of this batch is judged against."""
        return self._now

    @property
    def done(self) -> bool:
        return all(task.done() for task in self._tasks)

    def cancel(self, location_id: str) -> bool:
        """Cancel the outstanding lookup(s) for *location_id*."""
        cancelled = False
        for row, task in zip(self._rows, self._tasks, strict=True):
            if row.location_id == location_id and not task.done():
                cancelled = task.cancel() or cancelled
        return cancelled

    def cancel_all(self) -> None:
        for task in self._tasks:
            task.cancel()

    async def wait(self) -> list[DisplayRow]:
        """Wait for every lookup to settle and return the updated rows.

        Cancelling the waiting coroutine cancels all outstanding lookups.
        """
        outcomes = await asyncio.gather(*self._tasks, return_exceptions=True)

        updated: list[DisplayRow] = []
        unavailable = 0
        for row, outcome in zip(self._rows, outcomes, strict=True):
            result = _settle(row.location_id, outcome)
            if result.degraded:
                unavailable += 1
            updated.append(row.with_status(result))

        _logger.debug("Fanout settled: rows=%d unavailable=%d", len(updated), unavailable)
        return updated


class StatusFanout:
    """Fetch and aggregate votes for many locations concurrently.

    Parameters
    ----------
    store : VoteStore
        Vote store collaborator.
    max_votes : int
        Newest votes fetched per location.
    half_life_minutes : float
        Vote weight half-life.
    clock : callable
        Returns the current aware UTC datetime; sampled once per batch.
    """

    def __init__(
        self,
        store: VoteStore,
        *,
        max_votes: int = MAX_VOTES,
        half_life_minutes: float = HALF_LIFE_MINUTES,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._store = store
        self._max_votes = max_votes
        self._half_life_minutes = half_life_minutes
        self._clock = clock

    async def _lookup(self, location_id: str, now: datetime) -> AggregationResult:
        try:
            votes = await self._store.fetch_votes(location_id, self._max_votes)
        except ParkStatusError as exc:
            _logger.warning("Vote fetch for %s failed: %s", location_id, exc)
            return AggregationResult.unavailable()
        return aggregate_votes(votes, now, half_life_minutes=self._half_life_minutes)

    def _spawn(self, location_id: str, now: datetime) -> asyncio.Task[AggregationResult]:
        return asyncio.create_task(self._lookup(location_id, now), name=f"parkstatus-votes-{location_id}")

    def start(self, rows: Sequence[DisplayRow]) -> FanoutHandle:
        """Dispatch one lookup per row; must be called from a running loop."""
        now = self._clock()
        tasks = [self._spawn(row.location_id, now) for row in rows]
        return FanoutHandle(rows, tasks, now)

    async def run(self, rows: Sequence[DisplayRow]) -> list[DisplayRow]:
        """List mode: return *rows* with every status filled in."""
        return await self.start(rows).wait()

    async def status_for(self, location_id: str) -> AggregationResult:
        """Single-location mode: the same lookup and settling as a one-row batch."""
        (outcome,) = await asyncio.gather(self._spawn(location_id, self._clock()), return_exceptions=True)
        return _settle(location_id, outcome)
