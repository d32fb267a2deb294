"""High-level async client for nearby parking occupancy."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

import aiohttp

from parkstatus._api.places import GooglePlacesClient, PlacesProvider
from parkstatus._api.votes import FirestoreVoteStore, VoteStore
from parkstatus._constants import ANONYMOUS_VOTER_KEY
from parkstatus._transport import HttpTransport
from parkstatus.config import ParkStatusConfig
from parkstatus.exceptions import ParkStatusError
from parkstatus.geo import is_within_reach
from parkstatus.locator import ObserverLocator, locate
from parkstatus.models.geo import Position
from parkstatus.models.requests import LocationRequest, NearbySearchRequest, VoteSubmission
from parkstatus.models.row import DisplayRow
from parkstatus.models.status import AggregationResult
from parkstatus.models.vote import VoteStatus
from parkstatus.nearby import merge_nearby, resolve_observer
from parkstatus.state.rows import RowStore
from parkstatus.status.fanout import FanoutHandle, StatusFanout

_logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class ParkStatusClient:
    """Async client joining nearby places with their occupancy status.

    Collaborators are injected or built from *config* on entry; their
    lifetime is that of the ``async with`` block.

    Usage::

        async with ParkStatusClient(config) as client:
            rows = await client.refresh_list()
    """

    def __init__(
        self,
        config: ParkStatusConfig,
        *,
        session: aiohttp.ClientSession | None = None,
        places: PlacesProvider | None = None,
        votes: VoteStore | None = None,
        locator: ObserverLocator | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._config = config
        self._external_session = session is not None
        self._http_session = session
        self._places = places
        self._votes = votes
        self._own_places = places is None
        self._own_votes = votes is None
        self._locator = locator
        self._clock = clock
        self._fanout: StatusFanout | None = None
        self._active_fanout: FanoutHandle | None = None
        self._rows = RowStore()

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> ParkStatusClient:
        if self._own_places or self._own_votes:
            if self._http_session is None:
                self._http_session = aiohttp.ClientSession()
            transport = HttpTransport(self._http_session, timeout=self._config.http_timeout)
            try:
                if self._own_places:
                    self._places = GooglePlacesClient(self._config, transport)
                if self._own_votes:
                    self._votes = FirestoreVoteStore(self._config, transport)
            except Exception:
                await self.__aexit__(None, None, None)
                raise
        assert self._votes is not None  # noqa: S101
        self._fanout = StatusFanout(
            self._votes,
            max_votes=self._config.max_votes,
            half_life_minutes=self._config.half_life_minutes,
            clock=self._clock,
        )
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if self._active_fanout is not None:
            self._active_fanout.cancel_all()
            self._active_fanout = None
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        if self._own_places:
            self._places = None
        if self._own_votes:
            self._votes = None
        self._fanout = None

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _require_fanout(self) -> StatusFanout:
        if self._fanout is None:
            raise ParkStatusError("Client not initialized. Use 'async with ParkStatusClient(...) as client:'")
        return self._fanout

    async def _observer(self, observer: Position | None) -> Position | None:
        if observer is not None:
            return observer
        return await locate(self._locator)

    async def _refresh(self, origin: Position, radius_meters: float) -> list[DisplayRow]:
        """Run one refresh cycle around *origin* and publish its rows."""
        fanout = self._require_fanout()
        assert self._places is not None  # noqa: S101

        cycle = self._rows.begin_cycle()
        if self._active_fanout is not None:
            # The previous cycle is superseded; let it settle quickly.
            self._active_fanout.cancel_all()
            self._active_fanout = None

        request = NearbySearchRequest(
            center=origin,
            radius_meters=radius_meters,
            max_results=self._config.nearby_limit,
        )
        try:
            locations = await self._places.search_nearby(request)
        except ParkStatusError as exc:
            _logger.warning("Places search failed: %s", exc)
            locations = []

        base = merge_nearby(locations, origin, limit=self._config.nearby_limit)
        if not base:
            self._rows.publish(cycle, base)
            return base
        if not self._rows.is_current(cycle):
            # Superseded while searching; settle like cancelled lookups.
            _logger.debug("Refresh cycle %d superseded before status lookup", cycle)
            return [row.with_status(AggregationResult.unavailable()) for row in base]
        self._rows.publish(cycle, base)

        handle = fanout.start(base)
        self._active_fanout = handle
        try:
            rows = await handle.wait()
        finally:
            if self._active_fanout is handle:
                self._active_fanout = None

        if not self._rows.publish(cycle, rows):
            _logger.debug("Discarding rows of superseded refresh cycle %d", cycle)
        return rows

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def rows(self) -> list[DisplayRow]:
        """Rows of the latest refresh cycle."""
        return self._rows.rows

    @property
    def row_store(self) -> RowStore:
        return self._rows

    async def refresh_list(self, observer: Position | None = None) -> list[DisplayRow]:
        """List view refresh: rows around the observer, nearest first.

        Falls back to the configured default position when the observer
        cannot be located.  A failed places search yields an empty list.
        """
        origin = resolve_observer(await self._observer(observer), self._config.fallback_position)
        return await self._refresh(origin, self._config.list_radius_meters)

    async def refresh_map(self, center: Position | None = None) -> list[DisplayRow]:
        """Map view refresh around *center* (default position when omitted)."""
        origin = resolve_observer(center, self._config.fallback_position)
        return await self._refresh(origin, self._config.map_radius_meters)

    async def location_status(self, location_id: str) -> AggregationResult:
        """Current status of a single location (e.g. a tapped map marker)."""
        request = LocationRequest(location_id=location_id)
        return await self._require_fanout().status_for(request.location_id)

    async def submit_vote(
        self,
        location_id: str,
        status: VoteStatus,
        *,
        target: Position,
        observer: Position | None = None,
        voter_key: str | None = None,
    ) -> bool:
        """Submit an occupancy vote if the observer is close enough to *target*.

        Returns ``False`` when the proximity check denies the vote.  An
        observer whose position cannot be determined is permitted.

        Raises
        ------
        ParkStatusTransportError
            If the vote store rejects or cannot receive the write.
        """
        self._require_fanout()
        assert self._votes is not None  # noqa: S101

        submission = VoteSubmission(
            location_id=location_id,
            voter_key=voter_key or self._config.voter_key or ANONYMOUS_VOTER_KEY,
            status=status,
        )
        position = await self._observer(observer)
        if not is_within_reach(position, target, self._config.proximity_threshold_meters):
            _logger.info("Vote for %s denied: observer too far away", submission.location_id)
            return False

        await self._votes.upsert_vote(submission)
        return True
