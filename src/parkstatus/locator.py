"""Observer position sources."""

from __future__ import annotations

import logging
from typing import Protocol

from parkstatus.exceptions import LocationUnavailableError
from parkstatus.models.geo import Position

_logger = logging.getLogger(__name__)


class ObserverLocator(Protocol):
    """Supplies the observer's current position.

    Implementations return ``None`` when no fix is available and may raise
    :class:`LocationUnavailableError` when the lookup itself fails.
    """

    async def current_position(self) -> Position | None:
        ...


class StaticLocator:
    """Locator returning a fixed (possibly unknown) position."""

    def __init__(self, position: Position | None = None) -> None:
        self._position = position

    async def current_position(self) -> Position | None:
        return self._position


async def locate(locator: ObserverLocator | None) -> Position | None:
    """Current observer position, ``None`` when it cannot be determined.

    A failed lookup and a missing fix are treated the same way.
    """
    if locator is None:
        return None
    try:
        return await locator.current_position()
    except LocationUnavailableError as exc:
        _logger.debug("Observer position unavailable: %s", exc)
        return None
