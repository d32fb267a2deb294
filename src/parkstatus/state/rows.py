"""Per-consumer row list keyed by refresh cycle.

This is the only component that replaces the published row list.
"""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field

from parkstatus.models.row import DisplayRow


class RowSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    cycle_id: int = 0
    rows: tuple[DisplayRow, ...] = Field(default_factory=tuple)


class RowStore:
    """Latest row list, replaced wholesale by each refresh cycle.

    ``begin_cycle`` hands out increasing cycle ids; ``publish`` only accepts
    rows from the most recent one, so a slow, superseded refresh can never
    overwrite a newer list.
    """

    def __init__(self) -> None:
        self._latest_cycle = 0
        self._snapshot = RowSnapshot()

    def begin_cycle(self) -> int:
        self._latest_cycle += 1
        return self._latest_cycle

    def is_current(self, cycle_id: int) -> bool:
        return cycle_id == self._latest_cycle

    def publish(self, cycle_id: int, rows: Sequence[DisplayRow]) -> bool:
        """Replace the row list; returns ``False`` for a superseded cycle."""
        if not self.is_current(cycle_id):
            return False
        self._snapshot = RowSnapshot(cycle_id=cycle_id, rows=tuple(rows))
        return True

    @property
    def cycle_id(self) -> int:
        """Cycle id of the published rows (0 before the first publish)."""
        return self._snapshot.cycle_id

    @property
    def rows(self) -> list[DisplayRow]:
        return list(self._snapshot.rows)
