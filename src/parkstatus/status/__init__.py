"""Occupancy status core.

Decay weighting, vote aggregation and the concurrent per-location fan-out
shared by the list view and single-location lookups.
"""

from parkstatus.status.aggregate import aggregate_votes
from parkstatus.status.decay import weight
from parkstatus.status.fanout import FanoutHandle, StatusFanout

__all__ = ["FanoutHandle", "StatusFanout", "aggregate_votes", "weight"]
