"""parkstatus - Crowd-sourced parking occupancy aggregation."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("parkstatus")
except PackageNotFoundError:
    __version__ = "0+local"
from parkstatus.client import ParkStatusClient
from parkstatus.config import ParkStatusConfig
from parkstatus.exceptions import (
    LocationUnavailableError,
    ParkStatusConfigError,
    ParkStatusDataError,
    ParkStatusError,
    ParkStatusTransportError,
)
from parkstatus.geo import distance_meters, is_within_reach
from parkstatus.models import (
    AggregationResult,
    DisplayRow,
    Location,
    Position,
    StatusState,
    Verdict,
    Vote,
    VoteStatus,
    format_distance,
)
from parkstatus.nearby import merge_nearby
from parkstatus.status import FanoutHandle, StatusFanout, aggregate_votes, weight

__all__ = [
    "__version__",
    "AggregationResult",
    "DisplayRow",
    "FanoutHandle",
    "Location",
    "LocationUnavailableError",
    "ParkStatusClient",
    "ParkStatusConfig",
    "ParkStatusConfigError",
    "ParkStatusDataError",
    "ParkStatusError",
    "ParkStatusTransportError",
    "Position",
    "StatusFanout",
    "StatusState",
    "Verdict",
    "Vote",
    "VoteStatus",
    "aggregate_votes",
    "distance_meters",
    "format_distance",
    "is_within_reach",
    "merge_nearby",
    "weight",
]
