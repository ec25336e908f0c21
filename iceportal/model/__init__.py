"""Value objects for ICE portal status and trip data."""

from iceportal.model.geo import Coordinates, distance_to_km
from iceportal.model.status import Status
from iceportal.model.stop import DelayReason, MiscInfo, StationInfo, Stop, TrackInfo
from iceportal.model.timetable import DelayFormatError, TimeInfo, parse_delay, timestamp_to_local
from iceportal.model.trip import TrainVicinity, Trip

__all__ = [
    "Coordinates",
    "DelayFormatError",
    "DelayReason",
    "MiscInfo",
    "StationInfo",
    "Status",
    "Stop",
    "TimeInfo",
    "TrackInfo",
    "TrainVicinity",
    "Trip",
    "distance_to_km",
    "parse_delay",
    "timestamp_to_local",
]
