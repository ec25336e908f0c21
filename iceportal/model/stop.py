"""A single station visit along a train's route."""

from __future__ import annotations

from dataclasses import dataclass

from iceportal.model.geo import Coordinates, distance_to_km
from iceportal.model.timetable import TimeInfo


@dataclass(frozen=True)
class StationInfo:
    """Station identity; `eva_nr` is the lookup key used throughout a trip."""

    eva_nr: str
    name: str
    coordinates: Coordinates


@dataclass(frozen=True)
class TrackInfo:
    scheduled: str
    actual: str


@dataclass(frozen=True)
class MiscInfo:
    """Progress data for a stop. `status` is passed through as-is."""

    status: int
    passed: bool
    distance_from_previous_m: int
    distance_from_origin_m: int

    def distance_to_previous_stop(self) -> float:
        """Distance from the preceding stop to this one, in km."""
        return distance_to_km(self.distance_from_previous_m)

    def distance_to_origin(self) -> float:
        """Distance from the first stop of the route to this one, in km."""
        return distance_to_km(self.distance_from_origin_m)


@dataclass(frozen=True)
class DelayReason:
    code: str
    text: str


@dataclass(frozen=True)
class Stop:
    """One stop of a trip, in route order."""

    station: StationInfo
    timetable: TimeInfo
    track: TrackInfo
    info: MiscInfo
    delay_reasons: tuple[DelayReason, ...] | None = None  # None when unknown


__all__ = ["StationInfo", "TrackInfo", "MiscInfo", "DelayReason", "Stop"]
