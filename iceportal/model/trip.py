"""Trip data: the ordered stops of a journey and queries over the train's progress."""

from __future__ import annotations

from dataclasses import dataclass

from iceportal.model.geo import distance_to_km
from iceportal.model.stop import Stop


@dataclass(frozen=True)
class TrainVicinity:
    """EVA numbers of the stops around the train's current position.

    None of these are guaranteed to match an entry in `Trip.stops`.
    """

    scheduled_next: str
    actual_next: str
    actual_last: str
    actual_last_started: str  # next stop as of the departure from the last one
    final_station_id: str
    final_station_name: str


@dataclass(frozen=True)
class Trip:
    """A scheduled journey decoded from a tripInfo document.

    Stops are kept in route order, origin first. All distance queries return
    kilometers; the raw fields are meters.
    """

    trip_date: str  # yyyy-mm-dd
    train_type: str
    train_number: str
    actual_position: int
    distance_from_last_stop_m: int
    total_distance_m: int
    vicinity: TrainVicinity
    stops: tuple[Stop, ...]

    def train_identifier(self) -> str:
        """Human-readable identifier such as "ICE 123"."""
        return f"{self.train_type} {self.train_number}"

    def get_stop(self, station_id: str) -> Stop | None:
        """Return the first stop whose station EVA number matches, if any."""
        for stop in self.stops:
            if stop.station.eva_nr == station_id:
                return stop
        return None

    def next_stop(self) -> Stop | None:
        return self.get_stop(self.vicinity.actual_next)

    def previous_stop(self) -> Stop | None:
        return self.get_stop(self.vicinity.actual_last)

    def origin(self) -> Stop | None:
        return self.stops[0] if self.stops else None

    def destination(self) -> Stop | None:
        return self.get_stop(self.vicinity.final_station_id)

    def distance_to_previous_stop(self) -> float:
        """Distance travelled since the last stop, in km."""
        return distance_to_km(self.distance_from_last_stop_m)

    def distance_to_next_stop(self) -> float | None:
        """Remaining distance to the next stop, in km.

        Assumes the next stop's distance is measured from the same previous stop
        as the train's live distance; the result can be negative when the feed
        disagrees with itself.
        """
        stop = self.next_stop()
        if stop is None:
            return None
        return stop.info.distance_to_previous_stop() - self.distance_to_previous_stop()

    def distance_between_adjacent_stops(self) -> float | None:
        """Distance between the previous and the next stop, in km."""
        stop = self.next_stop()
        if stop is None:
            return None
        return stop.info.distance_to_previous_stop()

    def total_distance(self) -> float:
        return distance_to_km(self.total_distance_m)


__all__ = ["TrainVicinity", "Trip", "distance_to_km"]
