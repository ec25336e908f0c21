"""Live train status: speed, GPS position and server time."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from iceportal.model.geo import Coordinates
from iceportal.model.timetable import timestamp_to_local

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class Status:
    """Snapshot decoded from one status document.

    Speed and coordinates arrive as 32-bit floats on the wire but are kept as
    Python floats (64-bit) without narrowing, so the 4th decimal of the
    formatted position follows the decoded JSON value.
    """

    speed: float  # km/h
    latitude: float
    longitude: float
    server_time_ms: int

    def coordinates(self) -> Coordinates:
        return Coordinates(latitude=self.latitude, longitude=self.longitude)

    def local_time(self) -> datetime:
        """Server time as an aware datetime in the local timezone."""
        return timestamp_to_local(self.server_time_ms)

    def format(self) -> str:
        """Render a one-line summary; the time is left out if it cannot be rendered."""
        text = f"Speed: {self.speed:5.1f} km/h; Lat/Long: {self.latitude:7.4f},{self.longitude:8.4f}"
        try:
            formatted_time = self.local_time().strftime(TIME_FORMAT)
        except (OverflowError, OSError, ValueError):
            return text
        return f"{text}; Time: {formatted_time}"

    def __str__(self) -> str:
        return self.format()


__all__ = ["Status", "TIME_FORMAT"]
