"""Timetable records: scheduled/actual times and delay strings."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
import re

DELAY_PATTERN = re.compile(r"([+-])([0-9]+)")


class DelayFormatError(ValueError):
    """Raised when a delay string is neither empty nor of the form +N / -N."""


def parse_delay(delay: str) -> timedelta:
    """Parse a sign-prefixed delay string (e.g. "+5", "-2", "") into minutes."""
    if delay == "":
        return timedelta(0)

    match = DELAY_PATTERN.fullmatch(delay)
    if match is None:
        raise DelayFormatError(f"Invalid delay string: {delay!r}")

    sign, magnitude = match.groups()
    minutes = int(magnitude)
    if sign == "-":
        minutes = -minutes
    return timedelta(minutes=minutes)


def timestamp_to_local(timestamp_ms: int) -> datetime:
    """Convert a millisecond Unix timestamp to an aware datetime in local time.

    Seconds and milliseconds are split with truncation toward zero, so negative
    timestamps keep the sign on both parts.

    Raises OverflowError, OSError or ValueError when the platform cannot
    represent the instant.
    """
    sign = -1 if timestamp_ms < 0 else 1
    seconds, millis = divmod(abs(timestamp_ms), 1000)
    instant = datetime.fromtimestamp(sign * seconds, tz=timezone.utc)
    instant += timedelta(milliseconds=sign * millis)
    return instant.astimezone()


def _optional_local(timestamp_ms: int | None) -> datetime | None:
    if timestamp_ms is None:
        return None
    return timestamp_to_local(timestamp_ms)


@dataclass(frozen=True)
class TimeInfo:
    """Arrival and departure schedule at a stop.

    Arrival fields are absent for the first stop of a route and departure fields
    for the last one. Delays are kept as the raw wire strings and parsed on access.
    """

    scheduled_arrival_ms: int | None
    actual_arrival_ms: int | None
    arrival_delay_raw: str
    scheduled_departure_ms: int | None
    actual_departure_ms: int | None
    departure_delay_raw: str

    def scheduled_arrival(self) -> datetime | None:
        return _optional_local(self.scheduled_arrival_ms)

    def actual_arrival(self) -> datetime | None:
        return _optional_local(self.actual_arrival_ms)

    def scheduled_departure(self) -> datetime | None:
        return _optional_local(self.scheduled_departure_ms)

    def actual_departure(self) -> datetime | None:
        return _optional_local(self.actual_departure_ms)

    def arrival_delay(self) -> timedelta:
        """Arrival delay; raises DelayFormatError on a malformed string."""
        return parse_delay(self.arrival_delay_raw)

    def departure_delay(self) -> timedelta:
        """Departure delay; raises DelayFormatError on a malformed string."""
        return parse_delay(self.departure_delay_raw)


__all__ = ["DelayFormatError", "TimeInfo", "parse_delay", "timestamp_to_local"]
