"""Geographic coordinates and distance units."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinates:
    """A GPS position in decimal degrees."""

    latitude: float
    longitude: float


def distance_to_km(distance_m: int) -> float:
    """Convert an integral distance in meters to kilometers."""
    return distance_m / 1000.0


__all__ = ["Coordinates", "distance_to_km"]
