from __future__ import annotations

import pytest

from iceportal.model import (
    Coordinates,
    MiscInfo,
    StationInfo,
    Stop,
    TimeInfo,
    TrackInfo,
    TrainVicinity,
    Trip,
    distance_to_km,
)


def _stop(
    eva_nr: str,
    *,
    name: str | None = None,
    distance: int = 0,
    distance_from_start: int = 0,
    passed: bool = False,
) -> Stop:
    return Stop(
        station=StationInfo(
            eva_nr=eva_nr,
            name=name or f"Station {eva_nr}",
            coordinates=Coordinates(latitude=50.0, longitude=8.0),
        ),
        timetable=TimeInfo(
            scheduled_arrival_ms=None,
            actual_arrival_ms=None,
            arrival_delay_raw="",
            scheduled_departure_ms=None,
            actual_departure_ms=None,
            departure_delay_raw="",
        ),
        track=TrackInfo(scheduled="7", actual="7"),
        info=MiscInfo(
            status=0,
            passed=passed,
            distance_from_previous_m=distance,
            distance_from_origin_m=distance_from_start,
        ),
    )


def _trip(
    stops: list[Stop],
    *,
    actual_next: str = "",
    actual_last: str = "",
    final_station_id: str = "",
    distance_from_last_stop: int = 0,
    total_distance: int = 0,
) -> Trip:
    return Trip(
        trip_date="2024-05-01",
        train_type="ICE",
        train_number="123",
        actual_position=0,
        distance_from_last_stop_m=distance_from_last_stop,
        total_distance_m=total_distance,
        vicinity=TrainVicinity(
            scheduled_next=actual_next,
            actual_next=actual_next,
            actual_last=actual_last,
            actual_last_started=actual_next,
            final_station_id=final_station_id,
            final_station_name="Final",
        ),
        stops=tuple(stops),
    )


def test_distance_to_km() -> None:
    assert distance_to_km(1000) == 1.0
    assert distance_to_km(0) == 0.0
    assert distance_to_km(-500) == -0.5
    assert distance_to_km(1234) == 1.234


def test_train_identifier() -> None:
    assert _trip([]).train_identifier() == "ICE 123"


def test_get_stop_on_empty_stops_returns_none() -> None:
    trip = _trip([])

    assert trip.get_stop("S1") is None
    assert trip.get_stop("") is None


def test_get_stop_returns_first_match() -> None:
    first = _stop("S1", name="First")
    second = _stop("S1", name="Second")
    trip = _trip([_stop("S0"), first, second])

    assert trip.get_stop("S1") is first


def test_origin() -> None:
    a = _stop("S1")
    assert _trip([]).origin() is None
    assert _trip([a, _stop("S2")]).origin() is a


def test_destination_resolves_final_station() -> None:
    last = _stop("S3")
    trip = _trip([_stop("S1"), _stop("S2"), last], final_station_id="S3")

    assert trip.destination() is last


def test_destination_missing() -> None:
    trip = _trip([_stop("S1")], final_station_id="S9")

    assert trip.destination() is None


def test_adjacent_stop_scenario() -> None:
    a = _stop("S1", distance=0)
    b = _stop("S2", distance=5000, distance_from_start=5000)
    trip = _trip([a, b], actual_next="S2", actual_last="S1", distance_from_last_stop=2000)

    assert trip.previous_stop() is a
    assert trip.next_stop() is b
    assert trip.distance_to_previous_stop() == 2.0
    assert trip.distance_between_adjacent_stops() == 5.0
    assert trip.distance_to_next_stop() == 3.0


def test_unresolvable_next_stop() -> None:
    trip = _trip([_stop("S1"), _stop("S2")], actual_next="S9", actual_last="S1", distance_from_last_stop=2000)

    assert trip.next_stop() is None
    assert trip.distance_to_next_stop() is None
    assert trip.distance_between_adjacent_stops() is None
    assert trip.distance_to_previous_stop() == 2.0


def test_unresolvable_previous_stop() -> None:
    trip = _trip([_stop("S1"), _stop("S2", distance=5000)], actual_next="S2", actual_last="S9")

    assert trip.previous_stop() is None
    assert trip.next_stop() is not None
    assert trip.distance_between_adjacent_stops() == 5.0


def test_get_stop_miss_on_non_empty_stops() -> None:
    trip = _trip([_stop("S1"), _stop("S2")])

    assert trip.get_stop("S3") is None
    assert trip.get_stop("s1") is None


def test_distance_to_next_stop_can_be_negative() -> None:
    trip = _trip([_stop("S1"), _stop("S2", distance=1000)], actual_next="S2", distance_from_last_stop=1500)

    assert trip.distance_to_next_stop() == pytest.approx(-0.5)


def test_total_distance() -> None:
    assert _trip([], total_distance=612345).total_distance() == 612.345


def test_misc_info_distances() -> None:
    stop = _stop("S2", distance=42500, distance_from_start=120000)

    assert stop.info.distance_to_previous_stop() == 42.5
    assert stop.info.distance_to_origin() == 120.0


def test_trip_is_immutable() -> None:
    trip = _trip([_stop("S1")])

    with pytest.raises(AttributeError):
        trip.train_number = "999"  # type: ignore[misc]
