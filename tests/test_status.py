from __future__ import annotations

from datetime import datetime, timezone
from unittest.mock import patch

from iceportal.model import Coordinates, Status
from iceportal.model.status import TIME_FORMAT


def _status(server_time_ms: int = 1500000000000) -> Status:
    return Status(speed=5.0, latitude=50.1, longitude=8.25, server_time_ms=server_time_ms)


def test_coordinates() -> None:
    assert _status().coordinates() == Coordinates(latitude=50.1, longitude=8.25)


def test_local_time_is_aware() -> None:
    local = _status().local_time()

    assert local.tzinfo is not None
    assert local == datetime(2017, 7, 14, 2, 40, tzinfo=timezone.utc)


def test_format_includes_time() -> None:
    status = _status()
    expected_time = status.local_time().strftime(TIME_FORMAT)

    assert status.format() == f"Speed:   5.0 km/h; Lat/Long: 50.1000,  8.2500; Time: {expected_time}"
    assert str(status) == status.format()


def test_format_rounds_speed() -> None:
    status = Status(speed=187.25, latitude=-3.5, longitude=120.0, server_time_ms=0)

    assert status.format().startswith("Speed: 187.2 km/h; Lat/Long: -3.5000,120.0000")


def test_format_omits_unrenderable_time() -> None:
    with patch("iceportal.model.status.timestamp_to_local", side_effect=OverflowError("out of range")):
        text = _status().format()

    assert text == "Speed:   5.0 km/h; Lat/Long: 50.1000,  8.2500"


def test_format_omits_time_out_of_platform_range() -> None:
    text = _status(server_time_ms=2**62).format()

    assert text == "Speed:   5.0 km/h; Lat/Long: 50.1000,  8.2500"
