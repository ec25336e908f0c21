"""Decode ICE portal JSON documents into model objects."""

from __future__ import annotations

import json
import math
from typing import Any

from iceportal.model import (
    Coordinates,
    DelayReason,
    MiscInfo,
    StationInfo,
    Status,
    Stop,
    TimeInfo,
    TrackInfo,
    TrainVicinity,
    Trip,
)


class DecodeError(ValueError):
    """Raised when a document does not match the expected shape."""


def _require_mapping(value: Any, context: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise DecodeError(f"Expected an object for {context}, got {type(value).__name__}")
    return value


def _require_key(mapping: dict[str, Any], key: str, context: str) -> Any:
    if key not in mapping:
        raise DecodeError(f"Missing required key '{key}' in {context}")
    return mapping[key]


def _str(mapping: dict[str, Any], key: str, context: str) -> str:
    value = _require_key(mapping, key, context)
    if not isinstance(value, str):
        raise DecodeError(f"'{key}' in {context} must be a string")
    return value


def _bool(mapping: dict[str, Any], key: str, context: str) -> bool:
    value = _require_key(mapping, key, context)
    if not isinstance(value, bool):
        raise DecodeError(f"'{key}' in {context} must be a boolean")
    return value


INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def _check_int(value: Any, key: str, context: str) -> int:
    # bool is a subclass of int but never a valid number on the wire
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"'{key}' in {context} must be an integer")
    if not INT64_MIN <= value <= INT64_MAX:
        raise DecodeError(f"'{key}' in {context} is out of the 64-bit integer range")
    return value


def _int(mapping: dict[str, Any], key: str, context: str) -> int:
    return _check_int(_require_key(mapping, key, context), key, context)


def _optional_int(mapping: dict[str, Any], key: str, context: str) -> int | None:
    value = mapping.get(key)
    if value is None:
        return None
    return _check_int(value, key, context)


def _float(mapping: dict[str, Any], key: str, context: str) -> float:
    value = _require_key(mapping, key, context)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DecodeError(f"'{key}' in {context} must be a number")
    try:
        number = float(value)
    except OverflowError as exc:
        raise DecodeError(f"'{key}' in {context} is too large") from exc
    if not math.isfinite(number):
        raise DecodeError(f"'{key}' in {context} must be finite")
    return number


def _section(mapping: dict[str, Any], key: str, context: str) -> dict[str, Any]:
    return _require_mapping(_require_key(mapping, key, context), f"{context}.{key}")


def decode_status(document: Any) -> Status:
    """Decode a status document."""
    data = _require_mapping(document, "status")
    return Status(
        speed=_float(data, "speed", "status"),
        latitude=_float(data, "latitude", "status"),
        longitude=_float(data, "longitude", "status"),
        server_time_ms=_int(data, "serverTime", "status"),
    )


def _decode_delay_reasons(value: Any, context: str) -> tuple[DelayReason, ...] | None:
    if value is None:
        return None
    if not isinstance(value, list):
        raise DecodeError(f"'delayReasons' in {context} must be a list")
    reasons = []
    for index, item in enumerate(value):
        item_context = f"{context}.delayReasons[{index}]"
        reason = _require_mapping(item, item_context)
        reasons.append(
            DelayReason(
                code=_str(reason, "code", item_context),
                text=_str(reason, "text", item_context),
            )
        )
    return tuple(reasons)


def _decode_stop(document: Any, context: str) -> Stop:
    data = _require_mapping(document, context)

    station = _section(data, "station", context)
    station_context = f"{context}.station"
    geo = _section(station, "geocoordinates", station_context)
    geo_context = f"{station_context}.geocoordinates"

    timetable = _section(data, "timetable", context)
    timetable_context = f"{context}.timetable"
    track = _section(data, "track", context)
    track_context = f"{context}.track"
    info = _section(data, "info", context)
    info_context = f"{context}.info"

    return Stop(
        station=StationInfo(
            eva_nr=_str(station, "evaNr", station_context),
            name=_str(station, "name", station_context),
            coordinates=Coordinates(
                latitude=_float(geo, "latitude", geo_context),
                longitude=_float(geo, "longitude", geo_context),
            ),
        ),
        timetable=TimeInfo(
            scheduled_arrival_ms=_optional_int(timetable, "scheduledArrivalTime", timetable_context),
            actual_arrival_ms=_optional_int(timetable, "actualArrivalTime", timetable_context),
            arrival_delay_raw=_str(timetable, "arrivalDelay", timetable_context),
            scheduled_departure_ms=_optional_int(timetable, "scheduledDepartureTime", timetable_context),
            actual_departure_ms=_optional_int(timetable, "actualDepartureTime", timetable_context),
            departure_delay_raw=_str(timetable, "departureDelay", timetable_context),
        ),
        track=TrackInfo(
            scheduled=_str(track, "scheduled", track_context),
            actual=_str(track, "actual", track_context),
        ),
        info=MiscInfo(
            status=_int(info, "status", info_context),
            passed=_bool(info, "passed", info_context),
            distance_from_previous_m=_int(info, "distance", info_context),
            distance_from_origin_m=_int(info, "distanceFromStart", info_context),
        ),
        delay_reasons=_decode_delay_reasons(data.get("delayReasons"), context),
    )


def decode_trip(document: Any) -> Trip:
    """Decode a tripInfo document.

    Delay strings are not validated here; they are parsed when a delay is read.
    """
    data = _require_mapping(document, "trip")
    vicinity = _section(data, "stopInfo", "trip")

    stops = _require_key(data, "stops", "trip")
    if not isinstance(stops, list):
        raise DecodeError("'stops' in trip must be a list")

    return Trip(
        trip_date=_str(data, "tripDate", "trip"),
        train_type=_str(data, "trainType", "trip"),
        train_number=_str(data, "vzn", "trip"),
        actual_position=_int(data, "actualPosition", "trip"),
        distance_from_last_stop_m=_int(data, "distanceFromLastStop", "trip"),
        total_distance_m=_int(data, "totalDistance", "trip"),
        vicinity=TrainVicinity(
            scheduled_next=_str(vicinity, "scheduledNext", "trip.stopInfo"),
            actual_next=_str(vicinity, "actualNext", "trip.stopInfo"),
            actual_last=_str(vicinity, "actualLast", "trip.stopInfo"),
            actual_last_started=_str(vicinity, "actualLastStarted", "trip.stopInfo"),
            final_station_id=_str(vicinity, "finalStationEvaNr", "trip.stopInfo"),
            final_station_name=_str(vicinity, "finalStationName", "trip.stopInfo"),
        ),
        stops=tuple(_decode_stop(stop, f"trip.stops[{index}]") for index, stop in enumerate(stops)),
    )


def _load_json(text: str, context: str) -> Any:
    try:
        return json.loads(text)
    except ValueError as exc:
        raise DecodeError(f"{context} response was not valid JSON") from exc


def parse_status(text: str) -> Status:
    """Decode a raw status response body."""
    return decode_status(_load_json(text, "Status"))


def parse_trip(text: str) -> Trip:
    """Decode a raw tripInfo response body."""
    return decode_trip(_load_json(text, "Trip"))


__all__ = ["DecodeError", "decode_status", "decode_trip", "parse_status", "parse_trip"]
