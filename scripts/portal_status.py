"""Print the current status and trip summary from the onboard ICE portal."""

from __future__ import annotations

import argparse
from datetime import timedelta

from iceportal.config import load_config
from iceportal.data.portal_client import PortalClient, PortalClientError
from iceportal.log import configure_logging
from iceportal.model import DelayFormatError, Trip


def _format_km(value: float | None) -> str:
    return "n/a" if value is None else f"{value:.1f} km"


def _format_delay(delay: timedelta) -> str:
    minutes = int(delay.total_seconds() // 60)
    return f"{minutes:+d} min" if minutes else "on time"


def _trip_lines(trip: Trip) -> list[str]:
    previous_stop = trip.previous_stop()
    next_stop = trip.next_stop()
    lines = [
        f"Train: {trip.train_identifier()} to {trip.vicinity.final_station_name} ({trip.trip_date})",
        f"Previous stop: {previous_stop.station.name if previous_stop else 'n/a'}",
        f"Next stop: {next_stop.station.name if next_stop else 'n/a'}",
        f"Distance to next stop: {_format_km(trip.distance_to_next_stop())}",
        f"Distance between stops: {_format_km(trip.distance_between_adjacent_stops())}",
        f"Route length: {_format_km(trip.total_distance())}",
    ]
    if next_stop is None:
        return lines

    arrival = next_stop.timetable.actual_arrival() or next_stop.timetable.scheduled_arrival()
    if arrival is not None:
        lines.append(f"Arrival: {arrival.strftime('%H:%M')}")
    try:
        lines.append(f"Delay: {_format_delay(next_stop.timetable.arrival_delay())}")
    except DelayFormatError as exc:
        lines.append(f"Delay: unknown ({exc})")
    if next_stop.delay_reasons:
        lines.extend(f"  - {reason.text}" for reason in next_stop.delay_reasons)
    return lines


def main() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("--config", default="config/config.yaml", help="Path to the YAML config file")
    parser.add_argument("--status-only", action="store_true", help="Skip the trip summary")
    args = parser.parse_args()

    config = load_config(args.config)
    configure_logging(config.log)

    client = PortalClient(
        status_url=config.portal.status_url,
        trip_url=config.portal.trip_url,
        user_agent=config.portal.user_agent,
        timeout_seconds=config.portal.timeout_seconds,
    )

    try:
        print(client.get_status().format())
        if not args.status_only:
            for line in _trip_lines(client.get_trip()):
                print(line)
    except PortalClientError as exc:
        print(f"Error: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
