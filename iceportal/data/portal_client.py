"""ICE portal API client."""

from __future__ import annotations

import logging

import requests

from iceportal.data.decode import DecodeError, parse_status, parse_trip
from iceportal.data.endpoints import DEFAULT_STATUS_URL, DEFAULT_TRIP_URL, DEFAULT_USER_AGENT
from iceportal.model import Status, Trip

logger = logging.getLogger(__name__)


class PortalClientError(Exception):
    """Raised when a portal request fails or its response cannot be used."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class PortalClient:
    """Thin wrapper around the onboard ICE portal API using requests."""

    def __init__(
        self,
        status_url: str = DEFAULT_STATUS_URL,
        trip_url: str = DEFAULT_TRIP_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout_seconds: float = 10,
    ) -> None:
        self._status_url = status_url
        self._trip_url = trip_url
        self._user_agent = user_agent
        self._timeout_seconds = timeout_seconds

    def request_status(self) -> str:
        """Fetch the raw status document."""
        return self._get(self._status_url)

    def request_trip(self) -> str:
        """Fetch the raw tripInfo document."""
        return self._get(self._trip_url)

    @staticmethod
    def deserialize_status(response: str) -> Status:
        return parse_status(response)

    @staticmethod
    def deserialize_trip(response: str) -> Trip:
        return parse_trip(response)

    def get_status(self) -> Status:
        """Fetch and decode the current status; any failure raises PortalClientError."""
        response = self.request_status()
        try:
            return self.deserialize_status(response)
        except DecodeError as exc:
            logger.warning("Could not decode status response: %s", exc)
            raise PortalClientError(f"Invalid status response: {exc}") from exc

    def get_trip(self) -> Trip:
        """Fetch and decode the current trip; any failure raises PortalClientError."""
        response = self.request_trip()
        try:
            return self.deserialize_trip(response)
        except DecodeError as exc:
            logger.warning("Could not decode trip response: %s", exc)
            raise PortalClientError(f"Invalid trip response: {exc}") from exc

    def get_speed(self) -> float:
        """Current speed of the train in km/h."""
        return self.get_status().speed

    def _get(self, url: str) -> str:
        headers = {"User-Agent": self._user_agent}
        logger.debug("Fetching %s", url)
        try:
            response = requests.get(url, headers=headers, timeout=self._timeout_seconds)
        except requests.RequestException as exc:
            logger.warning("Request to %s failed: %s", url, exc)
            raise PortalClientError(f"Portal request failed: {exc}") from exc

        if response.status_code != 200:
            logger.warning("Request to %s returned status %s", url, response.status_code)
            raise PortalClientError(
                f"Portal request failed: Status {response.status_code}",
                status_code=response.status_code,
            )

        return response.text


__all__ = [
    "DEFAULT_STATUS_URL",
    "DEFAULT_TRIP_URL",
    "DEFAULT_USER_AGENT",
    "PortalClient",
    "PortalClientError",
]
