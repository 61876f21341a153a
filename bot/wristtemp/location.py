"""Geolocation for the companion.

Two sources are supported: a fixed point from configuration, or a lookup of
the host's public IP against an ip-api compatible endpoint. Both expose
``get_current_position(timeout, maximum_age)`` with seconds as the unit.
"""

import asyncio
import logging
import time
from dataclasses import dataclass, field
from typing import Protocol

import httpx

from wristtemp.config import Settings

logger = logging.getLogger(__name__)


class LocationError(Exception):
    """Raised when no position could be obtained."""


@dataclass(frozen=True)
class Position:
    latitude: float
    longitude: float
    timestamp: float = field(default_factory=time.time)  # unix seconds


class Locator(Protocol):
    async def get_current_position(self, timeout: float, maximum_age: float) -> Position: ...


class StaticLocator:
    """Always reports the configured coordinates."""

    def __init__(self, latitude: float, longitude: float):
        self.latitude = latitude
        self.longitude = longitude

    async def get_current_position(self, timeout: float, maximum_age: float) -> Position:
        return Position(self.latitude, self.longitude)


class IpGeolocator:
    """Resolves the position of the host's public IP address.

    A fix no older than ``maximum_age`` seconds is reused instead of issuing
    a new request.
    """

    def __init__(self, client: httpx.AsyncClient, url: str):
        self._client = client
        self._url = url
        self._last: Position | None = None

    async def get_current_position(self, timeout: float, maximum_age: float) -> Position:
        if self._last is not None and time.time() - self._last.timestamp <= maximum_age:
            return self._last

        try:
            resp = await asyncio.wait_for(self._client.get(self._url), timeout)
            resp.raise_for_status()
            data = resp.json()
        except asyncio.TimeoutError as e:
            raise LocationError(f"Location request timed out after {timeout}s") from e
        except (httpx.HTTPError, ValueError) as e:
            raise LocationError(f"Location request failed: {e}") from e

        if not isinstance(data, dict):
            raise LocationError("Location response is not a JSON object")
        if data.get("status") != "success":
            raise LocationError(f"Location lookup failed: {data.get('message', 'unknown error')}")

        lat = data.get("lat")
        lon = data.get("lon")
        if not isinstance(lat, (int, float)) or not isinstance(lon, (int, float)):
            raise LocationError("Location response missing coordinates")

        self._last = Position(float(lat), float(lon))
        logger.debug("Resolved position %.4f,%.4f", lat, lon)
        return self._last


def build_locator(settings: Settings, client: httpx.AsyncClient) -> Locator:
    if settings.has_fixed_position:
        return StaticLocator(settings.latitude, settings.longitude)
    return IpGeolocator(client, settings.geolocation_url)
