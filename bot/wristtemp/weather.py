"""OpenWeatherMap current-weather fetch and temperature conversion."""

import logging
import math
from typing import Any

import httpx

from wristtemp.location import Position

logger = logging.getLogger(__name__)

ABSOLUTE_ZERO_C = 273.15


class MalformedWeatherResponse(ValueError):
    """The weather response has no usable ``main.temp``."""


def weather_params(position: Position, api_key: str) -> dict[str, Any]:
    return {"lat": position.latitude, "lon": position.longitude, "appid": api_key}


async def fetch_weather(
    client: httpx.AsyncClient, url: str, position: Position, api_key: str
) -> dict[str, Any]:
    """GET the current weather for ``position`` and decode the JSON body.

    The status code is not checked: API errors come back as JSON too and are
    reported by ``extract_kelvin``. A body that is not JSON raises ValueError.
    """
    resp = await client.get(url, params=weather_params(position, api_key))
    return resp.json()


def extract_kelvin(data: dict[str, Any]) -> float:
    main = data.get("main") if isinstance(data, dict) else None
    temp = main.get("temp") if isinstance(main, dict) else None
    if isinstance(temp, bool) or not isinstance(temp, (int, float)):
        if isinstance(data, dict) and "message" in data:
            raise MalformedWeatherResponse(
                f"Weather response has no main.temp (cod={data.get('cod')}: {data['message']})"
            )
        raise MalformedWeatherResponse("Weather response has no main.temp")
    return float(temp)


def round_half_up(value: float) -> int:
    # halves go up: 2.5 -> 3, -1.5 -> -1
    return math.floor(value + 0.5)


def kelvin_to_fahrenheit(kelvin: float) -> int:
    """Convert Kelvin to whole degrees Fahrenheit, rounding halves up."""
    return round_half_up((kelvin - ABSOLUTE_ZERO_C) * 9 / 5 + 32)
