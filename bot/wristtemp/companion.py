"""Fetch-and-forward cycle run on every lifecycle event."""

import logging
from typing import Any

import httpx

from wristtemp.config import Settings
from wristtemp.location import LocationError, Locator
from wristtemp.messaging import AppMessageChannel, AppMessageError, build_payload
from wristtemp.weather import extract_kelvin, fetch_weather, kelvin_to_fahrenheit

logger = logging.getLogger(__name__)


class WeatherCompanion:
    """Looks up the weather for the device's position and sends it over.

    Every call to ``get_weather`` is independent; nothing is kept between
    cycles, so overlapping events simply run overlapping cycles.
    """

    def __init__(
        self,
        locator: Locator,
        channel: AppMessageChannel,
        client: httpx.AsyncClient,
        settings: Settings,
    ):
        self.locator = locator
        self.channel = channel
        self.client = client
        self.settings = settings

    async def get_weather(self) -> int | None:
        """Run one cycle. Returns the forwarded temperature, or None on failure.

        A weather response without ``main.temp`` raises MalformedWeatherResponse
        and nothing is sent.
        """
        try:
            position = await self.locator.get_current_position(
                timeout=self.settings.location_timeout_ms / 1000,
                maximum_age=self.settings.location_maximum_age_ms / 1000,
            )
        except LocationError as e:
            logger.error("Error requesting location! (%s)", e)
            return None

        data = await fetch_weather(
            self.client,
            self.settings.openweather_url,
            position,
            self.settings.openweather_api_key,
        )
        fahrenheit = kelvin_to_fahrenheit(extract_kelvin(data))
        logger.info("Temperature is %d", fahrenheit)

        try:
            await self.channel.send_app_message(build_payload(fahrenheit))
        except AppMessageError as e:
            logger.error("Error sending weather info to device! (%s)", e)
            return None

        logger.info("Weather info sent to device successfully!")
        return fahrenheit

    async def on_ready(self) -> int | None:
        logger.info("Companion ready!")
        return await self.get_weather()

    async def on_app_message(self, message: Any = None) -> int | None:
        # Content is ignored; any inbound message triggers a refresh.
        logger.info("AppMessage received!")
        return await self.get_weather()
