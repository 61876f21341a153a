"""Application lifecycle hooks: build the companion, fire ``ready`` and
schedule the half-hourly refresh."""

import logging
from datetime import datetime

import httpx
from telegram.ext import Application, ContextTypes

from wristtemp.companion import WeatherCompanion
from wristtemp.config import Settings
from wristtemp.location import build_locator
from wristtemp.messaging import TelegramAppChannel

logger = logging.getLogger(__name__)

REFRESH_INTERVAL_S = 30 * 60
REFRESH_JOB_NAME = "weather-refresh"


def build_companion(application: Application, settings: Settings) -> WeatherCompanion:
    client = httpx.AsyncClient(timeout=httpx.Timeout(settings.http_timeout_s, connect=10))
    application.bot_data["http_client"] = client
    companion = WeatherCompanion(
        locator=build_locator(settings, client),
        channel=TelegramAppChannel(application.bot, settings.telegram_user_id),
        client=client,
        settings=settings,
    )
    application.bot_data["companion"] = companion
    return companion


def seconds_until_next_refresh(now: datetime) -> float:
    """Seconds from ``now`` to the next wall-clock :00 or :30."""
    elapsed = (now.minute % 30) * 60 + now.second + now.microsecond / 1_000_000
    return REFRESH_INTERVAL_S - elapsed


async def refresh_weather(context: ContextTypes.DEFAULT_TYPE):
    """Job callback: the half-hour tick counts as an inbound app message."""
    companion = context.bot_data.get("companion")
    if companion is None:
        return
    await companion.on_app_message(None)


def schedule_refresh(application: Application):
    first = seconds_until_next_refresh(datetime.now())
    application.job_queue.run_repeating(
        refresh_weather,
        interval=REFRESH_INTERVAL_S,
        first=first,
        name=REFRESH_JOB_NAME,
    )
    logger.info("Half-hourly refresh scheduled, first in %.0fs", first)


async def on_startup(application: Application):
    settings: Settings = application.bot_data["settings"]
    companion = build_companion(application, settings)
    schedule_refresh(application)
    try:
        await companion.on_ready()
    except Exception:
        # A failed cycle must not stop the bot from polling.
        logger.exception("Weather refresh on ready failed")


async def on_shutdown(application: Application):
    client = application.bot_data.pop("http_client", None)
    if client is not None:
        await client.aclose()
