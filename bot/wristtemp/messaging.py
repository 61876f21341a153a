"""App-message channel to the paired device."""

import logging
from typing import Protocol

from telegram import Bot
from telegram.error import TelegramError

logger = logging.getLogger(__name__)

KEY_TEMPERATURE = "KEY_TEMPERATURE"


class AppMessageError(Exception):
    """Raised when a payload could not be delivered."""


class AppMessageChannel(Protocol):
    async def send_app_message(self, payload: dict[str, int]) -> None: ...


def build_payload(fahrenheit: int) -> dict[str, int]:
    return {KEY_TEMPERATURE: int(fahrenheit)}


def render_payload(payload: dict[str, int]) -> str:
    """Render a payload the way the watchface shows it, e.g. ``81F``."""
    return f"{payload[KEY_TEMPERATURE]:d}F"


class TelegramAppChannel:
    """Delivers payloads as text to the paired user's private chat."""

    def __init__(self, bot: Bot, chat_id: int):
        self.bot = bot
        self.chat_id = chat_id

    async def send_app_message(self, payload: dict[str, int]) -> None:
        try:
            await self.bot.send_message(chat_id=self.chat_id, text=render_payload(payload))
        except TelegramError as e:
            raise AppMessageError(str(e)) from e
