"""wristtemp entrypoint: wires everything together."""

import logging

from telegram.ext import ApplicationBuilder, MessageHandler, filters

from wristtemp.config import Settings
from wristtemp.handlers.app_message import handle_app_message
from wristtemp.handlers.lifecycle import on_shutdown, on_startup
from wristtemp.security import PairedDeviceFilter

logging.basicConfig(
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    level=logging.INFO,
)
logger = logging.getLogger(__name__)


def main():
    settings = Settings()
    logging.getLogger().setLevel(settings.log_level.upper())
    # httpx logs every request URL at INFO, and the URL carries the API key.
    logging.getLogger("httpx").setLevel(logging.WARNING)

    location = (
        f"{settings.latitude},{settings.longitude}" if settings.has_fixed_position else "ip lookup"
    )
    logger.info("Starting wristtemp (user_id=%s, location=%s)", settings.telegram_user_id, location)

    gate = PairedDeviceFilter(settings.telegram_user_id)

    app = (
        ApplicationBuilder()
        .token(settings.telegram_bot_token)
        .post_init(on_startup)
        .post_shutdown(on_shutdown)
        .build()
    )
    app.bot_data["settings"] = settings

    app.add_handler(MessageHandler(filters.ALL & gate, handle_app_message))

    logger.info("Companion is up, polling for app messages")
    app.run_polling(allowed_updates=["message"])


if __name__ == "__main__":
    main()
