"""Inbound app message handler."""

import logging

from telegram import Update
from telegram.ext import ContextTypes

logger = logging.getLogger(__name__)


async def handle_app_message(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Refresh the weather on any message from the paired device."""
    companion = context.bot_data.get("companion")
    if companion is None:
        logger.warning("AppMessage received before the companion was ready")
        return
    await companion.on_app_message(update.message)
