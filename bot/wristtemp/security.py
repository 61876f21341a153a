"""Paired-device gate: only the paired user's private chat counts."""

import logging

from telegram import Update
from telegram.ext import filters

logger = logging.getLogger(__name__)


class PairedDeviceFilter(filters.UpdateFilter):
    """Passes updates from the paired user in a private chat only."""

    def __init__(self, paired_user_id: int):
        super().__init__()
        self.paired_user_id = paired_user_id

    def filter(self, update: Update) -> bool:
        chat = update.effective_chat
        if chat is None or chat.type != "private":
            return False

        user = update.effective_user
        if user is None or user.id != self.paired_user_id:
            logger.debug("Ignoring update from unpaired user %s", user.id if user else None)
            return False

        return True
