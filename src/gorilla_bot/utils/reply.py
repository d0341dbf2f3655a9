"""Helpers for answering interactions without leaking internal error detail."""

from __future__ import annotations

import logging

import discord

from gorilla_bot.domain.shared.messages import DiscordUIMessages, LogTemplates
from gorilla_bot.infrastructure.discord.guards import send_ephemeral

logger = logging.getLogger(__name__)


async def send_generic_error(
    interaction: discord.Interaction, command_name: str | None = None
) -> bool:
    """Tell the user their command failed. Returns False if the reply could not be sent."""
    try:
        await send_ephemeral(interaction, DiscordUIMessages.ERROR_COMMAND_FAILED)
        return True
    except discord.HTTPException as e:
        logger.warning(LogTemplates.COMMAND_ERROR_REPLY_FAILED, command_name or "<unknown>", e)
        return False
