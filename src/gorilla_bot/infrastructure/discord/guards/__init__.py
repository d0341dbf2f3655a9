"""Guard helpers shared by cogs and command definitions."""

from gorilla_bot.infrastructure.discord.guards.voice_guards import (
    get_voice_channel,
    is_bot_or_none,
    joined_from_nowhere,
    send_ephemeral,
)

__all__ = [
    "get_voice_channel",
    "is_bot_or_none",
    "joined_from_nowhere",
    "send_ephemeral",
]
