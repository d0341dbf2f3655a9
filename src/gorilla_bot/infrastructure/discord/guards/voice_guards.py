"""Reusable voice-channel guard functions for commands and message triggers.

These are free functions that accept explicit dependencies rather than relying
on a specific cog instance, making them usable from any handler.
"""

from __future__ import annotations

import discord

VoiceChannel = discord.VoiceChannel | discord.StageChannel


async def send_ephemeral(interaction: discord.Interaction, message: str) -> None:
    """Send an ephemeral message, handling both fresh and already-responded interactions."""
    if interaction.response.is_done():
        await interaction.followup.send(message, ephemeral=True)
    else:
        await interaction.response.send_message(message, ephemeral=True)


def get_voice_channel(user: discord.abc.User | None) -> VoiceChannel | None:
    """Return the voice channel a guild member is connected to, if any."""
    voice = getattr(user, "voice", None)
    if voice is None or voice.channel is None:
        return None
    return voice.channel


def is_bot_or_none(user: discord.abc.User | None) -> bool:
    return user is None or bool(getattr(user, "bot", False))


def joined_from_nowhere(before: discord.VoiceState, after: discord.VoiceState) -> bool:
    """True when a voice state update moves a member from no channel into one."""
    return before.channel is None and after.channel is not None
