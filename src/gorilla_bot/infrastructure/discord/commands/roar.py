"""/roar: join the caller's voice channel and play the clip."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gorilla_bot.application.commands.registry import SlashCommand
from gorilla_bot.domain.shared.messages import DiscordUIMessages
from gorilla_bot.infrastructure.discord.guards import get_voice_channel, send_ephemeral

if TYPE_CHECKING:
    import discord

    from ....config.container import Container


async def execute(container: Container, interaction: discord.Interaction) -> None:
    if interaction.guild is None:
        await send_ephemeral(interaction, DiscordUIMessages.STATE_SERVER_ONLY)
        return

    channel = get_voice_channel(interaction.user)
    if channel is None:
        await send_ephemeral(interaction, DiscordUIMessages.STATE_NEED_TO_BE_IN_VOICE)
        return

    await interaction.response.send_message(
        DiscordUIMessages.ROAR_ACK.format(channel=channel.mention), ephemeral=True
    )
    # Errors propagate to the dispatcher, which answers with the generic error reply.
    await container.voice_sessions.connect_and_play(channel)


COMMAND = SlashCommand(
    name="roar",
    description="Join your voice channel and let out a roar.",
    execute=execute,
)
