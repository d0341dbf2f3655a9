"""/gorilla: the bot's signature reply."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gorilla_bot.application.commands.registry import SlashCommand
from gorilla_bot.domain.shared.messages import DiscordUIMessages

if TYPE_CHECKING:
    import discord

    from ....config.container import Container


async def execute(container: Container, interaction: discord.Interaction) -> None:
    await interaction.response.send_message(DiscordUIMessages.GORILLA_REPLY)


COMMAND = SlashCommand(name="gorilla", description="Go. Ril. La.", execute=execute)
