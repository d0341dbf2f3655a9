"""Slash command dispatch: exposes registry commands to the app command tree."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import discord
from discord import app_commands
from discord.ext import commands

from gorilla_bot.domain.shared.messages import ErrorMessages, LogTemplates
from gorilla_bot.utils.reply import send_generic_error

if TYPE_CHECKING:
    from ....application.commands.registry import SlashCommand
    from ....config.container import Container

logger = logging.getLogger(__name__)


def is_chat_input(interaction: discord.Interaction) -> bool:
    if interaction.type is not discord.InteractionType.application_command:
        return False
    data = interaction.data or {}
    return data.get("type", discord.AppCommandType.chat_input.value) == (
        discord.AppCommandType.chat_input.value
    )


class CommandCog(commands.Cog):
    def __init__(self, bot: commands.Bot, container: Container) -> None:
        self.bot = bot
        self.container = container
        self._tree_commands: list[app_commands.Command] = []

    async def cog_load(self) -> None:
        for command in self.container.command_registry:
            tree_command = self._build_tree_command(command)
            self.bot.tree.add_command(tree_command)
            self._tree_commands.append(tree_command)
        logger.info(LogTemplates.COG_LOADED_COMMANDS, len(self._tree_commands))

    async def cog_unload(self) -> None:
        for tree_command in self._tree_commands:
            self.bot.tree.remove_command(tree_command.name)
        self._tree_commands.clear()
        logger.info(LogTemplates.COG_UNLOADED_COMMANDS)

    def _build_tree_command(self, command: SlashCommand) -> app_commands.Command:
        async def callback(interaction: discord.Interaction) -> None:
            await self.dispatch(interaction)

        return app_commands.Command(
            name=command.name,
            description=command.description,
            callback=callback,
        )

    async def dispatch(self, interaction: discord.Interaction) -> None:
        """Route a chat-input interaction to its registered command.

        Unknown commands are logged and dropped without a reply. A command that
        raises is logged with its traceback and the user gets the generic
        ephemeral error message.
        """
        if not is_chat_input(interaction):
            return

        name = (interaction.data or {}).get("name")
        command = self.container.command_registry.get(name) if name else None
        if command is None:
            logger.error(LogTemplates.COMMAND_NOT_FOUND, name)
            return

        try:
            await command.execute(self.container, interaction)
        except Exception:
            logger.exception(LogTemplates.COMMAND_EXECUTION_FAILED, command.name)
            await send_generic_error(interaction, command.name)


async def setup(bot: commands.Bot) -> None:
    container = getattr(bot, "container", None)
    if container is None:
        raise RuntimeError(ErrorMessages.CONTAINER_NOT_FOUND)

    await bot.add_cog(CommandCog(bot, container))
