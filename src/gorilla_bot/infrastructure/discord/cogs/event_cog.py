"""Discord event listeners: ready, text trigger and voice joins."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import discord
from discord.ext import commands

from gorilla_bot.domain.shared.exceptions import VoiceError
from gorilla_bot.domain.shared.messages import DiscordUIMessages, ErrorMessages, LogTemplates
from gorilla_bot.infrastructure.discord.guards import (
    get_voice_channel,
    is_bot_or_none,
    joined_from_nowhere,
)

if TYPE_CHECKING:
    from ....config.container import Container

logger = logging.getLogger(__name__)


class EventCog(commands.Cog):
    def __init__(self, bot: commands.Bot, container: Container) -> None:
        self.bot = bot
        self.container = container
        self._voice_settings = container.settings.voice
        self._warmed_up = False

    # ─────────────────────────────────────────────────────────────────
    # Lifecycle Events
    # ─────────────────────────────────────────────────────────────────

    @commands.Cog.listener()
    async def on_ready(self) -> None:
        logger.info(LogTemplates.BOT_READY, self.bot.user)
        logger.info(LogTemplates.BOT_CONNECTED_GUILDS, len(self.bot.guilds))

        activity = discord.Activity(
            type=discord.ActivityType.listening, name=self._voice_settings.trigger_text
        )
        try:
            await self.bot.change_presence(activity=activity)
        except Exception as e:
            logger.debug("Could not set presence: %r", e)

        # on_ready fires again after reconnects; warm up only once
        if self._warmed_up or not self._voice_settings.warm_up_on_ready:
            return
        self._warmed_up = True

        try:
            await self.container.audio_player.warm_up()
        except Exception as e:
            logger.warning(LogTemplates.AUDIO_WARMUP_FAILED, e)

    # ─────────────────────────────────────────────────────────────────
    # Message Events
    # ─────────────────────────────────────────────────────────────────

    @commands.Cog.listener()
    async def on_message(self, message: discord.Message) -> None:
        if message.guild is None:
            return

        if is_bot_or_none(message.author):
            return

        if message.content != self._voice_settings.trigger_text:
            return

        logger.debug(LogTemplates.TRIGGER_RECEIVED, message.author.id, message.guild.id)

        channel = get_voice_channel(message.author)
        if channel is None:
            logger.debug(LogTemplates.TRIGGER_NOT_IN_VOICE, message.author.id)
            try:
                await message.reply(DiscordUIMessages.STATE_NEED_TO_BE_IN_VOICE)
            except discord.HTTPException as e:
                logger.warning("Failed to reply to trigger message %s: %r", message.id, e)
            return

        await self._start_session(channel)

    # ─────────────────────────────────────────────────────────────────
    # Voice Events
    # ─────────────────────────────────────────────────────────────────

    @commands.Cog.listener()
    async def on_voice_state_update(
        self, member: discord.Member, before: discord.VoiceState, after: discord.VoiceState
    ) -> None:
        if member.bot:
            return

        if not self._voice_settings.auto_join:
            return

        if not joined_from_nowhere(before, after):
            return

        assert after.channel is not None
        logger.info(
            LogTemplates.VOICE_JOIN_TRIGGER, member.id, after.channel.id, member.guild.id
        )
        await self._start_session(after.channel)

    async def _start_session(self, channel: discord.VoiceChannel | discord.StageChannel) -> None:
        try:
            await self.container.voice_sessions.connect_and_play(channel)
        except VoiceError as e:
            logger.error(LogTemplates.VOICE_SESSION_FAILED, channel.guild.id, e)
        except Exception as e:
            logger.exception(LogTemplates.VOICE_SESSION_FAILED, channel.guild.id, e)


async def setup(bot: commands.Bot) -> None:
    container = getattr(bot, "container", None)
    if container is None:
        raise RuntimeError(ErrorMessages.CONTAINER_NOT_FOUND)

    await bot.add_cog(EventCog(bot, container))
