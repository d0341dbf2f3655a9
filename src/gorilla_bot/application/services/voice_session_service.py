"""Voice session orchestration: connect, play the clip, leave after a delay.

One session per guild. A new session in a guild tears the previous one down
first, and sessions within a guild are serialized by a per-guild lock.
"""

from __future__ import annotations

import asyncio
import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from gorilla_bot.config.settings import VoiceSettings
from gorilla_bot.domain.shared.exceptions import (
    VoiceConnectionError,
    VoiceConnectionTimeoutError,
)
from gorilla_bot.domain.shared.messages import LogTemplates

if TYPE_CHECKING:
    import discord

    from ...infrastructure.audio.audio_player import AudioPlayer

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class VoiceSession:
    """A live voice connection owned by the manager for one guild."""

    guild_id: int
    channel_id: int
    voice_client: discord.VoiceClient
    disconnect_task: asyncio.Task[None] | None = None
    closed: asyncio.Event = field(default_factory=asyncio.Event)

    @property
    def is_closed(self) -> bool:
        return self.closed.is_set()

    async def wait_closed(self) -> None:
        await self.closed.wait()


class VoiceSessionManager:
    def __init__(self, audio_player: AudioPlayer, settings: VoiceSettings | None = None) -> None:
        self._player = audio_player
        self._settings = settings or VoiceSettings()
        self._sessions: dict[int, VoiceSession] = {}
        self._locks: dict[int, asyncio.Lock] = defaultdict(asyncio.Lock)

    def get_session(self, guild_id: int) -> VoiceSession | None:
        return self._sessions.get(guild_id)

    @property
    def active_count(self) -> int:
        return len(self._sessions)

    async def connect_and_play(
        self, channel: discord.VoiceChannel | discord.StageChannel
    ) -> VoiceSession:
        """Join ``channel``, play the clip and schedule the disconnect.

        Raises:
            VoiceConnectionTimeoutError: The connection was not ready in time.
            VoiceConnectionError: The library failed to connect.
            PlaybackError: The clip could not be started.
        """
        guild_id = channel.guild.id

        async with self._locks[guild_id]:
            previous = self._sessions.pop(guild_id, None)
            if previous is not None:
                logger.info(LogTemplates.VOICE_SESSION_REPLACED, guild_id)
                await self._teardown(previous)

            voice_client = await self._connect(channel)
            session = VoiceSession(
                guild_id=guild_id, channel_id=channel.id, voice_client=voice_client
            )

            try:
                await self._player.play_once(voice_client, guild_id)
            except BaseException:
                # Includes cancellation; the connection must not outlive the request
                await self._teardown(session)
                raise

            self._sessions[guild_id] = session
            delay = self._settings.disconnect_delay_seconds
            session.disconnect_task = asyncio.create_task(self._disconnect_later(session, delay))
            logger.debug(LogTemplates.VOICE_DISCONNECT_SCHEDULED, guild_id, delay)
            return session

    async def close_all(self) -> int:
        """Tear down every active session. Returns how many were closed."""
        sessions = list(self._sessions.values())
        self._sessions.clear()
        for session in sessions:
            await self._teardown(session)
        logger.info(LogTemplates.VOICE_SESSIONS_CLOSED, len(sessions))
        return len(sessions)

    async def _connect(
        self, channel: discord.VoiceChannel | discord.StageChannel
    ) -> discord.VoiceClient:
        guild = channel.guild
        timeout = self._settings.connect_timeout_seconds
        logger.info(LogTemplates.VOICE_CONNECTING, channel.id, guild.id)

        try:
            async with asyncio.timeout(timeout):
                voice_client = await channel.connect(timeout=timeout, self_deaf=True)
        except TimeoutError as e:
            logger.error(LogTemplates.VOICE_CONNECTION_TIMEOUT, channel.id, timeout)
            await self._destroy(guild.voice_client, guild.id)
            raise VoiceConnectionTimeoutError(channel.id, timeout) from e
        except Exception as e:
            logger.error(LogTemplates.VOICE_CONNECTION_FAILED, channel.id, e)
            await self._destroy(guild.voice_client, guild.id)
            raise VoiceConnectionError(channel.id, repr(e)) from e
        except asyncio.CancelledError:
            await self._destroy(guild.voice_client, guild.id)
            raise

        logger.info(LogTemplates.VOICE_CONNECTED, channel.id, guild.id)
        return voice_client

    async def _disconnect_later(self, session: VoiceSession, delay: float) -> None:
        await asyncio.sleep(delay)
        logger.info(LogTemplates.VOICE_AUTO_DISCONNECT, session.guild_id)

        async with self._locks[session.guild_id]:
            if self._sessions.get(session.guild_id) is session:
                del self._sessions[session.guild_id]
            await self._teardown(session)

    async def _teardown(self, session: VoiceSession) -> None:
        if session.is_closed:
            return

        task = session.disconnect_task
        if task is not None and task is not asyncio.current_task() and not task.done():
            task.cancel()

        self._player.stop(session.voice_client, session.guild_id)
        await self._destroy(session.voice_client, session.guild_id)
        session.closed.set()

    @staticmethod
    async def _destroy(voice_client: discord.VoiceProtocol | None, guild_id: int) -> None:
        if voice_client is None:
            return
        try:
            await voice_client.disconnect(force=True)
            logger.info(LogTemplates.VOICE_DESTROYED, guild_id)
        except Exception as e:
            logger.warning(LogTemplates.VOICE_DESTROY_FAILED, guild_id, e)
