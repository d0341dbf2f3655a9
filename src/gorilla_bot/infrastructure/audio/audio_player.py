"""
Audio Player

Plays the bot's single local clip through a guild's voice client.
"""

from __future__ import annotations

import asyncio
import io
import logging
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

import discord

from gorilla_bot.config.settings import VoiceSettings
from gorilla_bot.domain.shared.events import AudioPlayerErrored
from gorilla_bot.domain.shared.exceptions import (
    AudioResourceNotFoundError,
    PlaybackError,
    PlaybackTimeoutError,
)
from gorilla_bot.domain.shared.messages import LogTemplates

if TYPE_CHECKING:
    from gorilla_bot.domain.shared.events import EventBus

logger = logging.getLogger(__name__)

PLAYING_POLL_INTERVAL: float = 0.05


class PlayerState(Enum):
    """States for the audio player in one guild."""

    IDLE = "idle"
    BUFFERING = "buffering"
    PLAYING = "playing"


class AudioPlayer:
    """Plays one fixed resource per request; no queue, no pause or skip.

    State is tracked per guild, so sessions in different guilds never share a
    source. Errors reported by the voice client's ``after`` callback are
    published as :class:`AudioPlayerErrored` events.
    """

    def __init__(
        self, settings: VoiceSettings | None = None, event_bus: EventBus | None = None
    ) -> None:
        """Initialize the player.

        Args:
            settings: Voice settings (audio path, volume, start timeout).
            event_bus: Bus that receives playback error events.
        """
        self._settings = settings or VoiceSettings()
        self._event_bus = event_bus
        self._buffer: bytes | None = None
        self._states: dict[int, PlayerState] = {}
        self._active_sources: dict[int, discord.AudioSource] = {}
        self._pending_events: set[asyncio.Task[None]] = set()

    @property
    def resource_path(self) -> Path:
        return self._settings.audio_path

    @property
    def resource_title(self) -> str:
        return self._settings.audio_path.stem

    @property
    def is_warm(self) -> bool:
        return self._buffer is not None

    async def warm_up(self) -> int:
        """Pre-buffer the audio file so the first playback starts faster.

        Returns:
            Number of bytes buffered.

        Raises:
            AudioResourceNotFoundError: If the file does not exist.
        """
        path = self.resource_path
        if not path.is_file():
            raise AudioResourceNotFoundError(str(path))

        self._buffer = await asyncio.to_thread(path.read_bytes)
        logger.info(LogTemplates.AUDIO_WARMUP_COMPLETE, path, len(self._buffer))
        return len(self._buffer)

    def create_source(self, resource_path: Path | None = None) -> discord.PCMVolumeTransformer:
        """Create a volume-controlled FFmpeg source for the clip.

        Uses the pre-buffered bytes when the default resource was warmed up.

        Raises:
            AudioResourceNotFoundError: If the file does not exist.
        """
        path = resource_path or self.resource_path

        if resource_path is None and self._buffer is not None:
            source = discord.FFmpegPCMAudio(io.BytesIO(self._buffer), pipe=True, options="-vn")
        else:
            if not path.is_file():
                raise AudioResourceNotFoundError(str(path))
            source = discord.FFmpegPCMAudio(str(path), options="-vn")

        return discord.PCMVolumeTransformer(source, volume=self._settings.volume)

    async def play_once(
        self,
        voice_client: discord.VoiceClient,
        guild_id: int,
        resource_path: Path | None = None,
    ) -> None:
        """Play the clip once and wait until the client reports playing.

        Args:
            voice_client: A connected voice client.
            guild_id: Guild the client belongs to.
            resource_path: Override for the configured audio file.

        Raises:
            AudioResourceNotFoundError: If the file does not exist.
            PlaybackError: If the voice client refuses the source.
            PlaybackTimeoutError: If playback does not start in time.
        """
        title = (resource_path or self.resource_path).stem
        timeout = self._settings.playback_start_timeout_seconds
        loop = asyncio.get_running_loop()

        source = self.create_source(resource_path)

        if voice_client.is_playing():
            voice_client.stop()
        self._cleanup_guild(guild_id)

        self._states[guild_id] = PlayerState.BUFFERING
        self._active_sources[guild_id] = source

        def after_callback(error: Exception | None) -> None:
            # Runs on the audio thread
            loop.call_soon_threadsafe(self._on_playback_end, guild_id, title, source, error)

        try:
            voice_client.play(source, after=after_callback)
        except discord.ClientException as e:
            self._states[guild_id] = PlayerState.IDLE
            self._cleanup_guild(guild_id)
            raise PlaybackError(title, str(e)) from e

        logger.debug(LogTemplates.PLAYBACK_REQUESTED, title, guild_id)

        try:
            async with asyncio.timeout(timeout):
                while not voice_client.is_playing():
                    await asyncio.sleep(PLAYING_POLL_INTERVAL)
        except TimeoutError as e:
            logger.warning(LogTemplates.PLAYBACK_START_TIMEOUT, title, guild_id, timeout)
            self.stop(voice_client, guild_id)
            raise PlaybackTimeoutError(title, timeout) from e

        self._states[guild_id] = PlayerState.PLAYING
        logger.info(LogTemplates.PLAYBACK_STARTED, title, guild_id)

    def stop(self, voice_client: discord.VoiceClient, guild_id: int) -> None:
        """Stop playback in a guild and release its source."""
        if voice_client.is_playing() or voice_client.is_paused():
            voice_client.stop()
        self._cleanup_guild(guild_id)
        self._states[guild_id] = PlayerState.IDLE
        logger.debug(LogTemplates.PLAYBACK_STOPPED, guild_id)

    def get_state(self, guild_id: int) -> PlayerState:
        return self._states.get(guild_id, PlayerState.IDLE)

    def _on_playback_end(
        self,
        guild_id: int,
        title: str,
        source: discord.AudioSource,
        error: Exception | None,
    ) -> None:
        # A newer play request may already own the guild
        if self._active_sources.get(guild_id) is source:
            self._cleanup_guild(guild_id)
            self._states[guild_id] = PlayerState.IDLE

        if error is None:
            logger.debug(LogTemplates.PLAYBACK_FINISHED, title, guild_id)
            return

        event = AudioPlayerErrored(guild_id=guild_id, resource_title=title, error=str(error))
        if self._event_bus is None:
            logger.error(LogTemplates.AUDIO_PLAYER_ERROR, event.error, title)
            return
        task = asyncio.get_running_loop().create_task(self._event_bus.publish(event))
        self._pending_events.add(task)
        task.add_done_callback(self._pending_events.discard)

    def _cleanup_guild(self, guild_id: int) -> None:
        source = self._active_sources.pop(guild_id, None)
        if source is None:
            return
        try:
            source.cleanup()
        except Exception as e:
            logger.debug(LogTemplates.AUDIO_SOURCE_CLEANUP_ERROR, e)
