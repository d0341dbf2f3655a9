"""Application Context Container

Holds the bot's process-wide collaborators (settings, event bus, command
registry, audio player, voice sessions) and hands the same instances to every
handler. Components are created on first access and cached.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..domain.shared.messages import ErrorMessages

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from discord.ext.commands import Bot

    from ..application.commands.registry import CommandRegistry
    from ..application.services.voice_session_service import VoiceSessionManager
    from ..domain.shared.events import EventBus
    from ..infrastructure.audio.audio_player import AudioPlayer
    from .settings import Settings


@dataclass
class Container:
    """Application context passed to cogs and command handlers.

    Components are lazily initialized when first accessed.
    """

    settings: Settings
    _bot: Bot | None = None

    _event_bus: EventBus | None = None
    _command_registry: CommandRegistry | None = None
    _audio_player: AudioPlayer | None = None
    _voice_sessions: VoiceSessionManager | None = None

    def set_bot(self, bot: Bot) -> None:
        """Set the Discord bot instance."""
        self._bot = bot

    @property
    def bot(self) -> Bot:
        """Get the Discord bot instance."""
        if self._bot is None:
            raise RuntimeError(ErrorMessages.BOT_NOT_INITIALIZED)
        return self._bot

    @property
    def event_bus(self) -> EventBus:
        """Get the event bus, with the log-only audio error handler attached."""
        if self._event_bus is None:
            from ..domain.shared.events import AudioPlayerErrored, EventBus, log_audio_player_error

            self._event_bus = EventBus()
            self._event_bus.subscribe(AudioPlayerErrored, log_audio_player_error)
        return self._event_bus

    @property
    def command_registry(self) -> CommandRegistry:
        """Get the command registry, loaded with the built-in commands."""
        if self._command_registry is None:
            from ..application.commands.registry import CommandRegistry
            from ..infrastructure.discord.commands import BUILTIN_COMMANDS

            registry = CommandRegistry()
            registry.load(BUILTIN_COMMANDS)
            self._command_registry = registry
        return self._command_registry

    @property
    def audio_player(self) -> AudioPlayer:
        """Get the audio player."""
        if self._audio_player is None:
            from ..infrastructure.audio.audio_player import AudioPlayer

            self._audio_player = AudioPlayer(self.settings.voice, event_bus=self.event_bus)
        return self._audio_player

    @property
    def voice_sessions(self) -> VoiceSessionManager:
        """Get the voice session manager."""
        if self._voice_sessions is None:
            from ..application.services.voice_session_service import VoiceSessionManager

            self._voice_sessions = VoiceSessionManager(self.audio_player, self.settings.voice)
        return self._voice_sessions

    async def shutdown(self) -> None:
        """Tear down live voice sessions and drop event subscriptions."""
        if self._voice_sessions is not None:
            await self._voice_sessions.close_all()

        if self._event_bus is not None:
            self._event_bus.clear()


def create_container(settings: Settings) -> Container:
    """Create the application context."""
    return Container(settings)
