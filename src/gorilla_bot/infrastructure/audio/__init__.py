"""Audio infrastructure - FFmpeg playback of the local clip."""

from gorilla_bot.infrastructure.audio.audio_player import AudioPlayer, PlayerState

__all__ = [
    "AudioPlayer",
    "PlayerState",
]
