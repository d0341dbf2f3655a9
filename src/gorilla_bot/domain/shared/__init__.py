"""
Shared Domain Kernel

Exceptions, events and message constants shared across the bot.
"""

from gorilla_bot.domain.shared.events import AudioPlayerErrored, DomainEvent, EventBus
from gorilla_bot.domain.shared.exceptions import (
    AudioResourceNotFoundError,
    DomainError,
    PlaybackError,
    PlaybackTimeoutError,
    RegistryFrozenError,
    VoiceConnectionError,
    VoiceConnectionTimeoutError,
    VoiceError,
)

__all__ = [
    "AudioPlayerErrored",
    "AudioResourceNotFoundError",
    "DomainError",
    "DomainEvent",
    "EventBus",
    "PlaybackError",
    "PlaybackTimeoutError",
    "RegistryFrozenError",
    "VoiceConnectionError",
    "VoiceConnectionTimeoutError",
    "VoiceError",
]
