"""Base exception classes for domain-level errors."""

from __future__ import annotations

from gorilla_bot.domain.shared.messages import ErrorMessages


class DomainError(Exception):
    """Base exception for all domain-level errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class RegistryFrozenError(DomainError):
    """Raised when the command registry is loaded a second time."""

    def __init__(self) -> None:
        super().__init__(ErrorMessages.REGISTRY_ALREADY_LOADED, code="REGISTRY_FROZEN")


class VoiceError(DomainError):
    """Base class for voice connection and playback failures."""


class VoiceConnectionError(VoiceError):
    """Raised when a voice connection cannot be established."""

    def __init__(self, channel_id: int, reason: str, message: str | None = None) -> None:
        msg = message or ErrorMessages.VOICE_CONNECT_FAILED.format(
            channel_id=channel_id, reason=reason
        )
        super().__init__(msg, code="VOICE_CONNECTION_FAILED")
        self.channel_id = channel_id
        self.reason = reason


class VoiceConnectionTimeoutError(VoiceConnectionError):
    """Raised when a voice connection does not become ready in time."""

    def __init__(self, channel_id: int, timeout: float) -> None:
        super().__init__(
            channel_id,
            reason="timeout",
            message=ErrorMessages.VOICE_CONNECT_TIMEOUT.format(
                channel_id=channel_id, timeout=timeout
            ),
        )
        self.code = "VOICE_CONNECTION_TIMEOUT"
        self.timeout = timeout


class PlaybackError(VoiceError):
    """Raised when the audio player cannot start playback."""

    def __init__(self, title: str, reason: str, message: str | None = None) -> None:
        msg = message or ErrorMessages.PLAYBACK_START_FAILED.format(title=title, reason=reason)
        super().__init__(msg, code="PLAYBACK_FAILED")
        self.title = title
        self.reason = reason


class PlaybackTimeoutError(PlaybackError):
    """Raised when playback does not reach the playing state in time."""

    def __init__(self, title: str, timeout: float) -> None:
        super().__init__(
            title,
            reason="timeout",
            message=ErrorMessages.PLAYBACK_START_TIMEOUT.format(title=title, timeout=timeout),
        )
        self.code = "PLAYBACK_TIMEOUT"
        self.timeout = timeout


class AudioResourceNotFoundError(PlaybackError):
    """Raised when the local audio file does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(
            title=path,
            reason="missing",
            message=ErrorMessages.AUDIO_RESOURCE_NOT_FOUND.format(path=path),
        )
        self.code = "AUDIO_RESOURCE_NOT_FOUND"
        self.path = path
