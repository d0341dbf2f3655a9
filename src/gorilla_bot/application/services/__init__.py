"""Application services."""

from gorilla_bot.application.services.voice_session_service import (
    VoiceSession,
    VoiceSessionManager,
)

__all__ = [
    "VoiceSession",
    "VoiceSessionManager",
]
