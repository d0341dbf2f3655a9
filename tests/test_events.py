"""
Unit Tests for Domain Events and the EventBus

Tests for:
- Event immutability and defaults
- Subscribe / publish / unsubscribe / clear
- Handler failures are isolated from other handlers
- The log-only audio player error handler
"""

import logging

import pytest
from pydantic import ValidationError

from gorilla_bot.domain.shared.events import (
    AudioPlayerErrored,
    DomainEvent,
    EventBus,
    log_audio_player_error,
)

# =============================================================================
# Event Model Tests
# =============================================================================


class TestAudioPlayerErrored:
    def test_generates_id_and_timestamp(self):
        event = AudioPlayerErrored(guild_id=1, resource_title="gorilla", error="boom")

        assert event.event_id
        assert event.occurred_at.tzinfo is not None

    def test_ids_are_unique(self):
        assert AudioPlayerErrored().event_id != AudioPlayerErrored().event_id

    def test_is_frozen(self):
        event = AudioPlayerErrored(error="boom")

        with pytest.raises(ValidationError):
            event.error = "other"


# =============================================================================
# EventBus Tests
# =============================================================================


class OtherEvent(DomainEvent):
    pass


class TestEventBus:
    """Tests for the in-process event bus."""

    async def test_publish_calls_subscribed_handlers(self):
        bus = EventBus()
        received = []

        async def first(event):
            received.append(("first", event))

        async def second(event):
            received.append(("second", event))

        bus.subscribe(AudioPlayerErrored, first)
        bus.subscribe(AudioPlayerErrored, second)
        event = AudioPlayerErrored(error="boom")

        await bus.publish(event)

        assert sorted(name for name, _ in received) == ["first", "second"]
        assert all(e is event for _, e in received)

    async def test_publish_only_reaches_matching_type(self):
        bus = EventBus()
        received = []

        async def handler(event):
            received.append(event)

        bus.subscribe(OtherEvent, handler)

        await bus.publish(AudioPlayerErrored(error="boom"))

        assert received == []

    async def test_failing_handler_does_not_block_others(self, caplog):
        """Should log a failing handler and still run the rest."""
        bus = EventBus()
        received = []

        async def broken(event):
            raise RuntimeError("handler exploded")

        async def healthy(event):
            received.append(event)

        bus.subscribe(AudioPlayerErrored, broken)
        bus.subscribe(AudioPlayerErrored, healthy)

        with caplog.at_level(logging.ERROR):
            await bus.publish(AudioPlayerErrored(error="boom"))

        assert len(received) == 1
        assert "handler exploded" in caplog.text

    async def test_unsubscribe(self):
        bus = EventBus()
        received = []

        async def handler(event):
            received.append(event)

        bus.subscribe(AudioPlayerErrored, handler)
        bus.unsubscribe(AudioPlayerErrored, handler)

        await bus.publish(AudioPlayerErrored(error="boom"))

        assert received == []

    async def test_unsubscribe_unknown_handler_is_noop(self):
        async def handler(event):
            pass

        EventBus().unsubscribe(AudioPlayerErrored, handler)

    async def test_clear_removes_all_handlers(self):
        bus = EventBus()
        received = []

        async def handler(event):
            received.append(event)

        bus.subscribe(AudioPlayerErrored, handler)
        bus.clear()

        await bus.publish(AudioPlayerErrored(error="boom"))

        assert received == []


class TestLogAudioPlayerError:
    async def test_logs_error_and_resource_title(self, caplog):
        """Should log the error together with the resource title."""
        event = AudioPlayerErrored(guild_id=1, resource_title="gorilla", error="ffmpeg died")

        with caplog.at_level(logging.ERROR):
            await log_audio_player_error(event)

        assert "Error: ffmpeg died with resource gorilla" in caplog.text
