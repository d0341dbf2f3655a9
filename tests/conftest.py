from unittest.mock import AsyncMock, MagicMock

import discord
import pytest

from gorilla_bot.config.settings import VoiceSettings

# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture
def voice_settings():
    """Voice settings with short timeouts so timing tests stay fast."""
    return VoiceSettings(
        connect_timeout_seconds=0.2,
        playback_start_timeout_seconds=0.2,
        disconnect_delay_seconds=0.05,
    )


# ============================================================================
# Discord Object Fixtures
# ============================================================================


@pytest.fixture
def mock_voice_client():
    """Create a connected voice client that reports playing."""
    client = MagicMock(spec=discord.VoiceClient)
    client.is_playing.return_value = True
    client.is_paused.return_value = False
    client.disconnect = AsyncMock()
    return client


@pytest.fixture
def mock_guild():
    """Create a guild with no voice client attached yet."""
    guild = MagicMock(spec=discord.Guild)
    guild.id = 111111111
    guild.name = "Test Guild"
    guild.voice_client = None
    return guild


@pytest.fixture
def mock_voice_channel(mock_guild, mock_voice_client):
    """Create a voice channel whose connect() succeeds immediately."""
    channel = MagicMock(spec=discord.VoiceChannel)
    channel.id = 333333333
    channel.name = "Voice Channel"
    channel.mention = "<#333333333>"
    channel.guild = mock_guild

    async def connect(**kwargs):
        mock_guild.voice_client = mock_voice_client
        return mock_voice_client

    channel.connect = AsyncMock(side_effect=connect)
    return channel


@pytest.fixture
def mock_audio_player():
    """Create an audio player double whose playback always starts."""
    player = MagicMock()
    player.play_once = AsyncMock()
    player.stop = MagicMock()
    player.warm_up = AsyncMock(return_value=1024)
    return player


@pytest.fixture
def mock_interaction():
    """Create a chat-input interaction that has not been answered yet."""
    interaction = MagicMock(spec=discord.Interaction)
    interaction.type = discord.InteractionType.application_command
    interaction.data = {"name": "gorilla", "type": discord.AppCommandType.chat_input.value}
    interaction.guild = MagicMock()
    interaction.guild.id = 111111111
    interaction.user = MagicMock(spec=discord.Member)
    interaction.user.voice = None
    interaction.response = MagicMock()
    interaction.response.is_done = MagicMock(return_value=False)
    interaction.response.send_message = AsyncMock()
    interaction.followup = MagicMock()
    interaction.followup.send = AsyncMock()
    interaction.command = None
    return interaction

