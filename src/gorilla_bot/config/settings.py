"""Application Settings and Configuration

Pydantic-based settings management using environment variables.
Settings are loaded from environment variables with support for .env files,
type validation, and sensible defaults. Nested settings are frozen after
initialization.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..domain.shared.messages import ErrorMessages
from ..domain.shared.validators import validate_discord_snowflake, validate_non_empty_string

PROJECT_ROOT = Path(__file__).resolve().parents[3]


class DiscordSettings(BaseModel):
    """Discord client configuration."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    sync_on_startup: bool = False
    test_guild_ids: tuple[int, ...] = Field(
        default_factory=tuple, validation_alias=AliasChoices("test_guild_ids", "test_guilds")
    )

    @field_validator("test_guild_ids", mode="before")
    @classmethod
    def validate_snowflake_ids(cls, v: tuple[int, ...] | list[int]) -> tuple[int, ...]:
        """Validate Discord snowflake IDs and convert lists to tuples."""
        # JSON arrays from env vars arrive as lists
        if isinstance(v, list):
            v = tuple(v)
        for snowflake in v:
            validate_discord_snowflake(snowflake)
        return v


class VoiceSettings(BaseModel):
    """Voice trigger and playback configuration."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    trigger_text: str = Field(
        default="!gorilla", validation_alias=AliasChoices("trigger_text", "trigger")
    )
    audio_path: Path = Field(
        default=PROJECT_ROOT / "assets" / "gorilla.mp3",
        validation_alias=AliasChoices("audio_path", "audio_file"),
    )
    connect_timeout_seconds: float = Field(default=30.0, gt=0, le=120)
    playback_start_timeout_seconds: float = Field(default=5.0, gt=0, le=60)
    disconnect_delay_seconds: float = Field(default=5.0, ge=0, le=3600)
    volume: float = Field(default=1.0, ge=0.0, le=2.0)
    auto_join: bool = True
    warm_up_on_ready: bool = True

    @field_validator("trigger_text")
    @classmethod
    def validate_trigger_text(cls, v: str) -> str:
        return validate_non_empty_string(v, ErrorMessages.EMPTY_TRIGGER_TEXT)

    @field_validator("audio_path")
    @classmethod
    def resolve_audio_path(cls, v: Path) -> Path:
        """Anchor relative paths at the project root, not the working directory."""
        return v if v.is_absolute() else PROJECT_ROOT / v


class Settings(BaseSettings):
    """Application settings container.

    Automatically loads configuration from environment variables.

    Environment variable naming:
    - DISCORD_TOKEN (the bot token, required to run)
    - ENVIRONMENT, LOG_LEVEL (top-level)
    - DISCORD__SYNC_ON_STARTUP, DISCORD__TEST_GUILD_IDS (nested, JSON list)
    - VOICE__TRIGGER_TEXT, VOICE__AUDIO_PATH, VOICE__CONNECT_TIMEOUT_SECONDS, ...
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Literal["development", "production", "test"] = "development"
    log_level: str = "INFO"

    discord_token: SecretStr = Field(
        default=SecretStr(""),
        validation_alias=AliasChoices("discord_token", "bot_token"),
    )

    discord: DiscordSettings = Field(default_factory=DiscordSettings)
    voice: VoiceSettings = Field(default_factory=VoiceSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(
                ErrorMessages.INVALID_LOG_LEVEL.format(level=v, valid_levels=valid_levels)
            )
        return v_upper


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are loaded from:
    1. .env file (if present)
    2. Environment variables
    3. Default values
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()
