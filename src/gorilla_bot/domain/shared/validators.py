"""Shared validators for settings and domain models."""

from gorilla_bot.domain.shared.messages import ErrorMessages


def validate_discord_snowflake(value: int) -> int:
    """Validate a Discord snowflake ID.

    Discord snowflake IDs are 64-bit unsigned integers identifying users,
    guilds, channels and messages.

    Raises:
        ValueError: If the snowflake ID is out of range.
    """
    if value <= 0:
        raise ValueError(ErrorMessages.INVALID_SNOWFLAKE)
    if value >= 2**64:
        raise ValueError(ErrorMessages.SNOWFLAKE_TOO_LARGE)
    return value


def validate_non_empty_string(value: str, message: str = ErrorMessages.EMPTY_TRIGGER_TEXT) -> str:
    if not value or not value.strip():
        raise ValueError(message)
    return value
