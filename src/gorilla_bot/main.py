#!/usr/bin/env python3
"""Main entry point for the gorilla bot."""

from __future__ import annotations

import json
import logging
import logging.config
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

from gorilla_bot.config.settings import PROJECT_ROOT
from gorilla_bot.domain.shared.messages import ErrorMessages, LogTemplates

if TYPE_CHECKING:
    from gorilla_bot.config.settings import Settings

LOGGING_CONFIG_PATH = PROJECT_ROOT / "logging_config.json"
FALLBACK_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

logger = logging.getLogger(__name__)


def _read_logging_config(path: Path) -> dict[str, Any] | None:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        return None


def setup_logging(log_level: str = "INFO", config_path: Path | None = None) -> None:
    """Configure logging from the JSON dictConfig file.

    Falls back to a plain console format when the file is missing or invalid.
    ``log_level`` always wins over the root level in the file.
    """
    path = config_path or LOGGING_CONFIG_PATH
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    config = _read_logging_config(path)
    try:
        if config is None:
            raise ValueError(path)
        logging.config.dictConfig(config)
    except ValueError:
        logging.basicConfig(level=level, format=FALLBACK_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        logger.warning("Could not load %s, falling back to basic config", path)

    logging.getLogger().setLevel(level)


def run_bot(settings: Settings, token: str) -> int:
    """Build the application context and bot, then block until the bot stops."""
    from gorilla_bot.config.container import create_container
    from gorilla_bot.infrastructure.discord.bot import create_bot

    bot = create_bot(create_container(settings), settings)

    logger.info(LogTemplates.BOT_STARTING_RUN)
    try:
        bot.run_with_graceful_shutdown(token)
    except KeyboardInterrupt:
        logger.info(LogTemplates.BOT_KEYBOARD_INTERRUPT)
    except Exception as e:
        logger.exception(LogTemplates.BOT_FATAL_ERROR, e)
        return 1
    else:
        logger.info(LogTemplates.BOT_STOPPED)
    return 0


def main() -> int:
    from gorilla_bot.config.settings import get_settings

    settings = get_settings()
    setup_logging(settings.log_level)

    token = settings.discord_token.get_secret_value()
    if not token:
        logger.error(ErrorMessages.DISCORD_TOKEN_REQUIRED)
        return 1

    logger.info(LogTemplates.BOT_STARTING, settings.environment)
    return run_bot(settings, token)


def cli() -> None:
    """Console script entry point (``gorilla-bot``)."""
    sys.exit(main())


if __name__ == "__main__":
    cli()  # pragma: no cover
