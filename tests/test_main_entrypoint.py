"""
Tests for main.py - Main Entry Point

Tests for the main entry point including:
- Logging configuration (JSON dictConfig with basicConfig fallback)
- Token validation
- Container and bot creation
- Exit codes for clean stop, Ctrl-C and fatal errors
"""

import json
import logging
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from pydantic import SecretStr

from gorilla_bot.config.settings import PROJECT_ROOT
from gorilla_bot.main import LOGGING_CONFIG_PATH, cli, main, setup_logging


class TestLoggingSetup:
    """Tests for logging configuration."""

    def _write_config(self, tmp_path, config) -> Path:
        path = tmp_path / "logging_config.json"
        path.write_text(config if isinstance(config, str) else json.dumps(config))
        return path

    def _make_valid_config(self) -> dict:
        return {
            "version": 1,
            "disable_existing_loggers": False,
            "handlers": {},
            "loggers": {"discord": {"level": "WARNING"}},
            "root": {"level": "INFO", "handlers": []},
        }

    def test_dictconfig_called_when_json_exists(self, tmp_path):
        """Should call dictConfig when the config file exists."""
        config = self._make_valid_config()
        path = self._write_config(tmp_path, config)

        with patch("logging.config.dictConfig") as mock_dc:
            setup_logging(config_path=path)

        mock_dc.assert_called_once_with(config)

    def test_fallback_to_basicconfig_when_json_missing(self, tmp_path):
        """Should fall back to basicConfig when the config file is missing."""
        with patch("logging.basicConfig") as mock_bc:
            setup_logging(config_path=tmp_path / "missing.json")

        mock_bc.assert_called_once()
        assert mock_bc.call_args.kwargs["level"] == logging.INFO

    def test_fallback_to_basicconfig_when_json_malformed(self, tmp_path):
        path = self._write_config(tmp_path, "{invalid json")

        with (
            patch("logging.config.dictConfig") as mock_dc,
            patch("logging.basicConfig") as mock_bc,
        ):
            setup_logging(config_path=path)

        mock_dc.assert_not_called()
        mock_bc.assert_called_once()

    def test_fallback_when_dictconfig_rejects_config(self, tmp_path):
        """Should fall back when the JSON parses but is not a valid dictConfig."""
        path = self._write_config(tmp_path, {"version": 1})

        with (
            patch("logging.config.dictConfig", side_effect=ValueError("bad")),
            patch("logging.basicConfig") as mock_bc,
        ):
            setup_logging(config_path=path)

        mock_bc.assert_called_once()

    def test_root_logger_level_overridden_by_settings(self, tmp_path):
        """Should override the root logger level with the provided log_level."""
        path = self._write_config(tmp_path, self._make_valid_config())
        root = logging.getLogger()
        previous = root.level

        try:
            with patch("logging.config.dictConfig"):
                setup_logging("DEBUG", config_path=path)

            assert root.level == logging.DEBUG
        finally:
            root.setLevel(previous)

    def test_default_config_path_is_project_root(self):
        """Should look for the config next to the project, not the working directory."""
        assert LOGGING_CONFIG_PATH == PROJECT_ROOT / "logging_config.json"

    def test_shipped_config_quiets_discord_logger(self):
        """Should keep the discord library at WARNING in the shipped config."""
        config = json.loads(LOGGING_CONFIG_PATH.read_text())

        assert config["loggers"]["discord"]["level"] == "WARNING"
        assert config["formatters"]["console"]["()"] == (
            "gorilla_bot.utils.logging.ColoredFormatter"
        )


def make_settings(token: str) -> MagicMock:
    settings = MagicMock()
    settings.discord_token = SecretStr(token)
    settings.log_level = "INFO"
    settings.environment = "test"
    return settings


class TestMainFunction:
    """Tests for main entry point function."""

    def test_main_returns_error_without_token(self, caplog):
        """Should return an error code when the Discord token is missing."""
        with (
            patch("gorilla_bot.config.settings.get_settings", return_value=make_settings("")),
            patch("gorilla_bot.main.setup_logging"),
            patch("gorilla_bot.infrastructure.discord.bot.create_bot") as mock_create_bot,
            caplog.at_level(logging.ERROR),
        ):
            exit_code = main()

        assert exit_code == 1
        assert "DISCORD_TOKEN" in caplog.text
        mock_create_bot.assert_not_called()

    def test_main_successful_run(self):
        """Should return 0 on a clean bot run."""
        settings = make_settings("test_token_123")
        mock_bot = MagicMock()
        mock_container = MagicMock()

        with (
            patch("gorilla_bot.config.settings.get_settings", return_value=settings),
            patch("gorilla_bot.main.setup_logging") as mock_setup_logging,
            patch(
                "gorilla_bot.config.container.create_container", return_value=mock_container
            ) as mock_create_container,
            patch(
                "gorilla_bot.infrastructure.discord.bot.create_bot", return_value=mock_bot
            ) as mock_create_bot,
        ):
            exit_code = main()

        assert exit_code == 0
        mock_setup_logging.assert_called_once_with("INFO")
        mock_create_container.assert_called_once_with(settings)
        mock_create_bot.assert_called_once_with(mock_container, settings)
        mock_bot.run_with_graceful_shutdown.assert_called_once_with("test_token_123")

    def test_main_handles_keyboard_interrupt(self):
        """Should return 0 on KeyboardInterrupt."""
        mock_bot = MagicMock()
        mock_bot.run_with_graceful_shutdown.side_effect = KeyboardInterrupt()

        with (
            patch(
                "gorilla_bot.config.settings.get_settings",
                return_value=make_settings("test_token_123"),
            ),
            patch("gorilla_bot.main.setup_logging"),
            patch("gorilla_bot.config.container.create_container"),
            patch("gorilla_bot.infrastructure.discord.bot.create_bot", return_value=mock_bot),
        ):
            exit_code = main()

        assert exit_code == 0

    def test_main_handles_exception(self):
        """Should return an error code on an unhandled exception."""
        mock_bot = MagicMock()
        mock_bot.run_with_graceful_shutdown.side_effect = RuntimeError("Bot crashed!")

        with (
            patch(
                "gorilla_bot.config.settings.get_settings",
                return_value=make_settings("test_token_123"),
            ),
            patch("gorilla_bot.main.setup_logging"),
            patch("gorilla_bot.config.container.create_container"),
            patch("gorilla_bot.infrastructure.discord.bot.create_bot", return_value=mock_bot),
        ):
            exit_code = main()

        assert exit_code == 1

    def test_cli_exits_with_main_status(self):
        with patch("gorilla_bot.main.main", return_value=1):
            with pytest.raises(SystemExit) as exc_info:
                cli()

        assert exc_info.value.code == 1
