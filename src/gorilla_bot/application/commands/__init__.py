"""Slash command descriptors and registry."""

from gorilla_bot.application.commands.registry import CommandRegistry, SlashCommand

__all__ = [
    "CommandRegistry",
    "SlashCommand",
]
