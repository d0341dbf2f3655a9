"""Discord cogs - event listeners and slash command dispatch."""

from gorilla_bot.infrastructure.discord.cogs.command_cog import CommandCog
from gorilla_bot.infrastructure.discord.cogs.event_cog import EventCog

__all__ = [
    "CommandCog",
    "EventCog",
]
