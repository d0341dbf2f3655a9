"""Built-in slash command definitions.

``BUILTIN_COMMANDS`` is the explicit registration list read by the command
registry at startup. Add new commands here.
"""

from gorilla_bot.infrastructure.discord.commands import gorilla, roar

BUILTIN_COMMANDS = (
    gorilla.COMMAND,
    roar.COMMAND,
)

__all__ = ["BUILTIN_COMMANDS"]
