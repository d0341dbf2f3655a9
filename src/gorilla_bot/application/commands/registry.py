"""Slash command descriptors and the startup-built registry that holds them."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from gorilla_bot.domain.shared.exceptions import RegistryFrozenError
from gorilla_bot.domain.shared.messages import LogTemplates

if TYPE_CHECKING:
    import discord

    from ...config.container import Container

logger = logging.getLogger(__name__)

DEFAULT_DESCRIPTION = "No description provided."

CommandCallback = Callable[["Container", "discord.Interaction"], Awaitable[None]]


@dataclass(frozen=True, slots=True)
class SlashCommand:
    """A chat-input command: its name, its description and what it does."""

    name: str
    description: str
    execute: CommandCallback


def _is_valid_definition(definition: Any) -> bool:
    name = getattr(definition, "name", None)
    execute = getattr(definition, "execute", None)
    return isinstance(name, str) and bool(name.strip()) and callable(execute)


class CommandRegistry:
    """Name-indexed collection of slash commands.

    Filled once at startup by :meth:`load`; read-only afterwards.
    """

    def __init__(self) -> None:
        self._commands: dict[str, SlashCommand] = {}
        self._loaded = False

    def load(self, definitions: Iterable[Any]) -> int:
        """Register every valid definition, in order.

        Definitions without a non-empty ``name`` or a callable ``execute`` are
        skipped with a warning, as are duplicate names.

        Returns:
            Number of commands registered.

        Raises:
            RegistryFrozenError: If the registry was already loaded.
        """
        if self._loaded:
            raise RegistryFrozenError()

        skipped = 0
        for definition in definitions:
            if not _is_valid_definition(definition):
                logger.warning(LogTemplates.COMMAND_DEFINITION_INVALID, definition)
                skipped += 1
                continue

            if definition.name in self._commands:
                logger.warning(LogTemplates.COMMAND_DUPLICATE, definition.name)
                skipped += 1
                continue

            command = (
                definition
                if isinstance(definition, SlashCommand)
                else SlashCommand(
                    name=definition.name,
                    description=getattr(definition, "description", "") or DEFAULT_DESCRIPTION,
                    execute=definition.execute,
                )
            )
            self._commands[command.name] = command
            logger.debug(LogTemplates.COMMAND_REGISTERED, command.name)

        self._loaded = True
        logger.info(LogTemplates.COMMANDS_LOADED_SUMMARY, len(self._commands), skipped)
        return len(self._commands)

    def get(self, name: str) -> SlashCommand | None:
        return self._commands.get(name)

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __iter__(self) -> Iterator[SlashCommand]:
        return iter(self._commands.values())

    def __len__(self) -> int:
        return len(self._commands)
