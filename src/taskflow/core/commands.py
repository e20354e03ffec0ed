# src/taskflow/core/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

CommandHandler = Callable[[], None]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Command:
    key: str
    name: str
    help_text: str
    handler: CommandHandler


class CommandRegistry:
    """Single-keystroke command registry used by the controller (a, l, q)."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}

    def __contains__(self, key: str) -> bool:
        return key in self._commands

    def register(self, key: str, name: str, handler: CommandHandler, help_text: str) -> None:
        if len(key) != 1:
            raise ValueError(f"command key must be a single character, got {key!r}")
        if key in self._commands:
            raise ValueError(f"command key {key!r} is already bound to {self._commands[key].name}")
        self._commands[key] = Command(key=key, name=name, help_text=help_text, handler=handler)

    def get(self, key: str) -> Command | None:
        return self._commands.get(key)

    def handle(self, key: str) -> bool:
        """
        Run the command bound to `key`.
        Returns False if nothing is bound to it.
        """
        command = self._commands.get(key)
        if command is None:
            return False
        logger.debug("Command %s (%s)", command.name, key)
        command.handler()
        return True

    def keys(self) -> list[str]:
        return list(self._commands)

    def menu(self) -> list[tuple[str, str]]:
        return [(c.key, c.help_text) for c in self._commands.values()]
