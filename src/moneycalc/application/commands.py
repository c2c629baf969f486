# src/moneycalc/application/commands.py
"""
Command Registry - Named UI Actions

UI trigger sites (buttons) invoke actions by name through this registry so
they never reference the logic behind them, and one command can re-invoke
another (swap re-runs the exchange) without holding a direct reference.

Files that USE this module:
- moneycalc.app (registers the commands)
- moneycalc.application.exchange_commands (swap re-invokes the exchange command)
- moneycalc.adapters.tk.main_frame (buttons invoke commands by name)
- tests.test_commands (unit tests)

Files that this module USES:
- moneycalc.domain.errors (UnknownCommandError)
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Protocol, Union

from moneycalc.domain.errors import UnknownCommandError

log = logging.getLogger(__name__)


class CommandName(str, Enum):
    """Names the UI shell uses to trigger commands."""
    EXCHANGE_MONEY = "exchange money"
    SWAP = "swap"
    SHOW_INFO = "show info"

    def __str__(self) -> str:
        return self.value


class Command(Protocol):
    """A zero-argument action."""
    def execute(self) -> None:
        ...


Action = Union[Command, Callable[[], None]]


class CommandRegistry:
    """Maps command names to actions; re-registering a name replaces its action."""

    def __init__(self) -> None:
        self._commands: dict[str, Action] = {}

    @staticmethod
    def _key(name: Union[CommandName, str]) -> str:
        return name.value if isinstance(name, CommandName) else name

    def register(self, name: Union[CommandName, str], action: Action) -> None:
        key = self._key(name)
        if key in self._commands:
            log.debug("Replacing command %r", key)
        self._commands[key] = action

    def get(self, name: Union[CommandName, str]) -> Action:
        key = self._key(name)
        try:
            return self._commands[key]
        except KeyError:
            raise UnknownCommandError(f"No command registered as {key!r}") from None

    def invoke(self, name: Union[CommandName, str]) -> None:
        """
        Run the action bound to ``name`` on the calling thread.

        Raises:
            UnknownCommandError: If nothing is registered under ``name``
        """
        action = self.get(name)
        log.debug("Invoking command %r", self._key(name))
        execute = getattr(action, "execute", None)
        if execute is not None:
            execute()
        else:
            action()

    def names(self) -> list[str]:
        return list(self._commands)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return self._key(name) in self._commands
