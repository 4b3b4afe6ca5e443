"""Command table and dispatch: one input line -> one vault operation."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from notevault import operations
from notevault.config import ConfigError
from notevault.session import VaultError, VaultSession
from notevault.sync import push_changes

logger = logging.getLogger(__name__)

FAREWELL = "Goodbye!"

# Handler: (session, *positional_args) -> anything (ignored)
CommandHandler = Callable[..., object]


@dataclass(frozen=True)
class CommandSpec:
    """How a command is invoked and what it runs."""

    names: tuple[str, ...]
    handler: CommandHandler | None
    args: tuple[str, ...] = ()
    summary: str = ""
    terminates: bool = False

    @property
    def arity(self) -> int:
        return len(self.args)

    def usage(self, name: str | None = None) -> str:
        parts = [name or self.names[0], *(f"<{a}>" for a in self.args)]
        return " ".join(parts)


def print_help(session: VaultSession) -> None:
    print("Available commands:")
    for spec in _SPECS:
        left = " or ".join(spec.names) if len(spec.names) > 1 else spec.usage()
        print(f"  {left:<18}: {spec.summary}")


_SPECS = [
    CommandSpec(("open",), operations.open_app, summary="Launch the notes app"),
    CommandSpec(("new",), operations.create_note, ("name",),
                summary="Create a new note (refuses if it already exists)"),
    CommandSpec(("write",), operations.edit_note, ("name",), summary="Edit an existing note"),
    CommandSpec(("delete",), operations.delete_note, ("name",), summary="Delete an existing note"),
    CommandSpec(("list",), operations.list_notes, summary="List all notes"),
    CommandSpec(("search",), operations.search_notes, ("keyword",),
                summary="Find notes whose name contains the keyword"),
    CommandSpec(("vault",), operations.show_vault_path, summary="Show the current vault location"),
    CommandSpec(("setvault",), operations.set_vault_path, ("path",),
                summary="Change and save the vault path"),
    CommandSpec(("push",), push_changes, summary="Push changes to the git remote"),
    CommandSpec(("help",), print_help, summary="Show this help"),
    CommandSpec(("quit", "exit"), None, summary="Quit", terminates=True),
]

COMMANDS: dict[str, CommandSpec] = {name: spec for spec in _SPECS for name in spec.names}


class Dispatcher:
    """Routes tokenized input lines to command handlers."""

    def __init__(
        self, session: VaultSession, commands: dict[str, CommandSpec] | None = None
    ) -> None:
        self.session = session
        self.commands = commands if commands is not None else COMMANDS

    def dispatch(self, line: str) -> bool:
        """Execute one input line. Returns False once the session should end."""
        tokens = line.split()
        if not tokens:
            return True

        name, args = tokens[0], tokens[1:]
        spec = self.commands.get(name)
        if spec is None:
            print(f"Unknown command: {name}")
            return True
        if len(args) < spec.arity:
            print(f"Usage: {spec.usage(name)}")
            return True
        if spec.terminates:
            print(FAREWELL)
            return False

        logger.debug("Dispatching %s %s", name, args[: spec.arity])
        try:
            spec.handler(self.session, *args[: spec.arity])
        except (ConfigError, VaultError, OSError, ValueError) as e:
            logger.debug("Command %s failed", name, exc_info=True)
            print(f"Error: {e}")
        return True
