"""Command parsing and dispatch to content handlers."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable

from portfolio_terminal.content.provider import ContentProvider
from portfolio_terminal.core.models import NO_OUTPUT, CommandResult

logger = logging.getLogger(__name__)

NOT_FOUND_TEMPLATE = "Command not found: {command}. Type 'help' for available commands."


class Command(str, Enum):
    HELP = "help"
    ABOUT = "about"
    PROJECTS = "projects"
    CONTACT = "contact"
    CLEAR = "clear"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, token: str) -> Command:
        """Map a lower-case command token to its command."""
        return COMMAND_ALIASES.get(token, cls.UNKNOWN)


COMMAND_ALIASES: dict[str, Command] = {
    "help": Command.HELP,
    "commands": Command.HELP,
    "about": Command.ABOUT,
    "projects": Command.PROJECTS,
    "contact": Command.CONTACT,
    "clear": Command.CLEAR,
}


def parse_line(raw: str) -> list[str]:
    """Lower-case a raw input line and split it into non-empty tokens."""
    return raw.lower().split()


class Dispatcher:
    """Turn input lines into command results.

    ``on_clear`` is called for the ``clear`` command; every other command
    is a pure lookup against the content provider.
    """

    def __init__(self, provider: ContentProvider, on_clear: Callable[[], None] | None = None) -> None:
        self.provider = provider
        self._on_clear = on_clear
        self._handlers: dict[Command, Callable[[str, tuple[str, ...]], CommandResult]] = {
            Command.HELP: self._help,
            Command.ABOUT: self._about,
            Command.PROJECTS: self._projects,
            Command.CONTACT: self._contact,
            Command.CLEAR: self._clear,
            Command.UNKNOWN: self._unknown,
        }
        missing = set(Command) - set(self._handlers)
        assert not missing, f"No handler for: {sorted(c.value for c in missing)}"

    def dispatch(self, raw: str) -> CommandResult:
        """Dispatch one input line."""
        tokens = parse_line(raw)
        if not tokens:
            return NO_OUTPUT

        name, args = tokens[0], tuple(tokens[1:])
        command = Command.parse(name)
        logger.debug("Dispatching %r as %s (args=%s)", name, command.name, args)
        return self._handlers[command](name, args)

    # --- Handlers ---

    def _help(self, name: str, args: tuple[str, ...]) -> CommandResult:
        return CommandResult(self.provider.help(), Command.HELP, args)

    def _about(self, name: str, args: tuple[str, ...]) -> CommandResult:
        return CommandResult(self.provider.about(), Command.ABOUT, args)

    def _projects(self, name: str, args: tuple[str, ...]) -> CommandResult:
        return CommandResult(self.provider.projects(), Command.PROJECTS, args)

    def _contact(self, name: str, args: tuple[str, ...]) -> CommandResult:
        return CommandResult(self.provider.contact(), Command.CONTACT, args)

    def _clear(self, name: str, args: tuple[str, ...]) -> CommandResult:
        if self._on_clear is not None:
            self._on_clear()
        return CommandResult(None, Command.CLEAR, args)

    def _unknown(self, name: str, args: tuple[str, ...]) -> CommandResult:
        logger.info("Unknown command: %s", name)
        return CommandResult(NOT_FOUND_TEMPLATE.format(command=name), Command.UNKNOWN, args)
