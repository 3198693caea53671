"""Data models for the command line loop."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from portfolio_terminal.core.dispatcher import Command

_line_ids = itertools.count(1)


class LineKind(str, Enum):
    """What produced a scrollback line."""

    WELCOME = "welcome"
    FOOTER = "footer"
    ECHO = "echo"
    OUTPUT = "output"


@dataclass(frozen=True)
class CommandResult:
    """Outcome of dispatching one input line.

    ``text is None`` marks a result with no visible output (``clear`` and
    empty input).
    """

    text: str | None = None
    command: Command | None = None
    args: tuple[str, ...] = ()

    @property
    def has_output(self) -> bool:
        return self.text is not None


NO_OUTPUT = CommandResult()


@dataclass
class ScrollbackLine:
    """A rendered unit of terminal output."""

    kind: LineKind
    text: str
    prompt: str = ""
    pinned: bool = False
    line_id: int = field(default_factory=lambda: next(_line_ids))
