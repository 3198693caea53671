"""Scrollback model and its display surface."""

from __future__ import annotations

import logging
from typing import Protocol

from portfolio_terminal.config import DEFAULT_PROMPT
from portfolio_terminal.core.models import CommandResult, LineKind, ScrollbackLine

logger = logging.getLogger(__name__)


class DisplaySurface(Protocol):
    """Where scrollback lines and the input line are drawn."""

    def show(self, line: ScrollbackLine) -> None: ...

    def remove(self, line: ScrollbackLine) -> None: ...

    def scroll_to_bottom(self) -> None: ...

    def draw_input(self, prompt: str, text: str) -> None: ...


class Renderer:
    """Append-only scrollback with pinned lines that survive ``clear``.

    Every operation that touches the display is a no-op when no surface is
    attached, so a partially initialised front end never raises.
    """

    def __init__(self, surface: DisplaySurface | None = None, prompt: str = DEFAULT_PROMPT) -> None:
        self.surface = surface
        self.prompt = prompt
        self.lines: list[ScrollbackLine] = []

    def _add(self, line: ScrollbackLine) -> ScrollbackLine | None:
        if self.surface is None:
            logger.debug("No display surface; dropping %s line", line.kind.value)
            return None
        self.lines.append(line)
        self.surface.show(line)
        return line

    def pin(self, kind: LineKind, text: str) -> ScrollbackLine | None:
        """Add a line that is never removed by ``clear``."""
        return self._add(ScrollbackLine(kind, text, pinned=True))

    def echo(self, raw: str) -> ScrollbackLine | None:
        """Show the submitted text verbatim after the prompt marker."""
        return self._add(ScrollbackLine(LineKind.ECHO, raw, prompt=self.prompt))

    def append(self, result: CommandResult) -> ScrollbackLine | None:
        """Show a command result; results without output add nothing."""
        if not result.has_output:
            return None
        line = self._add(ScrollbackLine(LineKind.OUTPUT, result.text or ""))
        self.scroll_to_latest()
        return line

    def clear_unpinned(self) -> None:
        """Remove every unpinned line, keeping pinned lines in order."""
        if self.surface is None:
            return
        removed = [line for line in self.lines if not line.pinned]
        self.lines = [line for line in self.lines if line.pinned]
        for line in removed:
            self.surface.remove(line)
        logger.debug("Cleared %d lines", len(removed))
        self.scroll_to_latest()

    def scroll_to_latest(self) -> None:
        if self.surface is None:
            return
        self.surface.scroll_to_bottom()

    def redraw_input(self, text: str) -> None:
        if self.surface is None:
            return
        self.surface.draw_input(self.prompt, text)
