"""Terminal display surface using rich."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.style import Style
from rich.text import Text

from portfolio_terminal.core.models import LineKind, ScrollbackLine
from portfolio_terminal.utils.formatting import split_links

logger = logging.getLogger(__name__)

PROMPT_STYLE = "bold green"
LINE_STYLES: dict[LineKind, str] = {
    LineKind.WELCOME: "bold cyan",
    LineKind.FOOTER: "dim",
    LineKind.ECHO: "",
    LineKind.OUTPUT: "",
}

_ERASE_LINE = "\r\x1b[2K"


def render_line(line: ScrollbackLine) -> Text:
    """Build the rich text for a scrollback line.

    Everything goes through ``Text`` rather than console markup, so typed
    input such as ``[bold]`` is shown literally.
    """
    if line.kind is LineKind.ECHO:
        text = Text(line.prompt, style=PROMPT_STYLE)
        text.append(" ")
        text.append(line.text)
        return text

    text = Text(style=LINE_STYLES[line.kind])
    for segment in split_links(line.text):
        if segment.is_link:
            text.append(segment.text, style=Style(link=segment.url, underline=True, color="blue"))
        else:
            text.append(segment.text)
    return text


class ConsoleSurface:
    """Prints scrollback lines to a terminal.

    With ``live_input`` the input line is redrawn in place after every key
    press; otherwise only scrollback lines are printed.
    """

    def __init__(self, console: Console | None = None, live_input: bool = False) -> None:
        self.console = console or Console(highlight=False)
        self.live_input = live_input
        self._lines: list[ScrollbackLine] = []
        self._dirty = False
        self._input: Text | None = None

    def _erase_input(self) -> None:
        if self.live_input and self._input is not None:
            self.console.file.write(_ERASE_LINE)
            self._input = None

    def show(self, line: ScrollbackLine) -> None:
        self._lines.append(line)
        self._erase_input()
        self.console.print(render_line(line), soft_wrap=True)

    def remove(self, line: ScrollbackLine) -> None:
        try:
            self._lines.remove(line)
        except ValueError:
            logger.debug("Line %d not on screen", line.line_id)
            return
        self._dirty = True

    def scroll_to_bottom(self) -> None:
        # The terminal keeps the newest line in view; only a clear needs a repaint.
        if not self._dirty:
            return
        self._dirty = False
        if not self.console.is_terminal:
            return
        self._input = None
        self.console.clear()
        for line in self._lines:
            self.console.print(render_line(line), soft_wrap=True)

    def draw_input(self, prompt: str, text: str) -> None:
        if not self.live_input:
            return
        self.console.file.write(_ERASE_LINE)
        rendered = Text(prompt, style=PROMPT_STYLE)
        rendered.append(" ")
        rendered.append(text)
        self.console.print(rendered, end="", soft_wrap=True)
        self.console.file.flush()
        self._input = rendered

    @property
    def lines(self) -> list[ScrollbackLine]:
        return list(self._lines)
