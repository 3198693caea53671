"""The command-line loop: input, history, dispatch and rendering."""

from __future__ import annotations

import logging
from enum import Enum

from portfolio_terminal.config import DEFAULT_PROMPT, AppConfig
from portfolio_terminal.content.provider import ContentProvider
from portfolio_terminal.core.dispatcher import Dispatcher
from portfolio_terminal.core.history import HistoryNavigator
from portfolio_terminal.core.models import NO_OUTPUT, CommandResult, LineKind
from portfolio_terminal.core.renderer import DisplaySurface, Renderer
from portfolio_terminal.utils.keys import Key, KeyEvent

logger = logging.getLogger(__name__)


class LoopState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"


class TerminalSession:
    """One terminal session: owns the input line, history and scrollback."""

    def __init__(
        self,
        provider: ContentProvider,
        surface: DisplaySurface | None = None,
        prompt: str = DEFAULT_PROMPT,
        welcome: str = "",
        footer: str = "",
    ) -> None:
        self.renderer = Renderer(surface, prompt)
        self.history = HistoryNavigator()
        self.dispatcher = Dispatcher(provider, on_clear=self.renderer.clear_unpinned)
        self.welcome = welcome
        self.footer = footer
        self.input_text = ""
        self.state = LoopState.IDLE

    @classmethod
    def create(
        cls,
        config: AppConfig,
        provider: ContentProvider,
        surface: DisplaySurface | None = None,
    ) -> TerminalSession:
        """Build a session from configuration."""
        return cls(
            provider,
            surface,
            prompt=config.terminal.prompt,
            welcome=config.terminal.welcome,
            footer=config.terminal.footer,
        )

    def start(self) -> None:
        """Show the pinned banner lines and an empty input line."""
        if self.welcome:
            self.renderer.pin(LineKind.WELCOME, self.welcome)
        if self.footer:
            self.renderer.pin(LineKind.FOOTER, self.footer)
        self.renderer.scroll_to_latest()
        self.renderer.redraw_input(self.input_text)

    def handle_key(self, event: KeyEvent) -> CommandResult | None:
        """React to one key press. Returns the result when a line was submitted."""
        if event.key is Key.ENTER:
            return self.submit()
        if event.key is Key.UP:
            value = self.history.previous()
            if value is not None:
                self.input_text = value
        elif event.key is Key.DOWN:
            self.input_text = self.history.next()
        elif event.key is Key.BACKSPACE:
            self.input_text = self.input_text[:-1]
        elif event.key is Key.CHAR:
            self.input_text += event.char
        else:
            return None
        self.renderer.redraw_input(self.input_text)
        return None

    def submit(self) -> CommandResult:
        """Submit the current input line."""
        self.state = LoopState.SUBMITTING
        try:
            raw = self.input_text
            line = raw.strip()
            self.renderer.echo(raw)

            if line:
                logger.debug("Submitted: %s", line)
                self.history.record(line)
                result = self.dispatcher.dispatch(line)
                self.renderer.append(result)
            else:
                result = NO_OUTPUT
            self.renderer.scroll_to_latest()

            self.input_text = ""
            self.renderer.redraw_input(self.input_text)
            return result
        finally:
            self.state = LoopState.IDLE

    def feed(self, line: str) -> CommandResult:
        """Type a whole line and press Enter."""
        self.input_text = line
        return self.submit()
