"""Tests for the command-line loop."""

from __future__ import annotations

from portfolio_terminal.core.models import LineKind
from portfolio_terminal.core.session import LoopState, TerminalSession
from portfolio_terminal.utils.keys import Key, KeyEvent


def _type(session: TerminalSession, text: str) -> None:
    for ch in text:
        session.handle_key(KeyEvent(Key.CHAR, ch))


def _kinds(session: TerminalSession) -> list[LineKind]:
    return [line.kind for line in session.renderer.lines]


class TestStart:
    def test_pins_banner_and_footer(self, session):
        lines = session.renderer.lines
        assert [line.kind for line in lines] == [LineKind.WELCOME, LineKind.FOOTER]
        assert all(line.pinned for line in lines)
        assert session.state is LoopState.IDLE

    def test_no_banner_when_empty(self, provider, html_surface):
        session = TerminalSession(provider, html_surface)
        session.start()
        assert session.renderer.lines == []


class TestSubmit:
    def test_command_echo_and_output(self, session, html_surface):
        result = session.feed("about")
        assert result.text == "ABOUT TEXT"
        assert _kinds(session)[-2:] == [LineKind.ECHO, LineKind.OUTPUT]
        assert session.history.entries == ("about",)
        assert session.input_text == ""
        assert html_surface.input_value == ""

    def test_echo_keeps_untrimmed_text(self, session):
        session.feed("  help  ")
        echo = session.renderer.lines[-2]
        assert echo.text == "  help  "
        assert session.history.entries == ("help",)

    def test_empty_line_echoes_only(self, session):
        before = len(session.renderer.lines)
        result = session.feed("   ")
        assert not result.has_output
        assert len(session.renderer.lines) == before + 1
        assert session.renderer.lines[-1].kind is LineKind.ECHO
        assert session.history.entries == ()

    def test_unknown_command(self, session):
        result = session.feed("xyz")
        assert result.text == "Command not found: xyz. Type 'help' for available commands."

    def test_clear_keeps_pinned(self, session):
        session.feed("help")
        session.feed("about")
        session.feed("clear")
        assert _kinds(session) == [LineKind.WELCOME, LineKind.FOOTER]
        assert session.history.entries == ("help", "about", "clear")

    def test_state_returns_to_idle(self, session):
        seen = []

        class Spy:
            def show(self, line):
                seen.append(session.state)

            def remove(self, line):
                pass

            def scroll_to_bottom(self):
                pass

            def draw_input(self, prompt, text):
                pass

        session.renderer.surface = Spy()
        session.feed("help")
        assert LoopState.SUBMITTING in seen
        assert session.state is LoopState.IDLE

    def test_submission_resets_cursor(self, session):
        session.feed("help")
        session.feed("about")
        session.handle_key(KeyEvent(Key.UP))
        session.handle_key(KeyEvent(Key.UP))
        session.handle_key(KeyEvent(Key.ENTER))
        assert session.history.at_end
        assert session.history.entries == ("help", "about", "help")


class TestKeys:
    def test_typing_and_enter(self, session):
        _type(session, "HELP")
        assert session.input_text == "HELP"
        result = session.handle_key(KeyEvent(Key.ENTER))
        assert result.text == "HELP TEXT"

    def test_backspace(self, session, html_surface):
        _type(session, "helpx")
        session.handle_key(KeyEvent(Key.BACKSPACE))
        assert session.input_text == "help"
        assert html_surface.input_width == 5

    def test_up_down_navigation(self, session):
        session.feed("help")
        session.feed("about")
        session.handle_key(KeyEvent(Key.UP))
        assert session.input_text == "about"
        session.handle_key(KeyEvent(Key.UP))
        assert session.input_text == "help"
        session.handle_key(KeyEvent(Key.UP))
        assert session.input_text == "help"
        session.handle_key(KeyEvent(Key.DOWN))
        assert session.input_text == "about"
        session.handle_key(KeyEvent(Key.DOWN))
        assert session.input_text == ""

    def test_up_with_no_history_keeps_input(self, session):
        _type(session, "ab")
        session.handle_key(KeyEvent(Key.UP))
        assert session.input_text == "ab"

    def test_ignored_key(self, session):
        _type(session, "ab")
        assert session.handle_key(KeyEvent(Key.IGNORED)) is None
        assert session.input_text == "ab"


class TestWithoutSurface:
    def test_loop_runs_without_display(self, provider):
        session = TerminalSession(provider, None, welcome="Hi")
        session.start()
        assert session.feed("about").text == "ABOUT TEXT"
        assert session.renderer.lines == []
        assert session.history.entries == ("about",)
