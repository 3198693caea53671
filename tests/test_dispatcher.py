"""Tests for command dispatch."""

from __future__ import annotations

import pytest

from portfolio_terminal.core.dispatcher import Command, Dispatcher, parse_line
from portfolio_terminal.core.models import NO_OUTPUT


@pytest.fixture
def cleared():
    return []


@pytest.fixture
def dispatcher(provider, cleared):
    return Dispatcher(provider, on_clear=lambda: cleared.append(True))


class TestCommandParse:
    @pytest.mark.parametrize(
        "token,expected",
        [
            ("help", Command.HELP),
            ("commands", Command.HELP),
            ("about", Command.ABOUT),
            ("projects", Command.PROJECTS),
            ("contact", Command.CONTACT),
            ("clear", Command.CLEAR),
            ("xyz", Command.UNKNOWN),
            ("unknown", Command.UNKNOWN),
        ],
    )
    def test_parse(self, token, expected):
        assert Command.parse(token) is expected

    def test_parse_line(self):
        assert parse_line("  Help   ME  ") == ["help", "me"]


class TestDispatch:
    def test_empty(self, dispatcher, cleared):
        assert dispatcher.dispatch("") is NO_OUTPUT
        assert dispatcher.dispatch("   ") is NO_OUTPUT
        assert cleared == []

    def test_help_and_commands(self, dispatcher):
        assert dispatcher.dispatch("help").text == "HELP TEXT"
        assert dispatcher.dispatch("commands").text == "HELP TEXT"

    def test_case_insensitive(self, dispatcher):
        assert dispatcher.dispatch("HELP") == dispatcher.dispatch("help")

    def test_content_commands(self, dispatcher):
        assert dispatcher.dispatch("about").text == "ABOUT TEXT"
        assert dispatcher.dispatch("projects").text == "Link: [https://example.com/project]"
        assert dispatcher.dispatch("contact").text == "GitHub: [https://github.com/example]"

    def test_args_are_carried(self, dispatcher):
        result = dispatcher.dispatch("about me please")
        assert result.command is Command.ABOUT
        assert result.args == ("me", "please")

    def test_unknown(self, dispatcher):
        result = dispatcher.dispatch("xyz")
        assert result.text == "Command not found: xyz. Type 'help' for available commands."
        assert result.command is Command.UNKNOWN

    def test_unknown_is_lowercased(self, dispatcher):
        result = dispatcher.dispatch("FooBar baz")
        assert result.text == "Command not found: foobar. Type 'help' for available commands."

    def test_clear_calls_back(self, dispatcher, cleared):
        result = dispatcher.dispatch("clear")
        assert not result.has_output
        assert result.command is Command.CLEAR
        assert cleared == [True]

    def test_clear_without_callback(self, provider):
        result = Dispatcher(provider).dispatch("clear")
        assert not result.has_output

    def test_placeholder_provider(self, placeholder_provider):
        dispatcher = Dispatcher(placeholder_provider)
        assert dispatcher.dispatch("about").text == "About information unavailable."
        assert "Commands module not loaded" in dispatcher.dispatch("help").text
