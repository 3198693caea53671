"""Shared test fixtures."""

from __future__ import annotations

import pytest

from portfolio_terminal.config import AppConfig, ContentConfig, LoggingConfig, TerminalConfig
from portfolio_terminal.content.provider import PlaceholderProvider
from portfolio_terminal.core.session import TerminalSession
from portfolio_terminal.surfaces.html import HtmlSurface


class StubProvider:
    """Content provider returning fixed texts."""

    def help(self) -> str:
        return "HELP TEXT"

    def about(self) -> str:
        return "ABOUT TEXT"

    def projects(self) -> str:
        return "Link: [https://example.com/project]"

    def contact(self) -> str:
        return "GitHub: [https://github.com/example]"

    def clear(self) -> str:
        return ""


@pytest.fixture
def app_config(tmp_path):
    """Create a test configuration."""
    return AppConfig(
        terminal=TerminalConfig(prompt="guest@test:~$", welcome="Welcome!", footer="All rights reserved."),
        content=ContentConfig(source="portfolio_terminal.content.portfolio"),
        logging=LoggingConfig(level="DEBUG", file=str(tmp_path / "test.log")),
    )


@pytest.fixture
def provider():
    return StubProvider()


@pytest.fixture
def placeholder_provider():
    return PlaceholderProvider()


@pytest.fixture
def html_surface():
    return HtmlSurface()


@pytest.fixture
def session(app_config, provider, html_surface):
    session = TerminalSession.create(app_config, provider, html_surface)
    session.start()
    return session


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Point every config path at a temporary directory."""
    import portfolio_terminal.cli as cli_module
    import portfolio_terminal.config as cfg_module

    config_dir = tmp_path / "config"
    monkeypatch.setattr(cfg_module, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(cfg_module, "CONFIG_FILE", config_dir / "config.toml")
    monkeypatch.setattr(cli_module, "CONFIG_FILE", config_dir / "config.toml")
    for var in ("PORTFOLIO_TERMINAL_PROMPT", "PORTFOLIO_TERMINAL_CONTENT", "PORTFOLIO_TERMINAL_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("PORTFOLIO_TERMINAL_LOG_FILE", str(config_dir / "terminal.log"))
    return config_dir
