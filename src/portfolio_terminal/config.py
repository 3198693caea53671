"""Configuration management using TOML + environment variables."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomllib
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore[no-redef]

import tomli_w

CONFIG_DIR = Path.home() / ".portfolio-terminal"
CONFIG_FILE = CONFIG_DIR / "config.toml"

DEFAULT_PROMPT = "user@portfolio:~$"
DEFAULT_CONTENT_SOURCE = "portfolio_terminal.content.portfolio"
DEFAULT_WELCOME = "Welcome to my portfolio terminal! Type 'help' to see available commands."
DEFAULT_FOOTER = "© All rights reserved."


@dataclass
class TerminalConfig:
    prompt: str = DEFAULT_PROMPT
    welcome: str = DEFAULT_WELCOME
    footer: str = DEFAULT_FOOTER


@dataclass
class ContentConfig:
    source: str = DEFAULT_CONTENT_SOURCE


@dataclass
class LoggingConfig:
    level: str = "WARNING"
    file: str = "~/.portfolio-terminal/terminal.log"


@dataclass
class AppConfig:
    terminal: TerminalConfig = field(default_factory=TerminalConfig)
    content: ContentConfig = field(default_factory=ContentConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def ensure_config_dir() -> None:
    """Create config directory."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)


def load_config() -> AppConfig:
    """Load configuration from TOML file with env var overrides."""
    config = AppConfig()

    if CONFIG_FILE.exists():
        with open(CONFIG_FILE, "rb") as f:
            data = tomllib.load(f)

        terminal = data.get("terminal", {})
        config.terminal.prompt = terminal.get("prompt", config.terminal.prompt)
        config.terminal.welcome = terminal.get("welcome", config.terminal.welcome)
        config.terminal.footer = terminal.get("footer", config.terminal.footer)

        content = data.get("content", {})
        config.content.source = content.get("source", config.content.source)

        logging_cfg = data.get("logging", {})
        config.logging.level = logging_cfg.get("level", config.logging.level)
        config.logging.file = logging_cfg.get("file", config.logging.file)

    # Environment variable overrides
    if env_prompt := os.environ.get("PORTFOLIO_TERMINAL_PROMPT"):
        config.terminal.prompt = env_prompt
    if env_content := os.environ.get("PORTFOLIO_TERMINAL_CONTENT"):
        config.content.source = env_content
    if env_log_level := os.environ.get("PORTFOLIO_TERMINAL_LOG_LEVEL"):
        config.logging.level = env_log_level
    if env_log_file := os.environ.get("PORTFOLIO_TERMINAL_LOG_FILE"):
        config.logging.file = env_log_file

    return config


def save_config(config: AppConfig) -> None:
    """Save configuration to TOML file."""
    ensure_config_dir()

    data = {
        "terminal": {
            "prompt": config.terminal.prompt,
            "welcome": config.terminal.welcome,
            "footer": config.terminal.footer,
        },
        "content": {
            "source": config.content.source,
        },
        "logging": {
            "level": config.logging.level,
            "file": config.logging.file,
        },
    }

    with open(CONFIG_FILE, "wb") as f:
        tomli_w.dump(data, f)
