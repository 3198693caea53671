"""CLI entry point using typer."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from portfolio_terminal import __version__
from portfolio_terminal.config import (
    CONFIG_FILE,
    AppConfig,
    ensure_config_dir,
    load_config,
    save_config,
)
from portfolio_terminal.content.provider import load_provider
from portfolio_terminal.core.renderer import DisplaySurface
from portfolio_terminal.core.session import TerminalSession
from portfolio_terminal.surfaces.console import ConsoleSurface
from portfolio_terminal.surfaces.html import HtmlSurface
from portfolio_terminal.utils.keys import Key, KeyReader, can_read_keys, cbreak

app = typer.Typer(
    name="portfolio-terminal",
    help="Browse a portfolio through a simulated command line.",
    add_completion=False,
)
console = Console(highlight=False)

logger = logging.getLogger(__name__)


def _setup_logging(config: AppConfig, verbose: bool = False) -> None:
    """Send package logs to the configured log file (and stderr with --verbose).

    Handlers sit on the package logger, replacing any from an earlier call,
    so the setup applies even when the root logger is already configured.
    """
    log_path = Path(config.logging.file).expanduser().resolve()
    log_path.parent.mkdir(parents=True, exist_ok=True)

    pkg_logger = logging.getLogger("portfolio_terminal")
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    handlers: list[logging.Handler] = [
        logging.FileHandler(str(log_path), encoding="utf-8"),
        *([logging.StreamHandler()] if verbose else []),
    ]
    for handler in handlers:
        handler.setFormatter(formatter)
        pkg_logger.addHandler(handler)
    pkg_logger.setLevel(logging.DEBUG if verbose else getattr(logging, config.logging.level.upper(), logging.WARNING))


def _build_session(config: AppConfig, content: str | None, surface: DisplaySurface) -> TerminalSession:
    provider = load_provider(content or config.content.source)
    return TerminalSession.create(config, provider, surface)


@app.command()
def run(
    content: str = typer.Option(None, "--content", "-c", help="Content module or .py file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log to stderr as well"),
) -> None:
    """Start an interactive terminal session."""
    config = load_config()
    _setup_logging(config, verbose)

    interactive = can_read_keys()
    surface = ConsoleSurface(console, live_input=interactive)
    session = _build_session(config, content, surface)
    session.start()
    logger.info("Session started (interactive=%s)", interactive)

    if not interactive:
        for line in sys.stdin:
            session.feed(line.rstrip("\n"))
        return

    fd = sys.stdin.fileno()
    reader = KeyReader(fd)
    try:
        with cbreak(fd):
            while True:
                for event in reader.read_keys():
                    if event.key in (Key.INTERRUPT, Key.EOF):
                        raise KeyboardInterrupt
                    session.handle_key(event)
    except KeyboardInterrupt:
        pass
    finally:
        console.print("\n[dim]Session ended.[/dim]")


@app.command(name="exec")
def exec_lines(
    lines: list[str] = typer.Argument(..., help="Command lines to submit in order"),
    content: str = typer.Option(None, "--content", "-c", help="Content module or .py file"),
) -> None:
    """Submit command lines and print the scrollback."""
    config = load_config()
    _setup_logging(config)
    session = _build_session(config, content, ConsoleSurface(console))
    for line in lines:
        session.feed(line)


@app.command()
def export(
    lines: list[str] = typer.Argument(..., help="Command lines to submit in order"),
    output: Path = typer.Option(..., "--output", "-o", help="HTML file to write"),
    content: str = typer.Option(None, "--content", "-c", help="Content module or .py file"),
) -> None:
    """Submit command lines and write the session as an HTML page."""
    config = load_config()
    _setup_logging(config)
    surface = HtmlSurface()
    session = _build_session(config, content, surface)
    session.start()
    for line in lines:
        session.feed(line)

    try:
        output.write_text(surface.document(), encoding="utf-8")
    except OSError as e:
        console.print(f"[red]Cannot write {output}: {e}[/red]")
        raise typer.Exit(1)
    console.print(f"[green]Transcript written to {output}[/green]")


@app.command()
def config(
    key: str = typer.Argument(None, help="Config key (e.g., terminal.prompt)"),
    value: str = typer.Argument(None, help="New value"),
) -> None:
    """View or modify configuration."""
    cfg = load_config()

    if key is None:
        # Show all config
        table = Table(title="Configuration")
        table.add_column("Key", style="cyan")
        table.add_column("Value", style="green")

        table.add_row("terminal.prompt", cfg.terminal.prompt)
        table.add_row("terminal.welcome", cfg.terminal.welcome)
        table.add_row("terminal.footer", cfg.terminal.footer)
        table.add_row("content.source", cfg.content.source)
        table.add_row("logging.level", cfg.logging.level)
        table.add_row("logging.file", cfg.logging.file)

        console.print(table)
        if not CONFIG_FILE.exists():
            console.print("[dim]Defaults shown; no config file yet.[/dim]")
        return

    if value is None:
        console.print("[red]Usage: portfolio-terminal config <key> <value>[/red]")
        raise typer.Exit(1)

    parts = key.split(".")
    if len(parts) != 2:
        console.print("[red]Key format: section.key (e.g., terminal.prompt)[/red]")
        raise typer.Exit(1)

    section, attr = parts
    section_map = {"terminal": cfg.terminal, "content": cfg.content, "logging": cfg.logging}

    if section not in section_map:
        console.print(f"[red]Unknown section: {section}[/red]")
        raise typer.Exit(1)

    obj = section_map[section]
    if not hasattr(obj, attr):
        console.print(f"[red]Unknown key: {key}[/red]")
        raise typer.Exit(1)

    setattr(obj, attr, value)
    ensure_config_dir()
    save_config(cfg)
    console.print(f"{key} = {value}", style="green", markup=False)


@app.command()
def logs(
    lines: int = typer.Option(50, "--lines", "-n", help="Number of lines"),
) -> None:
    """View session logs."""
    log_path = Path(load_config().logging.file).expanduser().resolve()
    if not log_path.exists():
        console.print("[dim]No log file found.[/dim]")
        return

    content = log_path.read_text(encoding="utf-8")
    log_lines = content.strip().split("\n")
    for line in log_lines[-lines:]:
        console.print(line, markup=False)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"portfolio-terminal v{__version__}")
    console.print(f"Python: {sys.version.split()[0]}")
    console.print(f"Config: {CONFIG_FILE}", markup=False)


if __name__ == "__main__":
    app()
