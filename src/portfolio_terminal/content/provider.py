"""Content provider loading with placeholder fallback."""

from __future__ import annotations

import importlib
import importlib.util
import logging
from pathlib import Path
from types import ModuleType
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)

PLACEHOLDER_TEXT: dict[str, str] = {
    "help": "Available commands: help, about, projects, contact, clear (Commands module not loaded)",
    "about": "About information unavailable.",
    "projects": "Project information unavailable.",
    "contact": "Contact information unavailable.",
    "clear": "",
}


@runtime_checkable
class ContentProvider(Protocol):
    """Supplies the text shown for each content command."""

    def help(self) -> str: ...

    def about(self) -> str: ...

    def projects(self) -> str: ...

    def contact(self) -> str: ...

    def clear(self) -> str: ...


def unavailable_text(name: str) -> str:
    return f"{name.capitalize()} command not available."


class ModuleProvider:
    """Content provider backed by a module exposing one function per command.

    A missing or failing function only affects its own command.
    """

    def __init__(self, module: ModuleType) -> None:
        self.module = module

    def _call(self, name: str) -> str:
        func = getattr(self.module, name, None)
        if not callable(func):
            logger.warning("Content module %s has no %s()", self.module.__name__, name)
            return unavailable_text(name)
        try:
            return str(func())
        except Exception:
            logger.exception("Content function %s() failed", name)
            return unavailable_text(name)

    def help(self) -> str:
        return self._call("help")

    def about(self) -> str:
        return self._call("about")

    def projects(self) -> str:
        return self._call("projects")

    def contact(self) -> str:
        return self._call("contact")

    def clear(self) -> str:
        return self._call("clear")


class PlaceholderProvider:
    """Fixed texts used when no content module could be loaded."""

    def help(self) -> str:
        return PLACEHOLDER_TEXT["help"]

    def about(self) -> str:
        return PLACEHOLDER_TEXT["about"]

    def projects(self) -> str:
        return PLACEHOLDER_TEXT["projects"]

    def contact(self) -> str:
        return PLACEHOLDER_TEXT["contact"]

    def clear(self) -> str:
        return PLACEHOLDER_TEXT["clear"]


def _import_source(source: str) -> ModuleType:
    """Import a dotted module name or a path to a ``.py`` file."""
    if source.endswith(".py"):
        path = Path(source).expanduser().resolve()
        spec = importlib.util.spec_from_file_location(f"portfolio_content_{path.stem}", path)
        if spec is None or spec.loader is None:
            raise ImportError(f"Cannot load content file: {path}")
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module
    return importlib.import_module(source)


def load_provider(source: str | None) -> ContentProvider:
    """Load the content provider once, falling back to placeholders."""
    if not source:
        logger.warning("No content source configured. Using placeholders.")
        return PlaceholderProvider()
    try:
        module = _import_source(source)
    except Exception:
        logger.warning("Could not load content from %s. Using placeholders.", source, exc_info=True)
        return PlaceholderProvider()
    logger.info("Content loaded: %s", source)
    return ModuleProvider(module)
