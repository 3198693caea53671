"""Session command history with up/down navigation."""

from __future__ import annotations


class HistoryNavigator:
    """In-memory command history with a navigation cursor.

    Entries are stored oldest first. The cursor ranges over
    ``0..len(entries)``; ``len(entries)`` is the "end" position, i.e. the
    new, empty input line. Consecutive duplicates are skipped, non-adjacent
    duplicates are kept.
    """

    def __init__(self) -> None:
        self._entries: list[str] = []
        self._cursor = 0

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> tuple[str, ...]:
        return tuple(self._entries)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def at_end(self) -> bool:
        return self._cursor == len(self._entries)

    def record(self, line: str) -> None:
        """Add a submitted line and reset the cursor to the end."""
        if line and (not self._entries or self._entries[-1] != line):
            self._entries.append(line)
        self._cursor = len(self._entries)

    def previous(self) -> str | None:
        """Move to an older entry and return it.

        At the oldest entry the cursor stays put and the same entry is
        returned again. Returns None when there is no history at all.
        """
        if not self._entries:
            return None
        if self._cursor > 0:
            self._cursor -= 1
        return self._entries[self._cursor]

    def next(self) -> str:
        """Move to a newer entry and return it, or "" once past the newest."""
        if self._cursor < len(self._entries) - 1:
            self._cursor += 1
            return self._entries[self._cursor]
        self._cursor = len(self._entries)
        return ""
