"""Raw keyboard input for the interactive terminal."""

from __future__ import annotations

import codecs
import os
import select
import sys
import termios
import tty
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import IO, Iterator


class Key(str, Enum):
    ENTER = "enter"
    UP = "up"
    DOWN = "down"
    BACKSPACE = "backspace"
    CHAR = "char"
    INTERRUPT = "interrupt"
    EOF = "eof"
    IGNORED = "ignored"


@dataclass(frozen=True)
class KeyEvent:
    key: Key
    char: str = ""


ESCAPE_SEQUENCES: dict[str, Key] = {
    "\x1b[A": Key.UP,
    "\x1b[B": Key.DOWN,
    "\x1bOA": Key.UP,
    "\x1bOB": Key.DOWN,
}


def decode_key(seq: str) -> KeyEvent:
    """Decode one key press (a character or an escape sequence)."""
    if seq in ("\r", "\n"):
        return KeyEvent(Key.ENTER)
    if seq in ("\x7f", "\x08"):
        return KeyEvent(Key.BACKSPACE)
    if seq == "\x03":
        return KeyEvent(Key.INTERRUPT)
    if seq in ("\x04", ""):
        return KeyEvent(Key.EOF)
    if seq.startswith("\x1b"):
        return KeyEvent(ESCAPE_SEQUENCES.get(seq, Key.IGNORED))
    if len(seq) == 1 and seq.isprintable():
        return KeyEvent(Key.CHAR, seq)
    return KeyEvent(Key.IGNORED)


def can_read_keys(stream: IO[str] | None = None) -> bool:
    """Whether raw key capture is available on this terminal."""
    stream = stream or sys.stdin
    return os.name == "posix" and stream.isatty()


@contextmanager
def cbreak(fd: int) -> Iterator[None]:
    """Put the terminal in cbreak mode for the duration of the block."""
    old = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


def split_keys(chunk: str) -> list[KeyEvent]:
    """Decode a chunk of input that may hold several key presses."""
    events: list[KeyEvent] = []
    i = 0
    while i < len(chunk):
        # Escape sequences are ESC plus two characters; the rest is one key each.
        size = 3 if chunk[i] == "\x1b" else 1
        events.append(decode_key(chunk[i : i + size]))
        i += size
    return events


class KeyReader:
    """Reads key presses from a file descriptor in cbreak mode.

    Bytes are decoded incrementally, so a multi-byte character split
    across two reads still arrives as one character.
    """

    def __init__(self, fd: int, chunk_size: int = 4) -> None:
        self.fd = fd
        self.chunk_size = chunk_size
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    def _read(self) -> str | None:
        """Read and decode one chunk; None at end of input."""
        data = os.read(self.fd, self.chunk_size)
        if not data:
            return None
        return self._decoder.decode(data)

    def read_keys(self) -> list[KeyEvent]:
        """Block for the next key press.

        Pasted text arrives in one read and yields one event per character.
        """
        seq = ""
        while not seq:
            chunk = self._read()
            if chunk is None:
                return [KeyEvent(Key.EOF)]
            seq = chunk
        # Arrow keys may arrive as a lone ESC followed by two more bytes.
        while seq.startswith("\x1b") and len(seq) < 3:
            ready, _, _ = select.select([self.fd], [], [], 0.05)
            if not ready:
                break
            chunk = self._read()
            if chunk is None:
                break
            seq += chunk
        return split_keys(seq)
