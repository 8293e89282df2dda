"""Keyboard input with a timeout, so the loop can tick while no key is pressed.

A :class:`KeySource` returns raw key sequences; :func:`decode_key` maps them
to the names :class:`~pomo_tui.app.App` understands.
"""

from __future__ import annotations

import codecs
import os
import sys
import time
from abc import ABC, abstractmethod
from typing import Callable

import click

if sys.platform == "win32":
    import msvcrt
else:
    import select
    import termios
    import tty

TICK_SECONDS = 0.1

# Windows consoles report special keys as a prefix character plus a scan code.
_SCAN_PREFIXES = ("\x00", "\xe0")

_KEY_NAMES: dict[str, str] = {
    "": "eof",
    "\x04": "eof",
    "\r": "enter",
    "\n": "enter",
    "\x1b": "esc",
    " ": "space",
    "\t": "tab",
    "\x1b[Z": "shift-tab",
    "\x7f": "backspace",
    "\x08": "backspace",
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1b[C": "right",
    "\x1b[D": "left",
    "\x1b[5~": "pgup",
    "\x1b[6~": "pgdn",
}
for _prefix in _SCAN_PREFIXES:
    _KEY_NAMES.update({
        _prefix + "H": "up",
        _prefix + "P": "down",
        _prefix + "M": "right",
        _prefix + "K": "left",
        _prefix + "I": "pgup",
        _prefix + "Q": "pgdn",
    })


def decode_key(raw: str) -> str:
    """Map a raw terminal sequence to a key name; printable characters pass through."""
    return _KEY_NAMES.get(raw, raw)


def read_key(getchar: Callable[[], str]) -> str:
    """Read one key, joining a Windows scan-code prefix with the character after it."""
    ch = getchar()
    if ch in _SCAN_PREFIXES:
        ch += getchar()
    return ch


class KeySource(ABC):
    """Context-managed source of raw keys."""

    def __enter__(self) -> KeySource:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def close(self) -> None:
        pass

    @abstractmethod
    def read(self, timeout: float) -> str | None:
        """Next raw key, ``None`` when nothing arrived within *timeout*, ``""`` at end of input."""


class StreamKeys(KeySource):
    """Non-interactive stdin (pipes, test runners): blocking reads via ``click.getchar``."""

    def read(self, timeout: float) -> str | None:
        return read_key(click.getchar)


class PosixKeys(KeySource):
    """Terminal held in cbreak mode for the whole session.

    Unlike raw mode, cbreak keeps output newline translation and Ctrl-C, so
    rendering and ``KeyboardInterrupt`` work while waiting for input.
    """

    def __init__(self, fd: int) -> None:
        self.fd = fd
        self._saved = termios.tcgetattr(fd)
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._pending: list[str] = []
        tty.setcbreak(fd)

    def close(self) -> None:
        termios.tcsetattr(self.fd, termios.TCSADRAIN, self._saved)

    def read(self, timeout: float) -> str | None:
        if self._pending:
            return self._pending.pop(0)
        ready, _, _ = select.select([self.fd], [], [], timeout)
        if not ready:
            return None
        data = self._decoder.decode(os.read(self.fd, 32))
        if not data:
            return None
        # An escape sequence is one key; anything else (e.g. a paste) is one key per character.
        if data.startswith("\x1b"):
            return data
        self._pending.extend(data[1:])
        return data[0]


class WindowsKeys(KeySource):
    """Console input polled with ``msvcrt.kbhit``."""

    def read(self, timeout: float) -> str | None:
        deadline = time.monotonic() + timeout
        while not msvcrt.kbhit():
            if time.monotonic() >= deadline:
                return None
            time.sleep(0.01)
        key = read_key(msvcrt.getwch)
        if key == "\x03":
            raise KeyboardInterrupt
        return key


def open_keys() -> KeySource:
    """Pick the key source for the current stdin."""
    if not sys.stdin.isatty():
        return StreamKeys()
    if sys.platform == "win32":
        return WindowsKeys()
    return PosixKeys(sys.stdin.fileno())
