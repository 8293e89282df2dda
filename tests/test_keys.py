"""Tests for pomo_tui.keys: decoding, scan-code pairs and terminal reads."""

from __future__ import annotations

import os
import sys

import pytest

from pomo_tui.keys import PosixKeys, decode_key, read_key


class TestDecodeKey:
    @pytest.mark.parametrize(
        ("raw", "name"),
        [
            ("\r", "enter"),
            ("\x1b", "esc"),
            (" ", "space"),
            ("\x1b[A", "up"),
            ("\x1b[6~", "pgdn"),
            ("\x7f", "backspace"),
            ("\x1b[Z", "shift-tab"),
            ("", "eof"),
            ("\x04", "eof"),
            ("\xe0H", "up"),
            ("\x00P", "down"),
            ("\xe0K", "left"),
            ("j", "j"),
            ("J", "J"),
        ],
    )
    def test_decode(self, raw, name):
        assert decode_key(raw) == name


class TestReadKey:
    def test_scan_code_prefix_joins_next_char(self):
        chars = iter(["\xe0", "K", "K"])
        assert decode_key(read_key(lambda: next(chars))) == "left"
        assert read_key(lambda: next(chars)) == "K"

    def test_plain_char(self):
        assert read_key(lambda: "x") == "x"


@pytest.mark.skipif(sys.platform == "win32", reason="needs a POSIX pty")
class TestPosixKeys:
    @pytest.fixture
    def pty_keys(self):
        master, slave = os.openpty()
        keys = PosixKeys(slave)
        yield master, keys
        keys.close()
        os.close(master)
        os.close(slave)

    def test_timeout_returns_none(self, pty_keys):
        _, keys = pty_keys
        assert keys.read(0.01) is None

    def test_escape_sequence_is_one_key(self, pty_keys):
        master, keys = pty_keys
        os.write(master, b"\x1b[A")
        assert keys.read(1.0) == "\x1b[A"

    def test_pasted_text_is_split_per_char(self, pty_keys):
        master, keys = pty_keys
        os.write(master, "abé".encode())
        assert [keys.read(1.0) for _ in range(3)] == ["a", "b", "é"]
        assert keys.read(0.01) is None
