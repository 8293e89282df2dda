"""Tests for pomo_tui.notify: platform dispatch with a fake Popen."""

from __future__ import annotations

import subprocess
import sys

import pytest

from pomo_tui import notify


@pytest.fixture
def popen_calls(monkeypatch):
    calls: list[tuple[str, ...]] = []

    def _fake_popen(cmd, **kwargs):
        calls.append(tuple(cmd))

    monkeypatch.setattr(subprocess, "Popen", _fake_popen)
    return calls


def test_linux_sends_toast_and_sound(monkeypatch, popen_calls):
    monkeypatch.setattr(sys, "platform", "linux")
    notify.notify_session_done("Time for Short Break")
    assert popen_calls[0] == ("notify-send", "pomo-tui", "Time for Short Break")
    assert popen_calls[1][0] == "paplay"


def test_macos_uses_osascript(monkeypatch, popen_calls):
    monkeypatch.setattr(sys, "platform", "darwin")
    notify.notify_session_done("Time for Work")
    assert [c[0] for c in popen_calls] == ["afplay", "osascript"]
    assert "Time for Work" in popen_calls[1][2]


def test_missing_binary_is_ignored(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")

    def _missing(cmd, **kwargs):
        raise FileNotFoundError(cmd[0])

    monkeypatch.setattr(subprocess, "Popen", _missing)
    notify.notify_session_done("Time for Work")
