"""Cross-platform notifications (sound + toast), best-effort."""

from __future__ import annotations

import subprocess

from pomo_tui import log
from pomo_tui.config import is_linux, is_macos, is_windows


def _run_quiet(*cmd: str) -> None:
    """Fire-and-forget subprocess, ignore failures."""
    try:
        subprocess.Popen(
            cmd,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except (FileNotFoundError, OSError):
        pass


def notify_session_done(message: str) -> None:
    """Play a chime and show a notification toast when a session ends."""
    if is_macos():
        _run_quiet("afplay", "/System/Library/Sounds/Glass.aiff")
        _run_quiet(
            "osascript", "-e",
            f'display notification "{message}" with title "pomo-tui"',
        )
    elif is_linux():
        _run_quiet("notify-send", "pomo-tui", message)
        _run_quiet("paplay", "/usr/share/sounds/freedesktop/stereo/complete.oga")
    elif is_windows():
        _run_quiet(
            "powershell.exe", "-Command",
            "[System.Media.SystemSounds]::Asterisk.Play()",
        )
    else:
        log.console.bell()
