"""Configuration defaults, env vars, and runtime options for pomo-tui."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

DEFAULT_WORK_MINUTES = 25
DEFAULT_SHORT_BREAK_MINUTES = 5
DEFAULT_LONG_BREAK_MINUTES = 15
DEFAULT_PAGE_SIZE = 10

_FALSY = {"0", "false", "no", "off", ""}


def default_task_file() -> Path:
    """Return ``~/.cache/pomo-tui/tasks.md`` (the file created on first sync)."""
    return Path.home() / ".cache" / "pomo-tui" / "tasks.md"


@dataclass
class Config:
    """Runtime configuration, mostly set from CLI flags."""

    # Checklist file
    task_file: str = ""
    default_task_file: str = ""

    # Timer (minutes)
    work_minutes: int = DEFAULT_WORK_MINUTES
    short_break_minutes: int = DEFAULT_SHORT_BREAK_MINUTES
    long_break_minutes: int = DEFAULT_LONG_BREAK_MINUTES

    # UI
    page_size: int = DEFAULT_PAGE_SIZE
    notifications: bool = True

    # Misc
    verbose: bool = False

    def __post_init__(self) -> None:
        if not self.task_file:
            self.task_file = os.environ.get("POMO_TUI_TASK_FILE", "")
        if not self.default_task_file:
            self.default_task_file = os.environ.get("POMO_TUI_DEFAULT_FILE", "")
        notify_env = os.environ.get("POMO_TUI_NOTIFY")
        if notify_env is not None and notify_env.strip().lower() in _FALSY:
            self.notifications = False
        self.work_minutes = max(1, self.work_minutes)
        self.short_break_minutes = max(1, self.short_break_minutes)
        self.long_break_minutes = max(1, self.long_break_minutes)
        self.page_size = max(1, self.page_size)

    def resolve_default_task_file(self) -> Path:
        if self.default_task_file:
            return Path(self.default_task_file).expanduser()
        return default_task_file()


def is_windows() -> bool:
    return sys.platform == "win32"


def is_macos() -> bool:
    return sys.platform == "darwin"


def is_linux() -> bool:
    return sys.platform.startswith("linux")
