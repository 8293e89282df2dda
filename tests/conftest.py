"""Shared fixtures for pomo-tui tests.

File handling in tests:
- Use tmp_path for any checklist file so tests are isolated and cleaned up.
- Use pomo_tui.io_utils read_text/write_text for consistent UTF-8 I/O.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from pomo_tui.config import Config
from pomo_tui.io_utils import write_text
from pomo_tui.tasks.store import TaskStore


def _make_store(
    backlog: list[str] | None = None,
    current: list[str] | None = None,
    completed: list[str] | None = None,
) -> TaskStore:
    return TaskStore.from_texts(backlog, current, completed)


@pytest.fixture
def make_store():
    """Factory fixture that creates TaskStore instances from texts."""
    return _make_store


@pytest.fixture
def checklist(tmp_path: Path):
    """Write a checklist file under tmp_path and return its path."""

    def _write(content: str, name: str = "tasks.md") -> Path:
        path = tmp_path / name
        write_text(path, content)
        return path

    return _write


@pytest.fixture
def cfg(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Config:
    """Config with notifications off and the default file inside tmp_path."""
    monkeypatch.delenv("POMO_TUI_TASK_FILE", raising=False)
    monkeypatch.delenv("POMO_TUI_DEFAULT_FILE", raising=False)
    monkeypatch.delenv("POMO_TUI_NOTIFY", raising=False)
    return Config(
        default_task_file=str(tmp_path / "cache" / "tasks.md"),
        notifications=False,
    )


class FakeClock:
    """Monotonic clock stand-in; advance it by hand."""

    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
