"""Section focus controller for the tasks panel.

The focused row always satisfies ``index < len(section)`` for a non-empty
section and ``index == 0`` for an empty one. The controller only reads
section lengths from the store; it never mutates it.
"""

from __future__ import annotations

from dataclasses import dataclass

from pomo_tui.tasks.model import Section
from pomo_tui.tasks.store import TaskStore


@dataclass
class Focus:
    section: Section = Section.BACKLOG
    index: int = 0


def clamp_index(index: int, length: int) -> int:
    if length <= 0:
        return 0
    return max(0, min(index, length - 1))


class FocusController:
    """Tracks the focused section/row across three independently sized lists."""

    def __init__(self, focus: Focus | None = None) -> None:
        self.focus = focus or Focus()

    @property
    def section(self) -> Section:
        return self.focus.section

    @property
    def index(self) -> int:
        return self.focus.index

    def clamp(self, store: TaskStore) -> None:
        """Pull the index back inside the focused section; call after every store mutation."""
        self.focus.index = clamp_index(self.focus.index, store.section_len(self.focus.section))

    # ── rows ─────────────────────────────────────────────────────

    def move_up(self, store: TaskStore) -> None:
        self.focus.index -= 1
        self.clamp(store)

    def move_down(self, store: TaskStore) -> None:
        self.focus.index += 1
        self.clamp(store)

    def page_up(self, store: TaskStore, page: int) -> None:
        self.focus.index -= max(1, page)
        self.clamp(store)

    def page_down(self, store: TaskStore, page: int) -> None:
        self.focus.index += max(1, page)
        self.clamp(store)

    # ── sections ─────────────────────────────────────────────────

    def set_section(self, store: TaskStore, section: Section) -> None:
        self.focus.section = section
        self.clamp(store)

    def next_section(self, store: TaskStore) -> None:
        self.set_section(store, self.focus.section.next())

    def previous_section(self, store: TaskStore) -> None:
        self.set_section(store, self.focus.section.previous())
