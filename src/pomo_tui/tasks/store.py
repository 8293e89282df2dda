"""In-memory task store: three ordered sections of tasks.

Panel operations are index-addressed; sync operations are text-addressed.
Out-of-range indices are silently ignored, never raised, since they only
come from stale UI state.

Section transitions::

    Backlog  <-> Current      toggle_section
    Current   -> Completed    toggle_completion / complete_active
    Completed -> Backlog      toggle_completion
"""

from __future__ import annotations

from pomo_tui import log
from pomo_tui.tasks.model import Section, Task


class TaskStore:
    """Owns the Backlog, Current and Completed task lists."""

    def __init__(
        self,
        backlog: list[Task] | None = None,
        current: list[Task] | None = None,
        completed: list[Task] | None = None,
    ) -> None:
        self._sections: dict[Section, list[Task]] = {
            Section.BACKLOG: list(backlog or []),
            Section.CURRENT: list(current or []),
            Section.COMPLETED: list(completed or []),
        }

    @classmethod
    def from_texts(
        cls,
        backlog: list[str] | None = None,
        current: list[str] | None = None,
        completed: list[str] | None = None,
    ) -> TaskStore:
        return cls(
            [Task(t) for t in backlog or []],
            [Task(t) for t in current or []],
            [Task(t) for t in completed or []],
        )

    # ── queries ──────────────────────────────────────────────────

    def tasks(self, section: Section) -> list[Task]:
        """Return a copy of *section*'s tasks in display order."""
        return list(self._sections[section])

    def texts(self, section: Section) -> list[str]:
        return [t.text for t in self._sections[section]]

    def section_len(self, section: Section) -> int:
        return len(self._sections[section])

    def contains(self, section: Section, text: str) -> bool:
        return any(t.text == text for t in self._sections[section])

    def active_task(self) -> Task | None:
        """The head of Current is the task in progress."""
        current = self._sections[Section.CURRENT]
        return current[0] if current else None

    # ── index-addressed mutations ────────────────────────────────

    def add(self, text: str, section: Section) -> None:
        self._sections[section].append(Task(text))

    def delete(self, section: Section, index: int) -> Task | None:
        tasks = self._sections[section]
        if 0 <= index < len(tasks):
            return tasks.pop(index)
        return None

    def reorder_up(self, section: Section, index: int) -> None:
        tasks = self._sections[section]
        if 0 < index < len(tasks):
            tasks[index - 1], tasks[index] = tasks[index], tasks[index - 1]

    def reorder_down(self, section: Section, index: int) -> None:
        tasks = self._sections[section]
        if 0 <= index and index + 1 < len(tasks):
            tasks[index], tasks[index + 1] = tasks[index + 1], tasks[index]

    def _move(self, source: Section, index: int, target: Section) -> bool:
        task = self.delete(source, index)
        if task is None:
            return False
        self._sections[target].append(task)
        log.debug(f"Task {task.text!r}: {source.value} -> {target.value}")
        return True

    def toggle_section(self, section: Section, index: int) -> bool:
        """Move between Backlog and Current. Completed has no toggle target."""
        match section:
            case Section.BACKLOG:
                return self._move(section, index, Section.CURRENT)
            case Section.CURRENT:
                return self._move(section, index, Section.BACKLOG)
            case Section.COMPLETED:
                return False

    def toggle_completion(self, section: Section, index: int) -> bool:
        """Complete a Current task, or send a Completed task back to Backlog."""
        match section:
            case Section.CURRENT:
                return self._move(section, index, Section.COMPLETED)
            case Section.COMPLETED:
                return self._move(section, index, Section.BACKLOG)
            case Section.BACKLOG:
                return False

    def move_section(self, section: Section, index: int, complete: bool = False) -> bool:
        """Move one task along the section cycle; ``complete`` picks the completion edge."""
        if complete:
            return self.toggle_completion(section, index)
        return self.toggle_section(section, index)

    def complete_active(self) -> bool:
        return self._move(Section.CURRENT, 0, Section.COMPLETED)

    # ── text-addressed mutations (sync) ──────────────────────────

    def remove_text(self, section: Section, text: str) -> int:
        """Drop every task with *text* from *section*; return how many went."""
        tasks = self._sections[section]
        kept = [t for t in tasks if t.text != text]
        removed = len(tasks) - len(kept)
        tasks[:] = kept
        return removed

    def ensure(self, section: Section, text: str) -> bool:
        """Append *text* to *section* unless a task with that text is already there."""
        if self.contains(section, text):
            return False
        self.add(text, section)
        return True

    def __str__(self) -> str:
        return (
            f"Backlog: {self.section_len(Section.BACKLOG)} tasks, "
            f"Current: {self.section_len(Section.CURRENT)} tasks, "
            f"Completed: {self.section_len(Section.COMPLETED)} tasks"
        )
