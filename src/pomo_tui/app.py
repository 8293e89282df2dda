"""Application state: panels, overlays and key dispatch.

The app is driven by decoded key names and a periodic :meth:`App.tick`.
Everything runs on one thread; sync is synchronous and user-triggered.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

from pomo_tui import log
from pomo_tui.config import Config
from pomo_tui.errors import TaskFileError
from pomo_tui.focus import FocusController
from pomo_tui.notify import notify_session_done
from pomo_tui.overlays import (
    ActionKind,
    ErrorNotice,
    HelpOverlay,
    SyncOverlay,
    TaskInputOverlay,
)
from pomo_tui.sync import SyncEngine
from pomo_tui.tasks.model import Section, SyncItem, Task
from pomo_tui.tasks.store import TaskStore
from pomo_tui.timer import SessionType, Timer

TIMER_MIN_WIDTH = 40

Overlay = SyncOverlay | TaskInputOverlay | ErrorNotice | HelpOverlay


class PanelId(str, Enum):
    TIMER = "timer"
    TASKS = "tasks"

    @property
    def label(self) -> str:
        return self.value.capitalize()


TIMER_SHORTCUTS: list[tuple[str, str]] = [
    ("space", "Start / Pause"),
    ("r", "Reset"),
    ("w/b/l", "Work / Short / Long"),
    ("n", "Next Session Type"),
    ("+/-", "Adjust Minute"),
    ("c", "Complete Active Task"),
]

TASK_SHORTCUTS: list[tuple[str, str]] = [
    ("j/k", "Navigate"),
    ("pgup/pgdn", "Page"),
    ("[/]", "Switch Section"),
    ("J/K", "Reorder"),
    ("a", "Add Task"),
    ("d", "Delete Task"),
    ("enter", "Backlog <-> Current"),
    ("x", "Toggle Complete"),
    ("c", "Complete Active Task"),
]

GLOBAL_SHORTCUTS: list[tuple[str, str]] = [
    ("t/tab", "Switch Panel Focus"),
    ("T", "Toggle Tasks Panel"),
    ("s", "Sync with File"),
    ("?", "Toggle Help"),
    ("q", "Quit"),
]


class App:
    def __init__(
        self,
        cfg: Config,
        engine: SyncEngine | None = None,
        timer: Timer | None = None,
        notifier: Callable[[str], None] = notify_session_done,
    ) -> None:
        self.cfg = cfg
        self.engine = engine or SyncEngine(TaskStore())
        self.timer = timer or Timer(
            cfg.work_minutes,
            cfg.short_break_minutes,
            cfg.long_break_minutes,
        )
        self.focus = FocusController()
        self.notifier = notifier

        self.should_quit = False
        self.focused_panel = PanelId.TIMER
        self.tasks_visible = True
        self.two_columns = False
        self.overlay: Overlay | None = None

    @property
    def store(self) -> TaskStore:
        return self.engine.store

    def active_task(self) -> Task | None:
        return self.store.active_task()

    def is_work_session_active(self) -> bool:
        return self.timer.is_work_session_active()

    # ── key dispatch ─────────────────────────────────────────────

    def handle_key(self, key: str) -> None:
        if self.overlay is not None:
            self._handle_overlay_key(key)
            return

        match key:
            case "q" | "esc":
                self.should_quit = True
                return
            case "T":
                self.toggle_tasks_visibility()
                return
            case "?":
                self.overlay = HelpOverlay(self.focused_panel.label, self.shortcuts())
                return
            case "tab" | "t":
                self.focus_next()
                return
            case "shift-tab":
                self.focus_previous()
                return
            case "s":
                self.request_sync()
                return

        match self.focused_panel:
            case PanelId.TIMER:
                self._handle_timer_key(key)
            case PanelId.TASKS:
                self._handle_tasks_key(key)

    def _handle_overlay_key(self, key: str) -> None:
        overlay = self.overlay
        match overlay:
            case SyncOverlay():
                action = overlay.handle_key(key)
                if action.kind == ActionKind.APPLY:
                    self.overlay = None
                    self.apply_sync(action.items)
                elif action.kind == ActionKind.DISMISS:
                    log.debug("Sync cancelled")
                    self.overlay = None
            case TaskInputOverlay():
                action = overlay.handle_key(key)
                if action.kind == ActionKind.SUBMIT and action.section is not None:
                    self.overlay = None
                    self.store.add(action.text, action.section)
                    self.focus.clamp(self.store)
                elif action.kind == ActionKind.DISMISS:
                    self.overlay = None
            case ErrorNotice() | HelpOverlay():
                overlay.handle_key(key)
                self.overlay = None

    def _handle_timer_key(self, key: str) -> None:
        timer = self.timer
        match key:
            case "space":
                timer.toggle()
            case "r":
                timer.reset()
            case "w":
                timer.set_session_type(SessionType.WORK)
            case "b":
                timer.set_session_type(SessionType.SHORT_BREAK)
            case "l":
                timer.set_session_type(SessionType.LONG_BREAK)
            case "n":
                timer.cycle_session_type()
            case "+" | "=":
                timer.add_minute()
            case "-":
                timer.subtract_minute()
            case "c":
                self.complete_active_task()

    def _handle_tasks_key(self, key: str) -> None:
        store, focus = self.store, self.focus
        section, index = focus.section, focus.index
        match key:
            case "j" | "down":
                focus.move_down(store)
            case "k" | "up":
                focus.move_up(store)
            case "pgdn":
                focus.page_down(store, self.cfg.page_size)
            case "pgup":
                focus.page_up(store, self.cfg.page_size)
            case "]" | "right":
                focus.next_section(store)
            case "[" | "left":
                focus.previous_section(store)
            case "J":
                store.reorder_down(section, index)
                focus.move_down(store)
            case "K":
                store.reorder_up(section, index)
                focus.move_up(store)
            case "a":
                target = Section.BACKLOG if section == Section.COMPLETED else section
                self.overlay = TaskInputOverlay(target)
            case "d":
                store.delete(section, index)
                focus.clamp(store)
            case "enter":
                store.move_section(section, index)
                focus.clamp(store)
            case "x":
                store.move_section(section, index, complete=True)
                focus.clamp(store)
            case "c":
                self.complete_active_task()

    def complete_active_task(self) -> None:
        self.store.complete_active()
        self.focus.clamp(self.store)

    # ── sync ─────────────────────────────────────────────────────

    def request_sync(self) -> None:
        """Diff store and file and open the review overlay, or show an error notice."""
        try:
            if not self.engine.has_file:
                path = self.cfg.resolve_default_task_file()
                self.engine.attach_default_file(path)
                self.focus.clamp(self.store)
            items = self.engine.compute_sync_items()
        except TaskFileError as exc:
            log.warn(f"Sync failed: {exc}")
            self.overlay = ErrorNotice(str(exc))
            return
        self.overlay = SyncOverlay(items)

    def apply_sync(self, items: list[SyncItem]) -> None:
        try:
            if items:
                self.engine.apply_sync(items)
                log.success(f"Synced {len(items)} item(s)")
        except TaskFileError as exc:
            log.warn(f"Sync apply failed: {exc}")
            self.overlay = ErrorNotice(str(exc))
        finally:
            self.focus.clamp(self.store)

    # ── timer ────────────────────────────────────────────────────

    def tick(self) -> None:
        if self.timer.tick() and self.cfg.notifications:
            self.notifier(f"Time for {self.timer.session_type.label}")

    # ── panels ───────────────────────────────────────────────────

    def shortcuts(self) -> list[tuple[str, str]]:
        match self.focused_panel:
            case PanelId.TIMER:
                return list(TIMER_SHORTCUTS)
            case PanelId.TASKS:
                return list(TASK_SHORTCUTS)

    def is_panel_visible(self, panel: PanelId) -> bool:
        match panel:
            case PanelId.TIMER:
                return self.two_columns or self.focused_panel == PanelId.TIMER
            case PanelId.TASKS:
                return self.tasks_visible and (
                    self.two_columns or self.focused_panel == PanelId.TASKS
                )

    def _cycle_focus(self, step: int) -> None:
        panels = list(PanelId)
        current = panels.index(self.focused_panel)
        for offset in range(1, len(panels) + 1):
            candidate = panels[(current + step * offset) % len(panels)]
            if candidate == PanelId.TASKS and not self.tasks_visible:
                continue
            self.focused_panel = candidate
            return

    def focus_next(self) -> None:
        self._cycle_focus(1)

    def focus_previous(self) -> None:
        self._cycle_focus(-1)

    def toggle_tasks_visibility(self) -> None:
        self.tasks_visible = not self.tasks_visible
        if self.tasks_visible and not self.two_columns:
            self.focused_panel = PanelId.TASKS
        if not self.tasks_visible and self.focused_panel == PanelId.TASKS:
            self.focused_panel = PanelId.TIMER

    def update_layout(self, width: int) -> None:
        """Called before render: two columns when both panels fit side by side."""
        self.two_columns = self.tasks_visible and (width // 2) >= TIMER_MIN_WIDTH
