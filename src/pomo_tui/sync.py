"""Sync engine: reconcile the task store with the checklist file.

Usage::

    engine = SyncEngine(store, task_file)
    items = engine.compute_sync_items()   # fresh read, no mutation
    ...                                    # user overrides resolutions
    engine.apply_sync(items)               # store first, then one file write

Both views may have changed since the last sync. The app is authoritative
for completion status; the file is authoritative only for introducing new
tasks. A file written between compute and apply is a known, accepted race:
items whose line disappeared are simply appended again.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from pomo_tui import log
from pomo_tui.tasks.file import TaskFile
from pomo_tui.tasks.model import Section, SyncItem, SyncResolution
from pomo_tui.tasks.store import TaskStore

__all__ = ["SyncEngine", "SyncItem", "SyncResolution", "diff_tasks"]


def diff_tasks(
    app_incomplete: Sequence[str],
    app_complete: Sequence[str],
    file_incomplete: Sequence[str],
    file_complete: Sequence[str],
) -> list[SyncItem]:
    """Compute the sync items for two flat views, in rule order.

    1. in file (incomplete) only        -> INCOMPLETE
    2. in file (complete) only          -> COMPLETE
    3. app incomplete, file complete    -> COMPLETE
    4. app complete, file incomplete    -> COMPLETE (app completion wins)
    5. app incomplete, not in file      -> INCOMPLETE
    6. app complete, not in file        -> COMPLETE
    """
    app_all = set(app_incomplete) | set(app_complete)
    file_inc = set(file_incomplete)
    file_comp = set(file_complete)
    file_all = file_inc | file_comp

    items: list[SyncItem] = []
    for text in file_incomplete:
        if text not in app_all:
            items.append(SyncItem(text, SyncResolution.INCOMPLETE))
    for text in file_complete:
        if text not in app_all:
            items.append(SyncItem(text, SyncResolution.COMPLETE))
    for text in app_incomplete:
        if text in file_comp:
            items.append(SyncItem(text, SyncResolution.COMPLETE))
    for text in app_complete:
        if text in file_inc:
            items.append(SyncItem(text, SyncResolution.COMPLETE))
    for text in app_incomplete:
        if text not in file_all:
            items.append(SyncItem(text, SyncResolution.INCOMPLETE))
    for text in app_complete:
        if text not in file_all:
            items.append(SyncItem(text, SyncResolution.COMPLETE))
    return items


class SyncEngine:
    """Owns the store/file pairing. ``task_file`` is ``None`` until one is attached."""

    def __init__(self, store: TaskStore, task_file: TaskFile | None = None) -> None:
        self.store = store
        self.task_file = task_file

    @classmethod
    def load(cls, path: Path | str) -> SyncEngine:
        """Open *path* and seed a store from it: incomplete to Backlog, complete to Completed."""
        task_file, parsed = TaskFile.load(path)
        store = TaskStore.from_texts(backlog=parsed.incomplete, completed=parsed.complete)
        log.debug(f"Loaded {path}: {store}")
        return cls(store, task_file)

    @property
    def has_file(self) -> bool:
        return self.task_file is not None

    def attach_default_file(self, path: Path | str) -> None:
        """Create or open *path* and merge its tasks into the store.

        Texts already present are not duplicated: incomplete texts are added
        to Backlog unless in Backlog or Current, complete texts to Completed
        unless already there.
        """
        task_file, parsed = TaskFile.create_default(path)
        self.task_file = task_file
        for text in parsed.incomplete:
            if not self.store.contains(Section.CURRENT, text):
                self.store.ensure(Section.BACKLOG, text)
        for text in parsed.complete:
            self.store.ensure(Section.COMPLETED, text)
        log.debug(f"Attached {path}: {self.store}")

    # ── compute ──────────────────────────────────────────────────

    def compute_sync_items(self) -> list[SyncItem]:
        """Diff the store against a fresh read of the file.

        Raises :class:`~pomo_tui.errors.TaskFileError` if the file cannot be
        read; nothing is mutated either way.
        """
        if self.task_file is None:
            return []
        parsed = self.task_file.read_tasks()
        items = diff_tasks(
            self.store.texts(Section.BACKLOG) + self.store.texts(Section.CURRENT),
            self.store.texts(Section.COMPLETED),
            parsed.incomplete,
            parsed.complete,
        )
        for item in items:
            log.debug(f"Sync item: {item.text!r} -> {item.resolution.value}")
        return items

    # ── apply ────────────────────────────────────────────────────

    def apply_to_store(self, items: Sequence[SyncItem]) -> None:
        store = self.store
        for item in items:
            match item.resolution:
                case SyncResolution.INCOMPLETE:
                    store.remove_text(Section.COMPLETED, item.text)
                    if not store.contains(Section.CURRENT, item.text):
                        store.ensure(Section.BACKLOG, item.text)
                case SyncResolution.COMPLETE:
                    store.remove_text(Section.BACKLOG, item.text)
                    store.remove_text(Section.CURRENT, item.text)
                    store.ensure(Section.COMPLETED, item.text)
                case SyncResolution.REMOVE:
                    for section in Section:
                        store.remove_text(section, item.text)
            log.debug(f"Applied {item.resolution.value} to {item.text!r}")

    def apply_sync(self, items: Sequence[SyncItem]) -> None:
        """Apply confirmed *items* to the store, then patch the file.

        The store is mutated before the write. If the write fails the
        :class:`~pomo_tui.errors.TaskFileError` propagates and the store is
        not rolled back.
        """
        self.apply_to_store(items)
        if self.task_file is not None:
            self.task_file.write_sync(items)
