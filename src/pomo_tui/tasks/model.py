"""Task and Section data models shared by the store, sync engine and UI."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Section(str, Enum):
    BACKLOG = "backlog"
    CURRENT = "current"
    COMPLETED = "completed"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    def next(self) -> Section:
        """Backlog -> Current -> Completed -> Backlog."""
        order = list(Section)
        return order[(order.index(self) + 1) % len(order)]

    def previous(self) -> Section:
        order = list(Section)
        return order[(order.index(self) - 1) % len(order)]


@dataclass
class Task:
    """A task is identified by its text only; duplicates are legal."""

    text: str


class SyncResolution(str, Enum):
    INCOMPLETE = "incomplete"
    COMPLETE = "complete"
    REMOVE = "remove"


@dataclass
class SyncItem:
    """One disagreement between the store and the checklist file.

    ``resolution`` starts as the computed default and may be overridden by
    the user before the item is applied.
    """

    text: str
    resolution: SyncResolution
