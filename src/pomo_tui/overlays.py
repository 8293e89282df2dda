"""Modal overlays: sync review, task input and error notice.

Overlays take decoded key names (``"j"``, ``"enter"``, ``"esc"`` ...) and
return an action telling the app what to do next.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from pomo_tui.tasks.model import Section, SyncItem, SyncResolution


class ActionKind(str, Enum):
    CONSUMED = "consumed"
    DISMISS = "dismiss"
    APPLY = "apply"
    SUBMIT = "submit"


@dataclass
class OverlayAction:
    kind: ActionKind
    items: list[SyncItem] = field(default_factory=list)
    text: str = ""
    section: Section | None = None

    @classmethod
    def consumed(cls) -> OverlayAction:
        return cls(ActionKind.CONSUMED)

    @classmethod
    def dismiss(cls) -> OverlayAction:
        return cls(ActionKind.DISMISS)


# ── Sync review ──────────────────────────────────────────────────────

_RESOLUTION_KEYS: dict[str, SyncResolution] = {
    "space": SyncResolution.INCOMPLETE,
    "x": SyncResolution.COMPLETE,
    "d": SyncResolution.REMOVE,
}


class SyncOverlay:
    """Lets the user override each item's resolution before applying.

    ``esc`` cancels (the caller must leave store and file untouched),
    ``enter`` hands the edited items back for apply.
    """

    def __init__(self, items: list[SyncItem]) -> None:
        self.items = items
        self.focused = 0

    def handle_key(self, key: str) -> OverlayAction:
        match key:
            case "esc":
                return OverlayAction.dismiss()
            case "j" | "down":
                if self.focused + 1 < len(self.items):
                    self.focused += 1
            case "k" | "up":
                if self.focused > 0:
                    self.focused -= 1
            case "space" | "x" | "d":
                if 0 <= self.focused < len(self.items):
                    self.items[self.focused].resolution = _RESOLUTION_KEYS[key]
            case "enter":
                items, self.items = self.items, []
                self.focused = 0
                return OverlayAction(ActionKind.APPLY, items=items)
        return OverlayAction.consumed()


# ── Task input ───────────────────────────────────────────────────────


class TaskInputOverlay:
    """Single-line text entry for a new task in *section*."""

    def __init__(self, section: Section) -> None:
        self.section = section
        self.text = ""
        self.cursor = 0

    def handle_key(self, key: str) -> OverlayAction:
        match key:
            case "esc":
                return OverlayAction.dismiss()
            case "enter":
                text = self.text.strip()
                if not text:
                    return OverlayAction.dismiss()
                return OverlayAction(ActionKind.SUBMIT, text=text, section=self.section)
            case "backspace":
                if self.cursor > 0:
                    self.text = self.text[: self.cursor - 1] + self.text[self.cursor:]
                    self.cursor -= 1
            case "left":
                self.cursor = max(0, self.cursor - 1)
            case "right":
                self.cursor = min(len(self.text), self.cursor + 1)
            case "space":
                self._insert(" ")
            case _ if len(key) == 1 and key.isprintable():
                self._insert(key)
        return OverlayAction.consumed()

    def _insert(self, char: str) -> None:
        self.text = self.text[: self.cursor] + char + self.text[self.cursor:]
        self.cursor += 1


# ── Error notice ─────────────────────────────────────────────────────


@dataclass
class ErrorNotice:
    """One-shot message; any key dismisses it."""

    message: str

    def handle_key(self, key: str) -> OverlayAction:
        return OverlayAction.dismiss()


@dataclass
class HelpOverlay:
    """Shortcut list for the focused panel; any key closes it."""

    panel_name: str
    shortcuts: list[tuple[str, str]]

    def handle_key(self, key: str) -> OverlayAction:
        return OverlayAction.dismiss()
