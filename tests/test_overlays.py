"""Tests for pomo_tui.overlays: sync review, task input and notices."""

from __future__ import annotations

from pomo_tui.overlays import (
    ActionKind,
    ErrorNotice,
    HelpOverlay,
    SyncOverlay,
    TaskInputOverlay,
)
from pomo_tui.tasks.model import Section, SyncItem, SyncResolution


def _items() -> list[SyncItem]:
    return [
        SyncItem("A", SyncResolution.INCOMPLETE),
        SyncItem("B", SyncResolution.COMPLETE),
    ]


class TestSyncOverlay:
    def test_navigation_is_clamped(self):
        overlay = SyncOverlay(_items())
        overlay.handle_key("k")
        assert overlay.focused == 0
        overlay.handle_key("j")
        overlay.handle_key("j")
        assert overlay.focused == 1

    def test_override_resolutions(self):
        overlay = SyncOverlay(_items())
        assert overlay.handle_key("d").kind == ActionKind.CONSUMED
        assert overlay.items[0].resolution == SyncResolution.REMOVE
        overlay.handle_key("x")
        assert overlay.items[0].resolution == SyncResolution.COMPLETE
        overlay.handle_key("j")
        overlay.handle_key("space")
        assert overlay.items[1].resolution == SyncResolution.INCOMPLETE

    def test_enter_returns_edited_items(self):
        overlay = SyncOverlay(_items())
        overlay.handle_key("d")
        action = overlay.handle_key("enter")
        assert action.kind == ActionKind.APPLY
        assert [(i.text, i.resolution) for i in action.items] == [
            ("A", SyncResolution.REMOVE),
            ("B", SyncResolution.COMPLETE),
        ]
        assert overlay.items == []

    def test_esc_dismisses(self):
        overlay = SyncOverlay(_items())
        assert overlay.handle_key("esc").kind == ActionKind.DISMISS

    def test_keys_on_empty_list(self):
        overlay = SyncOverlay([])
        for key in ("j", "k", "x", "d", "space", "z"):
            assert overlay.handle_key(key).kind == ActionKind.CONSUMED
        assert overlay.handle_key("enter").items == []


class TestTaskInputOverlay:
    def test_typing_and_submit(self):
        overlay = TaskInputOverlay(Section.CURRENT)
        for key in ["H", "i", "space", "y", "o", "u"]:
            overlay.handle_key(key)
        action = overlay.handle_key("enter")
        assert action.kind == ActionKind.SUBMIT
        assert action.text == "Hi you"
        assert action.section == Section.CURRENT

    def test_cursor_editing(self):
        overlay = TaskInputOverlay(Section.BACKLOG)
        for key in ["a", "c"]:
            overlay.handle_key(key)
        overlay.handle_key("left")
        overlay.handle_key("b")
        assert overlay.text == "abc"
        overlay.handle_key("backspace")
        assert overlay.text == "ac"
        assert overlay.cursor == 1
        overlay.handle_key("right")
        overlay.handle_key("right")
        assert overlay.cursor == 2

    def test_submit_is_trimmed(self):
        overlay = TaskInputOverlay(Section.BACKLOG)
        for key in ["space", "x", "space"]:
            overlay.handle_key(key)
        assert overlay.handle_key("enter").text == "x"

    def test_empty_submit_dismisses(self):
        overlay = TaskInputOverlay(Section.BACKLOG)
        overlay.handle_key("space")
        assert overlay.handle_key("enter").kind == ActionKind.DISMISS

    def test_named_keys_are_not_inserted(self):
        overlay = TaskInputOverlay(Section.BACKLOG)
        overlay.handle_key("pgdn")
        overlay.handle_key("tab")
        assert overlay.text == ""


class TestNotices:
    def test_any_key_dismisses(self):
        assert ErrorNotice("boom").handle_key("j").kind == ActionKind.DISMISS
        assert HelpOverlay("Timer", []).handle_key("q").kind == ActionKind.DISMISS
