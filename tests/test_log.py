"""Tests for pomo_tui.log: verbosity gate and held output."""

from __future__ import annotations

import pytest

from pomo_tui import log


@pytest.fixture(autouse=True)
def _quiet():
    yield
    log.set_verbose(False)


def test_debug_only_when_verbose(capsys):
    log.debug("hidden")
    log.set_verbose(True)
    log.debug("shown")
    out = capsys.readouterr().out
    assert "hidden" not in out
    assert "[DEBUG] shown" in out


def test_held_messages_flush_in_order(capsys):
    with log.held():
        log.info("first")
        log.warn("second")
        assert capsys.readouterr().out == ""
    out = capsys.readouterr().out
    assert out.index("[INFO] first") < out.index("[WARN] second")


def test_task_text_is_not_markup(capsys):
    log.info("[bold]literal[/bold]")
    assert "[bold]literal[/bold]" in capsys.readouterr().out


def test_error_goes_to_stderr(capsys):
    log.error("boom")
    captured = capsys.readouterr()
    assert "[ERROR] boom" in captured.err
    assert "boom" not in captured.out
