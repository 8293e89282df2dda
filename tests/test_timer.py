"""Tests for pomo_tui.timer: Pomodoro state machine with a fake clock."""

from __future__ import annotations

import pytest

from pomo_tui.timer import SessionType, Timer, TimerState


@pytest.fixture
def timer(clock) -> Timer:
    return Timer(clock=clock)


def _finish(timer: Timer, clock) -> bool:
    timer.start()
    clock.advance(timer.remaining + 1)
    return timer.tick()


class TestTimerState:
    def test_starts_idle(self, timer):
        assert timer.state == TimerState.IDLE
        assert timer.session_type == SessionType.WORK
        assert timer.sessions_completed == 0
        assert timer.minutes == 25

    def test_toggle(self, timer):
        timer.toggle()
        assert timer.is_running()
        timer.toggle()
        assert timer.state == TimerState.PAUSED
        timer.toggle()
        assert timer.is_running()

    def test_reset(self, timer, clock):
        timer.start()
        clock.advance(90)
        timer.tick()
        timer.reset()
        assert timer.is_idle()
        assert timer.remaining == 25 * 60

    def test_tick_counts_down(self, timer, clock):
        timer.start()
        clock.advance(61)
        assert timer.tick() is False
        assert (timer.minutes, timer.seconds) == (23, 59)

    def test_tick_when_paused_does_nothing(self, timer, clock):
        timer.start()
        timer.pause()
        clock.advance(100)
        assert timer.tick() is False
        assert timer.remaining == 25 * 60

    def test_work_session_active(self, timer):
        assert not timer.is_work_session_active()
        timer.start()
        assert timer.is_work_session_active()
        timer.pause()
        assert timer.is_work_session_active()
        timer.reset()
        timer.set_session_type(SessionType.SHORT_BREAK)
        timer.start()
        assert not timer.is_work_session_active()


class TestAdjustments:
    def test_add_and_subtract_minute(self, timer):
        timer.add_minute()
        assert timer.minutes == 26
        timer.subtract_minute()
        assert timer.minutes == 25

    def test_subtract_never_below_one_minute(self, clock):
        timer = Timer(work_minutes=1, clock=clock)
        timer.subtract_minute()
        assert timer.remaining == 60

    def test_no_adjustment_while_running(self, timer):
        timer.start()
        timer.add_minute()
        timer.set_session_type(SessionType.LONG_BREAK)
        assert timer.remaining == 25 * 60
        assert timer.session_type == SessionType.WORK

    def test_cycle_session_type(self, timer):
        seen = []
        for _ in range(3):
            timer.cycle_session_type()
            seen.append(timer.session_type)
        assert seen == [SessionType.SHORT_BREAK, SessionType.LONG_BREAK, SessionType.WORK]

    def test_custom_durations(self, clock):
        timer = Timer(work_minutes=50, short_break_minutes=10, long_break_minutes=30, clock=clock)
        assert timer.minutes == 50
        timer.set_session_type(SessionType.LONG_BREAK)
        assert timer.minutes == 30


class TestSessionFlow:
    def test_work_then_short_break(self, timer, clock):
        assert _finish(timer, clock) is True
        assert timer.is_idle()
        assert timer.session_type == SessionType.SHORT_BREAK
        assert timer.sessions_completed == 1
        assert timer.minutes == 5

        assert _finish(timer, clock) is True
        assert timer.session_type == SessionType.WORK
        assert timer.minutes == 25

    def test_fourth_work_session_gives_long_break(self, timer, clock):
        for _ in range(3):
            _finish(timer, clock)
            assert timer.session_type == SessionType.SHORT_BREAK
            _finish(timer, clock)
        _finish(timer, clock)
        assert timer.sessions_completed == 4
        assert timer.session_type == SessionType.LONG_BREAK
        assert timer.minutes == 15
