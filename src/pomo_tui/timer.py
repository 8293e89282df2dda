"""Pomodoro timer: work / short break / long break sessions."""

from __future__ import annotations

import time
from enum import Enum
from typing import Callable

from pomo_tui import log

LONG_BREAK_EVERY = 4


class SessionType(str, Enum):
    WORK = "work"
    SHORT_BREAK = "short-break"
    LONG_BREAK = "long-break"

    @property
    def label(self) -> str:
        return {
            SessionType.WORK: "Work",
            SessionType.SHORT_BREAK: "Short Break",
            SessionType.LONG_BREAK: "Long Break",
        }[self]


class TimerState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"


class Timer:
    """Countdown state machine.

    Session type and duration can only be changed while idle. A finished
    work session leads to a short break, or a long break every fourth
    time; a finished break leads back to work. ``clock`` returns seconds
    and defaults to :func:`time.monotonic`.
    """

    def __init__(
        self,
        work_minutes: int = 25,
        short_break_minutes: int = 5,
        long_break_minutes: int = 15,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._durations: dict[SessionType, float] = {
            SessionType.WORK: work_minutes * 60.0,
            SessionType.SHORT_BREAK: short_break_minutes * 60.0,
            SessionType.LONG_BREAK: long_break_minutes * 60.0,
        }
        self._clock = clock
        self.state = TimerState.IDLE
        self.session_type = SessionType.WORK
        self.remaining = self._durations[SessionType.WORK]
        self.sessions_completed = 0
        self._last_tick: float | None = None

    # ── queries ──────────────────────────────────────────────────

    def is_idle(self) -> bool:
        return self.state == TimerState.IDLE

    def is_running(self) -> bool:
        return self.state == TimerState.RUNNING

    def is_work_session_active(self) -> bool:
        return self.session_type == SessionType.WORK and self.state != TimerState.IDLE

    @property
    def minutes(self) -> int:
        return int(self.remaining) // 60

    @property
    def seconds(self) -> int:
        return int(self.remaining) % 60

    # ── transitions ──────────────────────────────────────────────

    def start(self) -> None:
        if self.state != TimerState.RUNNING:
            self.state = TimerState.RUNNING
            self._last_tick = self._clock()

    def pause(self) -> None:
        if self.state == TimerState.RUNNING:
            self.state = TimerState.PAUSED
            self._last_tick = None

    def toggle(self) -> None:
        if self.state == TimerState.RUNNING:
            self.pause()
        else:
            self.start()

    def reset(self) -> None:
        self.state = TimerState.IDLE
        self._last_tick = None
        self.remaining = self._durations[self.session_type]

    def set_session_type(self, session_type: SessionType) -> None:
        if self.is_idle():
            self.session_type = session_type
            self.remaining = self._durations[session_type]

    def cycle_session_type(self) -> None:
        """Work -> short break -> long break -> work, only while idle."""
        order = list(SessionType)
        nxt = order[(order.index(self.session_type) + 1) % len(order)]
        self.set_session_type(nxt)

    def add_minute(self) -> None:
        if self.is_idle():
            self.remaining += 60

    def subtract_minute(self) -> None:
        if self.is_idle() and self.remaining > 60:
            self.remaining -= 60

    def tick(self) -> bool:
        """Advance by the time since the last tick; return ``True`` if a session just ended."""
        if self.state != TimerState.RUNNING or self._last_tick is None:
            return False
        now = self._clock()
        elapsed = now - self._last_tick
        self._last_tick = now
        if elapsed >= self.remaining:
            self.remaining = 0
            self._complete_session()
            return True
        self.remaining -= elapsed
        return False

    def _complete_session(self) -> None:
        finished = self.session_type
        if finished == SessionType.WORK:
            self.sessions_completed += 1
            if self.sessions_completed % LONG_BREAK_EVERY == 0:
                self.session_type = SessionType.LONG_BREAK
            else:
                self.session_type = SessionType.SHORT_BREAK
        else:
            self.session_type = SessionType.WORK
        self.remaining = self._durations[self.session_type]
        self.state = TimerState.IDLE
        self._last_tick = None
        log.debug(f"Session {finished.value} done -> {self.session_type.value}")
