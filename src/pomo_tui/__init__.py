"""pomo-tui: Pomodoro timer with a checklist-file backed task list."""

__version__ = "0.3.0"
