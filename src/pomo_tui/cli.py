"""pomo-tui CLI: Pomodoro timer with a checklist-file task list.

Installed as ``pomo-tui`` console_script via pipx / pip.
"""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from pomo_tui import __version__
from pomo_tui import log
from pomo_tui.app import App
from pomo_tui.config import (
    DEFAULT_LONG_BREAK_MINUTES,
    DEFAULT_PAGE_SIZE,
    DEFAULT_SHORT_BREAK_MINUTES,
    DEFAULT_WORK_MINUTES,
    Config,
)
from pomo_tui.errors import TaskFileError
from pomo_tui.keys import TICK_SECONDS, KeySource, decode_key, open_keys
from pomo_tui.sync import SyncEngine
from pomo_tui.tasks.store import TaskStore
from pomo_tui.ui import render

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


def _build_engine(cfg: Config) -> SyncEngine:
    if not cfg.task_file:
        return SyncEngine(TaskStore())
    try:
        return SyncEngine.load(cfg.task_file)
    except TaskFileError as exc:
        raise click.ClickException(str(exc)) from exc


def _frame_state(app: App) -> tuple[int, int, str]:
    timer = app.timer
    return timer.minutes, timer.seconds, timer.state.value


def run(app: App, console: Console, keys: KeySource, tick_seconds: float = TICK_SECONDS) -> None:
    """Tick every *tick_seconds*, handle keys as they arrive; until quit or end of input.

    The frame is redrawn after a key press or when the displayed time changes.
    """
    with log.held(), console.screen() as screen:
        screen.update(render(app, console.width))
        shown = _frame_state(app)
        while not app.should_quit:
            raw = keys.read(tick_seconds)
            app.tick()
            if raw is not None:
                key = decode_key(raw)
                if key == "eof":
                    break
                app.handle_key(key)
            if raw is not None or _frame_state(app) != shown:
                screen.update(render(app, console.width))
                shown = _frame_state(app)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.argument(
    "task_file",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option("--work", "work_minutes", type=click.IntRange(min=1), default=DEFAULT_WORK_MINUTES, help="Work session length (minutes)")
@click.option("--short-break", "short_break_minutes", type=click.IntRange(min=1), default=DEFAULT_SHORT_BREAK_MINUTES, help="Short break length (minutes)")
@click.option("--long-break", "long_break_minutes", type=click.IntRange(min=1), default=DEFAULT_LONG_BREAK_MINUTES, help="Long break length (minutes)")
@click.option("--page-size", type=click.IntRange(min=1), default=DEFAULT_PAGE_SIZE, help="Rows moved by PgUp/PgDn")
@click.option("--default-file", default="", help="Checklist created on first sync when TASK_FILE is omitted")
@click.option("--no-notify", is_flag=True, help="Disable session-end notifications")
@click.option("-v", "--verbose", is_flag=True, help="Show debug output")
@click.version_option(__version__, prog_name="pomo-tui")
def main(
    task_file: Path | None,
    work_minutes: int,
    short_break_minutes: int,
    long_break_minutes: int,
    page_size: int,
    default_file: str,
    no_notify: bool,
    verbose: bool,
) -> None:
    """Pomodoro timer with a Backlog / Current / Completed task list.

    TASK_FILE is a plain-text checklist (``- [ ] task`` / ``- [x] task``).
    Press ``s`` to sync it with the app; without TASK_FILE the first sync
    creates ~/.cache/pomo-tui/tasks.md.

    \b
    EXAMPLES:
      pomo-tui                       # timer + tasks, no file yet
      pomo-tui TODO.md               # mirror TODO.md
      pomo-tui --work 50 TODO.md     # 50 minute work sessions
    """
    log.set_verbose(verbose)

    cfg = Config(
        task_file=str(task_file) if task_file else "",
        default_task_file=default_file,
        work_minutes=work_minutes,
        short_break_minutes=short_break_minutes,
        long_break_minutes=long_break_minutes,
        page_size=page_size,
        notifications=not no_notify,
        verbose=verbose,
    )

    engine = _build_engine(cfg)
    app = App(cfg, engine)
    try:
        with open_keys() as keys:
            run(app, log.console, keys)
    except KeyboardInterrupt:
        pass
    log.info(str(app.store))
