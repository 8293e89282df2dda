"""Logging utilities with colored output via Rich.

While the full-screen UI owns the terminal, messages are held back and
printed once it exits (see :func:`held`).
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from rich.console import Console
from rich.markup import escape

console = Console(highlight=False)
_err_console = Console(highlight=False, stderr=True)

_verbose = False
_held: list[tuple[Console, str]] | None = None


def set_verbose(enabled: bool) -> None:
    global _verbose
    _verbose = enabled


@contextmanager
def held() -> Iterator[None]:
    """Buffer every message inside the block and flush them in order on exit."""
    global _held
    _held = []
    try:
        yield
    finally:
        pending, _held = _held, None
        for target, markup in pending:
            target.print(markup)


def _emit(markup: str, target: Console | None = None) -> None:
    target = target or console
    if _held is not None:
        _held.append((target, markup))
    else:
        target.print(markup)


def info(msg: str) -> None:
    _emit(f"[blue]\\[INFO][/blue] {escape(msg)}")


def success(msg: str) -> None:
    _emit(f"[green]\\[OK][/green] {escape(msg)}")


def warn(msg: str) -> None:
    _emit(f"[yellow]\\[WARN][/yellow] {escape(msg)}")


def error(msg: str) -> None:
    _emit(f"[red]\\[ERROR][/red] {escape(msg)}", _err_console)


def debug(msg: str) -> None:
    if _verbose:
        _emit(f"[dim]\\[DEBUG] {escape(msg)}[/dim]")
