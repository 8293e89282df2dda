"""Checklist file handle: load, re-read and patch the file on disk."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from pomo_tui import log
from pomo_tui.errors import TaskFileError
from pomo_tui.io_utils import open_text, touch_text, write_text
from pomo_tui.tasks.checklist import (
    ParsedTasks,
    detect_newline,
    find_line_index,
    format_line,
    join_rows,
    match_line,
    parse_task_lines,
    split_lines,
    split_rows,
)
from pomo_tui.tasks.model import SyncItem, SyncResolution

Row = tuple[str, str]


def patch_rows(rows: Sequence[Row], items: Sequence[SyncItem]) -> list[Row]:
    """Return ``(line, ending)`` *rows* with every item's resolution applied.

    Each item claims the first checklist line with its text that no earlier
    item claimed, so duplicate texts are assigned by position. Claimed lines
    keep their indentation and ending and get their marker rewritten, or are
    dropped for ``REMOVE``. Items with no matching line are appended
    unindented, with no ending of their own, unless they are removals.
    Passthrough rows are never touched.
    """
    lines = [line for line, _ in rows]
    endings = [ending for _, ending in rows]
    used: set[int] = set()
    to_remove: list[int] = []

    for item in items:
        idx = find_line_index(item.text, lines, used)
        if idx is not None:
            used.add(idx)
            entry = match_line(lines[idx])
            indent = entry.indent if entry else ""
            match item.resolution:
                case SyncResolution.INCOMPLETE:
                    lines[idx] = format_line(item.text, False, indent)
                case SyncResolution.COMPLETE:
                    lines[idx] = format_line(item.text, True, indent)
                case SyncResolution.REMOVE:
                    to_remove.append(idx)
        elif item.resolution != SyncResolution.REMOVE:
            lines.append(format_line(item.text, item.resolution == SyncResolution.COMPLETE))
            endings.append("")

    for idx in sorted(to_remove, reverse=True):
        del lines[idx]
        del endings[idx]
    return list(zip(lines, endings))


class TaskFile:
    """Handle on the checklist file; every read goes back to disk."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    @classmethod
    def load(cls, path: Path | str) -> tuple[TaskFile, ParsedTasks]:
        """Read and parse *path*. Raises :class:`TaskFileError` if unreadable."""
        tf = cls(path)
        return tf, tf.read_tasks()

    @classmethod
    def create_default(cls, path: Path | str) -> tuple[TaskFile, ParsedTasks]:
        """Create *path* (and parent dirs) if missing, then load it."""
        try:
            touch_text(path)
        except OSError as exc:
            raise TaskFileError.from_os_error(path, "create", exc) from exc
        log.debug(f"Using checklist file {path}")
        return cls.load(path)

    def _read(self) -> str:
        try:
            with open_text(self.path, newline="") as fh:
                return fh.read()
        except OSError as exc:
            raise TaskFileError.from_os_error(self.path, "read", exc) from exc
        except UnicodeDecodeError as exc:
            raise TaskFileError(self.path, "read", str(exc)) from exc

    def read_tasks(self) -> ParsedTasks:
        """Re-read the file from disk and parse it."""
        return parse_task_lines(split_lines(self._read()))

    def write_sync(self, items: Sequence[SyncItem]) -> None:
        """Re-read the file, patch it with *items* and write it back in one call.

        Untouched lines keep their own line endings; appended lines use the
        ending of the last terminated line.
        """
        content = self._read()
        patched = patch_rows(split_rows(content), items)
        output = join_rows(
            patched,
            newline=detect_newline(content),
            trailing_newline=content.endswith("\n"),
        )
        try:
            write_text(self.path, output, newline="")
        except OSError as exc:
            raise TaskFileError.from_os_error(self.path, "write", exc) from exc
        log.debug(f"Wrote {len(patched)} lines to {self.path}")
