"""Checklist codec: parse ``- [ ]`` / ``- [x]`` lines out of a plain-text file.

Only the marker prefix is interpreted. Every other line is passthrough
content: it is never parsed, but it is kept verbatim when the file is
patched (see :mod:`pomo_tui.tasks.file`). There is deliberately no
whole-file serializer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Container, Iterable, Sequence

INCOMPLETE_MARKER = "- [ ] "
COMPLETE_MARKERS: tuple[str, ...] = ("- [x] ", "- [X] ")


@dataclass
class ParsedTasks:
    incomplete: list[str] = field(default_factory=list)
    complete: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ChecklistLine:
    indent: str
    complete: bool
    text: str


def match_line(line: str) -> ChecklistLine | None:
    """Return the checklist parts of *line*, or ``None`` for passthrough lines.

    Leading whitespace is kept as ``indent``; the text after the marker is
    returned untouched (it may be empty).
    """
    stripped = line.lstrip()
    indent = line[: len(line) - len(stripped)]
    if stripped.startswith(INCOMPLETE_MARKER):
        return ChecklistLine(indent, False, stripped[len(INCOMPLETE_MARKER):])
    for marker in COMPLETE_MARKERS:
        if stripped.startswith(marker):
            return ChecklistLine(indent, True, stripped[len(marker):])
    return None


def format_line(text: str, complete: bool, indent: str = "") -> str:
    mark = "x" if complete else " "
    return f"{indent}- [{mark}] {text}"


def parse_task_lines(lines: Iterable[str]) -> ParsedTasks:
    """Split checklist lines into incomplete and complete task texts, in file order."""
    parsed = ParsedTasks()
    for line in lines:
        entry = match_line(line)
        if entry is None or not entry.text:
            continue
        if entry.complete:
            parsed.complete.append(entry.text)
        else:
            parsed.incomplete.append(entry.text)
    return parsed


def find_line_index(text: str, lines: Sequence[str], used: Container[int] = ()) -> int | None:
    """Index of the first checklist line with *text* not listed in *used*."""
    for idx, line in enumerate(lines):
        if idx in used:
            continue
        entry = match_line(line)
        if entry is not None and entry.text == text:
            return idx
    return None


def split_rows(content: str) -> list[tuple[str, str]]:
    """Split file content into ``(line, ending)`` pairs.

    ``ending`` is the line's own terminator (``"\\n"`` or ``"\\r\\n"``), or
    ``""`` for a final line without one. Only ``\\n`` separates lines.
    """
    rows: list[tuple[str, str]] = []
    pieces = content.split("\n")
    for piece in pieces[:-1]:
        if piece.endswith("\r"):
            rows.append((piece[:-1], "\r\n"))
        else:
            rows.append((piece, "\n"))
    if pieces[-1]:
        rows.append((pieces[-1], ""))
    return rows


def split_lines(content: str) -> list[str]:
    """Split file content into lines without their endings."""
    return [line for line, _ in split_rows(content)]


def detect_newline(content: str) -> str:
    """Ending of the last terminated line, ``"\\n"`` if there is none."""
    idx = content.rfind("\n")
    if idx > 0 and content[idx - 1] == "\r":
        return "\r\n"
    return "\n"


def join_rows(rows: Sequence[tuple[str, str]], newline: str = "\n", trailing_newline: bool = False) -> str:
    """Join ``(line, ending)`` pairs back into file content.

    Rows without an ending get *newline* unless they are last; the last row
    ends with its own ending (or *newline*) only when *trailing_newline*.
    """
    out: list[str] = []
    last = len(rows) - 1
    for idx, (line, ending) in enumerate(rows):
        if idx == last:
            ending = (ending or newline) if trailing_newline else ""
        elif not ending:
            ending = newline
        out.append(line + ending)
    return "".join(out)
