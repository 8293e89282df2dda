"""Error types surfaced to the interactive layer."""

from __future__ import annotations

from pathlib import Path


class TaskFileError(Exception):
    """The checklist file could not be read or written.

    Carries the path, the operation that failed and the underlying OS
    message so the UI can show a one-shot notice.
    """

    def __init__(self, path: Path | str, operation: str, reason: str) -> None:
        self.path = Path(path)
        self.operation = operation
        self.reason = reason
        super().__init__(f"Failed to {operation} {self.path}: {reason}")

    @classmethod
    def from_os_error(cls, path: Path | str, operation: str, exc: OSError) -> TaskFileError:
        reason = exc.strerror or str(exc)
        return cls(path, operation, reason)
