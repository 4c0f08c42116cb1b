"""VFileMessage — a diagnostic attached to a virtual file."""

from __future__ import annotations

from typing import Optional


class VFileMessage(Exception):
    """A message about a file: a lint warning, a parse error, a note.

    Raised by ``VFile.fail``; otherwise just collected on ``VFile.messages``.
    ``fatal`` is ``True`` for failures, ``False`` for warnings and ``None``
    for informational messages.
    """

    def __init__(
        self,
        reason: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
        origin: Optional[str] = None,
    ):
        super().__init__(reason)
        self.reason = reason
        self.line = line
        self.column = column
        self.source: Optional[str] = None
        self.rule_id: Optional[str] = None
        self.file: Optional[str] = None
        self.fatal: Optional[bool] = False

        if origin:
            if ":" in origin:
                self.source, self.rule_id = origin.split(":", 1)
            else:
                self.rule_id = origin

        self.name = f"{line or 1}:{column or 1}"

    def __str__(self) -> str:
        return self.reason

    def __repr__(self) -> str:
        return f"VFileMessage({self.name!r}, {self.reason!r}, fatal={self.fatal!r})"
