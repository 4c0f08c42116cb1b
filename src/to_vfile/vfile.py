"""VFile — an in-memory value object describing a file.

A VFile holds a path (with its history), the directory relative paths are
resolved against, and optionally the file's content. It is not tied to an
open descriptor: constructing, inspecting and discarding one never touches
the disk. Reading and writing live in ``to_vfile.binding``.
"""

from __future__ import annotations

import os
from typing import Any, Dict, Iterable, List, Optional, Union
from urllib.parse import ParseResult, SplitResult

from to_vfile.config.config import get_config
from to_vfile.message import VFileMessage
from to_vfile.urls import file_url_to_path

Value = Union[str, bytes]

# Path-like fields are applied in this order so that, e.g., dirname + stem +
# extname compose into a full path.
_PATH_FIELDS = ("history", "path", "basename", "stem", "extname", "dirname")


def _assert_non_empty(part: Any, name: str) -> None:
    if not part:
        raise ValueError(f"`{name}` cannot be empty")


def _assert_part(part: Optional[str], name: str) -> None:
    if part and (os.sep in part or (os.altsep and os.altsep in part)):
        raise ValueError(f"`{name}` cannot be a path: did not expect `{os.sep}`")


def _assert_path(path: Optional[str], name: str) -> None:
    if not path:
        raise ValueError(f"Setting `{name}` requires `path` to be set too")


class VFile:
    def __init__(
        self,
        *,
        history: Optional[Iterable[Any]] = None,
        path: Any = None,
        basename: Optional[str] = None,
        stem: Optional[str] = None,
        extname: Optional[str] = None,
        dirname: Optional[str] = None,
        cwd: Any = None,
        value: Optional[Value] = None,
        data: Optional[Dict[str, Any]] = None,
    ):
        self.history: List[str] = []
        self.messages: List[VFileMessage] = []
        self.data: Dict[str, Any] = dict(data) if data else {}
        # Fixed at construction: later os.chdir() calls do not move the file.
        self.cwd: str = os.fspath(cwd) if cwd is not None else os.getcwd()
        self.value: Optional[Value] = value

        fields = {
            "history": history,
            "path": path,
            "basename": basename,
            "stem": stem,
            "extname": extname,
            "dirname": dirname,
        }
        for name in _PATH_FIELDS:
            field_value = fields[name]
            if field_value is None:
                continue
            if name == "history":
                self.history = [_coerce_path(p) for p in field_value]
            else:
                setattr(self, name, field_value)

    # ── Path ────────────────────────────────────────────────────────

    @property
    def path(self) -> Optional[str]:
        return self.history[-1] if self.history else None

    @path.setter
    def path(self, path: Any) -> None:
        path = _coerce_path(path)
        _assert_non_empty(path, "path")
        if self.path != path:
            self.history.append(path)

    @property
    def dirname(self) -> Optional[str]:
        return os.path.dirname(_trimmed(self.path)) if self.path is not None else None

    @dirname.setter
    def dirname(self, dirname: Optional[str]) -> None:
        _assert_path(self.basename, "dirname")
        self.path = os.path.join(dirname or "", self.basename)

    @property
    def basename(self) -> Optional[str]:
        return os.path.basename(_trimmed(self.path)) if self.path is not None else None

    @basename.setter
    def basename(self, basename: str) -> None:
        _assert_non_empty(basename, "basename")
        _assert_part(basename, "basename")
        self.path = os.path.join(self.dirname or "", basename)

    @property
    def extname(self) -> Optional[str]:
        if self.path is None:
            return None
        return os.path.splitext(self.basename)[1]

    @extname.setter
    def extname(self, extname: Optional[str]) -> None:
        _assert_part(extname, "extname")
        _assert_path(self.path, "extname")
        if extname:
            if not extname.startswith("."):
                raise ValueError("`extname` must start with `.`")
            if "." in extname[1:]:
                raise ValueError("`extname` cannot contain multiple dots")
        self.path = os.path.join(self.dirname or "", self.stem + (extname or ""))

    @property
    def stem(self) -> Optional[str]:
        if self.path is None:
            return None
        return os.path.splitext(self.basename)[0]

    @stem.setter
    def stem(self, stem: str) -> None:
        _assert_non_empty(stem, "stem")
        _assert_part(stem, "stem")
        self.path = os.path.join(self.dirname or "", stem + (self.extname or ""))

    # ── Content ─────────────────────────────────────────────────────

    def to_string(self, encoding: Optional[str] = None) -> str:
        if self.value is None:
            return ""
        if isinstance(self.value, str):
            return self.value
        if encoding is None:
            encoding = get_config().encoding
        return bytes(self.value).decode(encoding)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"VFile(path={self.path!r}, cwd={self.cwd!r})"

    # ── Messages ────────────────────────────────────────────────────

    def message(
        self,
        reason: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
        origin: Optional[str] = None,
    ) -> VFileMessage:
        msg = VFileMessage(reason, line, column, origin)
        if self.path:
            msg.name = f"{self.path}:{msg.name}"
            msg.file = self.path
        msg.fatal = False
        self.messages.append(msg)
        return msg

    def info(self, reason: str, line: Optional[int] = None,
             column: Optional[int] = None, origin: Optional[str] = None) -> VFileMessage:
        msg = self.message(reason, line, column, origin)
        msg.fatal = None
        return msg

    def fail(self, reason: str, line: Optional[int] = None,
             column: Optional[int] = None, origin: Optional[str] = None) -> VFileMessage:
        msg = self.message(reason, line, column, origin)
        msg.fatal = True
        raise msg


def _trimmed(path: str) -> str:
    """``path`` without trailing separators, so "foo/bar/" names "bar"."""
    seps = os.sep + (os.altsep or "")
    return path.rstrip(seps) or path


def _coerce_path(path: Any) -> Any:
    """Turn ``PathLike`` and ``file:`` URL values into plain strings."""
    if isinstance(path, (ParseResult, SplitResult)):
        return file_url_to_path(path)
    if isinstance(path, os.PathLike):
        path = os.fspath(path)
    if isinstance(path, bytes):
        path = path.decode("utf-8")
    return path
