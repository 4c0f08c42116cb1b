"""InMemoryBackend — pure in-process file tree.

Designed for fast, deterministic testing of the read/write bindings
without touching the real filesystem. No temp directories, no cleanup.

Usage:
    mem = InMemoryBackend("/project")
    mem.seed({"docs/readme.md": "# hi"})
    file = read_sync({"path": "docs/readme.md", "cwd": "/project"}, backend=mem)
"""

from __future__ import annotations

import errno
import os
from typing import Dict, Optional, Union

from to_vfile.config.config import get_config
from to_vfile.options import ReadOptions, WriteOptions


def _os_error(code: int, path: str) -> OSError:
    # OSError maps the errno to FileNotFoundError, FileExistsError, ...
    return OSError(code, os.strerror(code), path)


class _Node:
    __slots__ = ("kind", "raw_bytes")

    def __init__(self, kind: str, raw_bytes: Optional[bytes] = None):
        self.kind = kind
        self.raw_bytes = raw_bytes


class InMemoryBackend:

    def __init__(self, root: str = "/project"):
        self._root = self._normalize(root)
        self._nodes: Dict[str, _Node] = {"/": _Node(kind="dir")}
        self._ensure_dirs(self._root)

    @property
    def root(self) -> str:
        return self._root

    def seed(self, files: Dict[str, Union[str, bytes]]) -> None:
        """Pre-populate the tree. Relative keys are taken from the root."""
        for rel_path, content in files.items():
            abs_path = self.resolve(self._root, rel_path)
            self._ensure_dirs(self._parent(abs_path))
            if isinstance(content, str):
                content = content.encode("utf-8")
            self._nodes[abs_path] = _Node(kind="file", raw_bytes=content)

    def snapshot(self) -> Dict[str, bytes]:
        """Return every file as absolute path -> raw bytes."""
        return {
            path: node.raw_bytes or b""
            for path, node in sorted(self._nodes.items())
            if node.kind == "file"
        }

    def mkdir(self, path: str, recursive: bool = False) -> None:
        n = self.resolve(self._root, path)
        if n in self._nodes:
            return
        if recursive:
            self._ensure_dirs(n)
            return
        parent = self._nodes.get(self._parent(n))
        if not parent or parent.kind != "dir":
            raise _os_error(errno.ENOENT, path)
        self._nodes[n] = _Node(kind="dir")

    # ── Path helpers ────────────────────────────────────────────────

    def _is_absolute(self, path: str) -> bool:
        return path.startswith("/")

    def resolve(self, cwd: str, path: str) -> str:
        if self._is_absolute(path):
            return self._normalize(path)
        if not self._is_absolute(cwd):
            cwd = self._root + "/" + cwd
        return self._normalize(cwd + "/" + path)

    # ── File I/O ────────────────────────────────────────────────────

    def read_file(self, path: str, options: ReadOptions) -> Union[str, bytes]:
        node = self._nodes.get(self._normalize(path))
        if node is None:
            raise _os_error(errno.ENOENT, path)
        if node.kind == "dir":
            raise _os_error(errno.EISDIR, path)
        raw = node.raw_bytes or b""
        if options.encoding is None:
            return raw
        return raw.decode(options.encoding, errors="replace")

    def write_file(self, path: str, data: Union[str, bytes], options: WriteOptions) -> None:
        n = self._normalize(path)
        parent = self._nodes.get(self._parent(n))
        if not parent or parent.kind != "dir":
            raise _os_error(errno.ENOENT, path)

        existing = self._nodes.get(n)
        if existing is not None and existing.kind == "dir":
            raise _os_error(errno.EISDIR, path)
        if existing is not None and "x" in options.flag:
            raise _os_error(errno.EEXIST, path)

        if isinstance(data, str):
            data = data.encode(options.encoding or get_config().encoding)
        if existing is not None and options.flag.startswith("a"):
            data = (existing.raw_bytes or b"") + data
        self._nodes[n] = _Node(kind="file", raw_bytes=bytes(data))

    # ── Metadata ────────────────────────────────────────────────────

    def exists(self, path: str) -> bool:
        return self._normalize(path) in self._nodes

    # ── Internal ────────────────────────────────────────────────────

    def _normalize(self, p: str) -> str:
        parts = p.replace("\\", "/").split("/")
        stack: list[str] = []
        for part in parts:
            if part == "..":
                if stack:
                    stack.pop()
            elif part and part != ".":
                stack.append(part)
        return "/" + "/".join(stack)

    def _parent(self, abs_path: str) -> str:
        idx = abs_path.rfind("/")
        return abs_path[:idx] if idx > 0 else "/"

    def _ensure_dirs(self, abs_path: str) -> None:
        current = ""
        for part in abs_path.split("/"):
            if not part:
                continue
            current += "/" + part
            if current not in self._nodes:
                self._nodes[current] = _Node(kind="dir")
