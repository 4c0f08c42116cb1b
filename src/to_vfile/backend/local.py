"""LocalBackend — FileBackend backed by the real filesystem."""

from __future__ import annotations

import os
from typing import Union

from to_vfile.config.config import get_config
from to_vfile.options import READ_FLAGS, WRITE_FLAGS, ReadOptions, WriteOptions

_BINARY = getattr(os, "O_BINARY", 0)


class LocalBackend:

    # ── Path helpers ────────────────────────────────────────────────

    def resolve(self, cwd: str, path: str) -> str:
        if os.path.isabs(path):
            return os.path.normpath(path)
        return os.path.abspath(os.path.join(cwd, path))

    # ── File I/O ────────────────────────────────────────────────────

    def read_file(self, path: str, options: ReadOptions) -> Union[str, bytes]:
        fd = os.open(path, READ_FLAGS[options.flag] | _BINARY)
        with os.fdopen(fd, "rb") as f:
            raw = f.read()
        if options.encoding is None:
            return raw
        return raw.decode(options.encoding, errors="replace")

    def write_file(self, path: str, data: Union[str, bytes], options: WriteOptions) -> None:
        if isinstance(data, str):
            data = data.encode(options.encoding or get_config().encoding)
        fd = os.open(path, WRITE_FLAGS[options.flag] | _BINARY, options.mode)
        with os.fdopen(fd, "ab" if "a" in options.flag else "wb") as f:
            f.write(data)
