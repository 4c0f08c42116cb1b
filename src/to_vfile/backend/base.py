"""FileBackend — the filesystem a VFile is read from and written to.

Implementations:
    LocalBackend    — thin wrapper over os / os.path    (production)
    InMemoryBackend — pure in-process file tree         (testing)

Backends only provide blocking primitives. The binding layer decides
whether a call blocks the caller or runs in an executor.
"""

from __future__ import annotations

from typing import Protocol, Union, runtime_checkable

from to_vfile.options import ReadOptions, WriteOptions


@runtime_checkable
class FileBackend(Protocol):
    """Minimal contract that all file backends must implement.

    Text reads replace undecodable bytes with U+FFFD instead of failing.
    """

    # ── Path helpers (pure, no I/O) ─────────────────────────────────

    def resolve(self, cwd: str, path: str) -> str: ...

    # ── File I/O ────────────────────────────────────────────────────

    def read_file(self, path: str, options: ReadOptions) -> Union[str, bytes]: ...
    def write_file(self, path: str, data: Union[str, bytes], options: WriteOptions) -> None: ...
