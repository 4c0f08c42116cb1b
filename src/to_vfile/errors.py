"""Error taxonomy for to_vfile.

    InvalidPathError  — no usable ``path`` when an I/O path is resolved
    InvalidURLError   — URL input that cannot become a local path
    VFileIOError      — a filesystem failure, wrapping the native OSError
"""

from __future__ import annotations


class VFileError(Exception):
    pass


class InvalidPathError(VFileError, ValueError):
    def __init__(self, message: str = "Cannot resolve file: `path` is not set"):
        super().__init__(message)


class InvalidURLError(VFileError, ValueError):
    pass


class VFileIOError(VFileError, OSError):
    """An ``OSError`` raised by the backend, re-raised with a stable class.

    ``errno``, ``strerror`` and ``filename`` are copied from the native error,
    so ``str(err)`` reads exactly like the original (``[Errno 2] No such file
    or directory: '...'``). The original is kept on ``native``.
    """

    def __init__(self, native: OSError):
        if native.errno is not None:
            super().__init__(native.errno, native.strerror, native.filename)
        else:
            super().__init__(*native.args)
        self.native = native

    @property
    def kind(self) -> str:
        return type(self.native).__name__

    @classmethod
    def wrap(cls, err: OSError) -> "VFileIOError":
        if isinstance(err, cls):
            return err
        return cls(err)
