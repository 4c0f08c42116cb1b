"""Path resolution and the read/write operations shared by every binding.

``read_sync``/``write_sync`` call these directly; ``read``/``write`` run the
same functions in an executor and only differ in how the outcome is handed
back to the caller.
"""

from __future__ import annotations

import time
from typing import Optional

from to_vfile.backend.base import FileBackend
from to_vfile.backend.local import LocalBackend
from to_vfile.config.config import get_config
from to_vfile.errors import InvalidPathError, VFileIOError
from to_vfile.logging.diagnostic import log_io_done, log_io_start
from to_vfile.options import ReadOptions, WriteOptions
from to_vfile.vfile import VFile

_default_backend = LocalBackend()


def get_backend(backend: Optional[FileBackend] = None) -> FileBackend:
    return backend if backend is not None else _default_backend


def resolve_path(file: VFile, backend: Optional[FileBackend] = None) -> str:
    """Absolute path used for I/O on ``file``.

    An absolute ``path`` is used as-is and ``cwd`` is never looked at;
    otherwise ``path`` is joined onto ``cwd``.
    """
    if not file.path:
        raise InvalidPathError()
    return get_backend(backend).resolve(file.cwd, file.path)


def read_into(file: VFile, options: ReadOptions, backend: Optional[FileBackend] = None) -> VFile:
    backend = get_backend(backend)
    fp = resolve_path(file, backend)
    file.value = _run("read", fp, lambda: backend.read_file(fp, options))
    return file


def write_from(file: VFile, options: WriteOptions, backend: Optional[FileBackend] = None) -> VFile:
    backend = get_backend(backend)
    fp = resolve_path(file, backend)
    data = file.value if file.value is not None else ""
    _run("write", fp, lambda: backend.write_file(fp, data, options))
    return file


def _run(op, fp, call):
    log = get_config().log_io
    if log:
        log_io_start(op, fp)
    start = time.time()
    try:
        result = call()
    except OSError as err:
        if log:
            log_io_done(op, fp, (time.time() - start) * 1000, err)
        raise VFileIOError.wrap(err) from err
    if log:
        log_io_done(op, fp, (time.time() - start) * 1000)
    return result
