"""Non-blocking read/write with a callback or an awaitable.

    file = await read("readme.md", "utf-8")

    def done(error, file):
        ...
    read("readme.md", "utf-8", done)
    read("readme.md", done)          # options omitted

Without a callback the call returns a coroutine that resolves to the VFile.
With a callback the work is scheduled right away and the callback receives
``(None, file)`` or ``(error, None)`` exactly once. Either way, failures
(including a missing ``path``) are delivered through that channel and never
raised out of ``read``/``write`` themselves.
"""

from __future__ import annotations

import asyncio
import functools
import threading
from concurrent.futures import CancelledError as FutureCancelledError
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Awaitable, Callable, Optional, Union

from to_vfile.backend.base import FileBackend
from to_vfile.binding.operations import read_into, write_from
from to_vfile.config.config import get_config
from to_vfile.factory import Description, to_vfile
from to_vfile.options import ReadOptionsLike, WriteOptionsLike, read_options, write_options
from to_vfile.vfile import VFile

Callback = Callable[[Optional[BaseException], Optional[VFile]], Any]
Operation = Callable[..., VFile]

_executor: Optional[ThreadPoolExecutor] = None
_executor_lock = threading.Lock()


def _get_executor() -> ThreadPoolExecutor:
    """Pool for callback-mode calls made outside of a running event loop."""
    global _executor
    with _executor_lock:
        if _executor is None:
            _executor = ThreadPoolExecutor(
                max_workers=max(1, get_config().callback_workers),
                thread_name_prefix="to_vfile",
            )
        return _executor


async def _deferred(task: Callable[[], VFile]) -> VFile:
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, task)


def _with_callback(task: Callable[[], VFile], callback: Callback) -> Union[asyncio.Future, Future]:
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        future: Union[asyncio.Future, Future] = _get_executor().submit(task)
    else:
        future = loop.run_in_executor(None, task)

    def _done(fut) -> None:
        # A cancelled future (e.g. loop shutdown) still reports once.
        try:
            error = fut.exception()
        except (asyncio.CancelledError, FutureCancelledError) as cancelled:
            error = cancelled
        if error is not None:
            callback(error, None)
        else:
            callback(None, fut.result())

    future.add_done_callback(_done)
    return future


def _dispatch(
    op: Operation,
    file: VFile,
    options: Any,
    backend: Optional[FileBackend],
    callback: Optional[Callback],
) -> Union[Awaitable[VFile], asyncio.Future, Future]:
    task = functools.partial(op, file, options, backend)
    if callback is None:
        return _deferred(task)
    return _with_callback(task, callback)


def read(
    description: Description = None,
    options: Union[ReadOptionsLike, Callback] = None,
    callback: Optional[Callback] = None,
    *,
    backend: Optional[FileBackend] = None,
) -> Union[Awaitable[VFile], asyncio.Future, Future]:
    """Create a virtual file and read it in, asynchronously."""
    if callback is None and callable(options):
        callback, options = options, None
    file = to_vfile(description)
    return _dispatch(read_into, file, read_options(options), backend, callback)


def write(
    description: Description = None,
    options: Union[WriteOptionsLike, Callback] = None,
    callback: Optional[Callback] = None,
    *,
    backend: Optional[FileBackend] = None,
) -> Union[Awaitable[VFile], asyncio.Future, Future]:
    """Create a virtual file and write it out, asynchronously.

    An unset ``value`` writes an empty file.
    """
    if callback is None and callable(options):
        callback, options = options, None
    file = to_vfile(description)
    return _dispatch(write_from, file, write_options(options), backend, callback)
