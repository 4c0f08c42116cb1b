"""Blocking read/write of a virtual file."""

from __future__ import annotations

from typing import Optional

from to_vfile.backend.base import FileBackend
from to_vfile.binding.operations import read_into, write_from
from to_vfile.factory import Description, to_vfile
from to_vfile.options import ReadOptionsLike, WriteOptionsLike, read_options, write_options
from to_vfile.vfile import VFile


def read_sync(
    description: Description = None,
    options: ReadOptionsLike = None,
    *,
    backend: Optional[FileBackend] = None,
) -> VFile:
    """Create a virtual file and read it in, synchronously.

    Without an encoding, ``value`` is ``bytes``; with one, it is ``str``.
    Raises ``InvalidPathError`` when there is no path and ``VFileIOError``
    when the file cannot be read.
    """
    file = to_vfile(description)
    return read_into(file, read_options(options), backend)


def write_sync(
    description: Description = None,
    options: WriteOptionsLike = None,
    *,
    backend: Optional[FileBackend] = None,
) -> VFile:
    """Create a virtual file and write it out, synchronously.

    An unset ``value`` writes an empty file.
    """
    file = to_vfile(description)
    return write_from(file, write_options(options), backend)
