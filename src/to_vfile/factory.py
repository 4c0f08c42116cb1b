"""to_vfile — turn a path, buffer, URL or descriptor into a VFile."""

from __future__ import annotations

import os
from typing import Any, Mapping, Union
from urllib.parse import ParseResult, SplitResult

from to_vfile.urls import file_url_to_path
from to_vfile.vfile import VFile

Description = Union[None, str, bytes, bytearray, memoryview, os.PathLike, ParseResult, SplitResult,
                    Mapping[str, Any], VFile]


def is_vfile(value: Any) -> bool:
    """Return True if ``value`` can be used as a VFile as-is.

    This is a capability check, not an ``isinstance`` check: any object that
    is not a string, buffer or mapping and exposes both ``message`` and
    ``messages`` is accepted, so other implementations of the same value
    type pass through untouched.
    """
    if value is None or isinstance(value, (str, bytes, bytearray, memoryview, Mapping)):
        return False
    return hasattr(value, "message") and hasattr(value, "messages")


def to_vfile(description: Description = None) -> VFile:
    """Create a virtual file from a description.

    Strings, buffers, path-like objects and ``file:`` URLs become the path.
    An existing virtual file is returned unchanged (same instance). A mapping
    provides the constructor fields (``path``, ``cwd``, ``dirname``, ``stem``,
    ``extname``, ``value``, ...). ``None`` gives an empty file.
    """
    if is_vfile(description):
        return description  # type: ignore[return-value]
    if description is None:
        return VFile()
    if isinstance(description, str):
        return VFile(path=description)
    if isinstance(description, (bytes, bytearray, memoryview)):
        return VFile(path=bytes(description).decode("utf-8"))
    if isinstance(description, (ParseResult, SplitResult)):
        return VFile(path=file_url_to_path(description))
    if isinstance(description, os.PathLike):
        return VFile(path=description)
    if isinstance(description, Mapping):
        return VFile(**description)
    raise TypeError(f"Cannot create a VFile from {type(description).__name__}")
