"""Read/write options.

Callers may pass an encoding name, a mapping of fields, or an options
instance; ``read_options`` and ``write_options`` normalize all of them.
"""

from __future__ import annotations

import codecs
import os
from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional, Union

READ_FLAGS = {
    "r": os.O_RDONLY,
    "r+": os.O_RDWR,
}

WRITE_FLAGS = {
    "w": os.O_WRONLY | os.O_CREAT | os.O_TRUNC,
    "w+": os.O_RDWR | os.O_CREAT | os.O_TRUNC,
    "a": os.O_WRONLY | os.O_CREAT | os.O_APPEND,
    "a+": os.O_RDWR | os.O_CREAT | os.O_APPEND,
    "x": os.O_WRONLY | os.O_CREAT | os.O_EXCL,
    "wx": os.O_WRONLY | os.O_CREAT | os.O_EXCL,
}


@dataclass(frozen=True)
class ReadOptions:
    encoding: Optional[str] = None
    flag: str = "r"

    def __post_init__(self) -> None:
        _check_encoding(self.encoding)
        if self.flag not in READ_FLAGS:
            raise ValueError(f"Unknown read flag: {self.flag!r}")


@dataclass(frozen=True)
class WriteOptions:
    encoding: Optional[str] = None
    mode: int = 0o666
    flag: str = "w"

    def __post_init__(self) -> None:
        _check_encoding(self.encoding)
        if self.flag not in WRITE_FLAGS:
            raise ValueError(f"Unknown write flag: {self.flag!r}")


ReadOptionsLike = Union[None, str, Mapping[str, Any], ReadOptions]
WriteOptionsLike = Union[None, str, Mapping[str, Any], WriteOptions]


def _check_encoding(encoding: Optional[str]) -> None:
    if encoding is not None:
        codecs.lookup(encoding)


def _build(cls: type, value: Any) -> Any:
    if value is None:
        return cls()
    if isinstance(value, cls):
        return value
    if isinstance(value, str):
        return cls(encoding=value)
    if isinstance(value, Mapping):
        known = {f.name for f in fields(cls)}
        unknown = set(value) - known
        if unknown:
            raise TypeError(f"Unknown {cls.__name__} fields: {', '.join(sorted(unknown))}")
        return cls(**value)
    raise TypeError(f"Expected an encoding name, a mapping or {cls.__name__}, got {type(value).__name__}")


def read_options(value: ReadOptionsLike) -> ReadOptions:
    return _build(ReadOptions, value)


def write_options(value: WriteOptionsLike) -> WriteOptions:
    return _build(WriteOptions, value)
