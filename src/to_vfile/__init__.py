# Package Root
from to_vfile.vfile import VFile
from to_vfile.message import VFileMessage
from to_vfile.factory import to_vfile, is_vfile
from to_vfile.urls import file_url_to_path
from to_vfile.binding import read, write, read_sync, write_sync, resolve_path, Callback
from to_vfile.options import ReadOptions, WriteOptions
from to_vfile.errors import VFileError, InvalidPathError, InvalidURLError, VFileIOError

__all__ = [
    "VFile", "VFileMessage", "to_vfile", "is_vfile", "file_url_to_path",
    "read", "write", "read_sync", "write_sync", "resolve_path", "Callback",
    "ReadOptions", "WriteOptions",
    "VFileError", "InvalidPathError", "InvalidURLError", "VFileIOError",
]
