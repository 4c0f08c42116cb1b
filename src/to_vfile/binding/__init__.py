from to_vfile.binding.asynchronous import Callback, read, write
from to_vfile.binding.operations import resolve_path
from to_vfile.binding.sync import read_sync, write_sync

__all__ = [
    "read", "write", "read_sync", "write_sync",
    "resolve_path", "Callback",
]
