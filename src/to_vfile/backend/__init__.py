from to_vfile.backend.base import FileBackend
from to_vfile.backend.local import LocalBackend
from to_vfile.backend.memory import InMemoryBackend

__all__ = [
    "FileBackend",
    "LocalBackend", "InMemoryBackend",
]
