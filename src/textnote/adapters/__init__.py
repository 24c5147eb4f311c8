"""Adapters - I/O implementations of ports."""

from .file_store import FileNoteStore
from .editor import SubprocessEditor

__all__ = [
    "FileNoteStore",
    "SubprocessEditor",
]
