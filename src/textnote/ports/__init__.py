"""Ports - interfaces/protocols for external dependencies."""

from .note_store import NoteStore
from .editor import Editor

__all__ = [
    "NoteStore",
    "Editor",
]
