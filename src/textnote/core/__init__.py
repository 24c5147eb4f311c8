"""Functional core - pure template logic with no I/O."""

from .errors import (
    EditorError,
    MalformedDocumentError,
    SectionNotFoundError,
    StorageError,
    TextNoteError,
    UnknownSectionError,
)
from .grammar import DEFAULT_FORMAT, NoteFormat, canonical_path
from .section import ContentItem, Section
from .template import (
    Template,
    copy_section_contents,
    delete_section_contents,
    move_section_contents,
)

__all__ = [
    # Errors
    "TextNoteError",
    "SectionNotFoundError",
    "UnknownSectionError",
    "MalformedDocumentError",
    "StorageError",
    "EditorError",
    # Grammar
    "NoteFormat",
    "DEFAULT_FORMAT",
    "canonical_path",
    # Template
    "ContentItem",
    "Section",
    "Template",
    "copy_section_contents",
    "move_section_contents",
    "delete_section_contents",
]
