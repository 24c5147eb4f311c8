"""Error kinds raised by the template engine and its collaborators."""

from pathlib import Path


class TextNoteError(Exception):
    """Base class for all textnote errors."""

    pass


class SectionNotFoundError(TextNoteError):
    """Raised when a name-based lookup misses the section index."""

    def __init__(self, section: str, side: str | None = None):
        self.section = section
        self.side = side
        where = f" in {side}" if side else ""
        super().__init__(f"section [{section}] not found{where}")


class UnknownSectionError(TextNoteError):
    """Raised when raw text names a section that is not configured."""

    def __init__(self, section: str):
        self.section = section
        super().__init__(f"document contains unknown section [{section}]")


class MalformedDocumentError(TextNoteError):
    """Raised when raw text does not follow the note grammar."""

    def __init__(self, message: str, line_number: int | None = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class StorageError(TextNoteError):
    """Raised when reading or writing a note file fails."""

    def __init__(self, operation: str, path: Path | str | None = None, message: str = ""):
        self.operation = operation
        self.path = path
        detail = f" [{path}]" if path else ""
        suffix = f": {message}" if message else ""
        super().__init__(f"{operation} failed{detail}{suffix}")


class EditorError(TextNoteError):
    """Raised when the editor cannot be launched or exits non-zero."""

    def __init__(self, editor: str, message: str):
        self.editor = editor
        super().__init__(f"editor [{editor}] {message}")
