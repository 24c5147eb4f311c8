"""Note storage interface."""

from pathlib import Path
from typing import Protocol

from ..core.template import Template


class NoteStore(Protocol):
    """Interface for reading and writing one note file per date."""

    def path_for(self, template: Template) -> Path:
        """Get the file path for a template's date."""
        ...

    def exists(self, template: Template) -> bool:
        """Check if a note file exists for the template's date."""
        ...

    def read(self, template: Template, operation: str = "read") -> None:
        """Read the note file and populate the template from it."""
        ...

    def overwrite(self, template: Template, operation: str = "write") -> None:
        """Write the rendered template, replacing any existing file."""
        ...

    def write_if_not_exists(self, template: Template) -> bool:
        """Write the rendered template only if no file exists. Returns True if written."""
        ...
