"""File-based note storage adapter."""

import logging
from pathlib import Path

from ..core.errors import StorageError
from ..core.grammar import canonical_path
from ..core.template import Template

logger = logging.getLogger(__name__)


class FileNoteStore:
    """
    File-based note storage.

    Implements NoteStore protocol. Each day gets one plain-text file named
    after its date.
    """

    def __init__(self, notes_dir: Path | str, time_format: str = "%Y-%m-%d", extension: str = "txt"):
        self.notes_dir = Path(notes_dir).expanduser()
        self.time_format = time_format
        self.extension = extension

    def path_for(self, template: Template) -> Path:
        """Get the file path for a template's date."""
        return canonical_path(self.notes_dir, template.date, self.time_format, self.extension)

    def exists(self, template: Template) -> bool:
        """Check if a note file exists for the template's date."""
        return self.path_for(template).exists()

    def read(self, template: Template, operation: str = "read") -> None:
        """Read the note file and populate the template from it."""
        path = self.path_for(template)
        try:
            raw = path.read_bytes()
        except OSError as e:
            raise StorageError(operation, path, str(e)) from e
        template.populate(raw)
        logger.debug(f"Read note {path}")

    def overwrite(self, template: Template, operation: str = "write") -> None:
        """Write the rendered template, replacing any existing file."""
        path = self.path_for(template)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(template.render_bytes())
        except OSError as e:
            raise StorageError(operation, path, str(e)) from e
        logger.debug(f"Wrote note {path}")

    def write_if_not_exists(self, template: Template) -> bool:
        """Write the rendered template only if no file exists. Returns True if written."""
        if self.exists(template):
            return False
        self.overwrite(template)
        logger.info(f"Created note {self.path_for(template)}")
        return True
