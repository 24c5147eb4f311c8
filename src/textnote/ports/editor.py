"""Editor interface."""

from pathlib import Path
from typing import Protocol


class Editor(Protocol):
    """Interface for opening a note file for interactive editing."""

    def open(self, path: Path) -> None:
        """Open a file and block until the editor exits."""
        ...
