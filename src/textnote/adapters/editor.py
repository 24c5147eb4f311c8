"""Editor adapter - subprocess wrapper for $EDITOR."""

import logging
import shlex
import subprocess
from pathlib import Path

from ..core.errors import EditorError

logger = logging.getLogger(__name__)


class SubprocessEditor:
    """
    Editor subprocess adapter.

    Implements Editor protocol. The command may carry arguments,
    e.g. "code --wait".
    """

    def __init__(self, command: str = "vi"):
        self.command = command

    def open(self, path: Path) -> None:
        """Open a file and block until the editor exits."""
        argv = shlex.split(self.command) + [str(path)]
        logger.debug(f"Launching editor: {argv}")
        try:
            proc = subprocess.run(argv)
        except FileNotFoundError:
            raise EditorError(self.command, "not found")
        if proc.returncode != 0:
            logger.error(f"Editor exited with status {proc.returncode}")
            raise EditorError(self.command, f"exited with status {proc.returncode}")
