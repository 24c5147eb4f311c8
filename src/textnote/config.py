"""Configuration management for TextNote."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from .core.grammar import NoteFormat

logger = logging.getLogger(__name__)

TEXTNOTE_HOME = Path(os.environ.get("TEXTNOTE_HOME", Path.home() / ".textnote"))
CONFIG_FILE = TEXTNOTE_HOME / "textnote.conf"


@dataclass
class Config:
    """TextNote configuration."""

    app_dir: str = str(TEXTNOTE_HOME)
    file_time_format: str = "%Y-%m-%d"
    file_ext: str = "txt"
    header_prefix: str = "-^-"
    header_suffix: str = "-v-"
    header_time_format: str = "[%a] %d %b %Y"
    header_trailing_newlines: int = 1
    section_prefix: str = "_p_"
    section_suffix: str = "_q_"
    section_trailing_newlines: int = 3
    section_names: list[str] = field(default_factory=lambda: ["TODO", "DONE", "NOTES"])
    editor: str = ""

    @property
    def notes_dir(self) -> Path:
        return Path(self.app_dir).expanduser()

    def note_format(self) -> NoteFormat:
        """Build the note grammar. Raises ValueError on empty delimiters."""
        return NoteFormat(
            header_prefix=self.header_prefix,
            header_suffix=self.header_suffix,
            header_time_format=self.header_time_format,
            header_trailing_newlines=self.header_trailing_newlines,
            section_prefix=self.section_prefix,
            section_suffix=self.section_suffix,
            section_trailing_newlines=self.section_trailing_newlines,
        )

    def resolve_editor(self) -> str:
        """Configured editor, then $EDITOR, then vi."""
        return self.editor or os.environ.get("EDITOR", "") or "vi"


def _parse_int(key: str, value: str, default: int) -> int:
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Invalid integer for {key.upper()}: {value!r}, using {default}")
        return default


def load_config(path: Path | None = None) -> Config:
    """Load configuration from textnote.conf file."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        logger.debug(f"No config file at {path}, using defaults")
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = value.strip()

        # Quoted values keep '#' and surrounding whitespace: "value" # comment
        if value.startswith('"') or value.startswith("'"):
            quote = value[0]
            end_quote = value.find(quote, 1)
            if end_quote != -1:
                value = value[1:end_quote]
            else:
                value = value[1:]
        else:
            if "#" in value:
                value = value.split("#")[0].strip()

        match key:
            case "app_dir":
                config.app_dir = value
            case "file_time_format":
                config.file_time_format = value
            case "file_ext":
                config.file_ext = value.lstrip(".")
            case "header_prefix":
                config.header_prefix = value
            case "header_suffix":
                config.header_suffix = value
            case "header_time_format":
                config.header_time_format = value
            case "header_trailing_newlines":
                config.header_trailing_newlines = _parse_int(key, value, config.header_trailing_newlines)
            case "section_prefix":
                config.section_prefix = value
            case "section_suffix":
                config.section_suffix = value
            case "section_trailing_newlines":
                config.section_trailing_newlines = _parse_int(key, value, config.section_trailing_newlines)
            case "section_names":
                config.section_names = [s.strip() for s in value.split(",") if s.strip()]
            case "editor":
                config.editor = value
            case _:
                logger.debug(f"Ignoring unknown config key {key.upper()}")

    return config
