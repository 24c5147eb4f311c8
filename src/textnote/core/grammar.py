"""Delimiter grammar shared by note parsing and rendering."""

from dataclasses import dataclass
from datetime import date
from pathlib import Path


@dataclass(frozen=True)
class NoteFormat:
    """
    The fixed-delimiter text format of a note file.

    A note starts with a date header line followed by blank lines, then one
    marker line per section:

        -^-[Sun] 20 Dec 2020-v-

        _p_TODO_q_
        ...
    """

    header_prefix: str = "-^-"
    header_suffix: str = "-v-"
    header_time_format: str = "[%a] %d %b %Y"
    header_trailing_newlines: int = 1
    section_prefix: str = "_p_"
    section_suffix: str = "_q_"
    section_trailing_newlines: int = 3

    def __post_init__(self):
        for field_name in ("header_prefix", "header_suffix", "section_prefix", "section_suffix"):
            if not getattr(self, field_name):
                raise ValueError(f"{field_name} must not be empty")
        if self.header_trailing_newlines < 0 or self.section_trailing_newlines < 0:
            raise ValueError("trailing newline counts must not be negative")

    # Rendering

    def date_header(self, note_date: date) -> str:
        """Date header block, including the blank lines after it."""
        line = f"{self.header_prefix}{note_date.strftime(self.header_time_format)}{self.header_suffix}"
        return line + "\n" + "\n" * self.header_trailing_newlines

    def section_marker(self, name: str) -> str:
        return f"{self.section_prefix}{name}{self.section_suffix}\n"

    def empty_section_body(self) -> str:
        return "\n" * self.section_trailing_newlines

    # Parsing

    def is_date_header(self, line: str) -> bool:
        return (
            len(line) >= len(self.header_prefix) + len(self.header_suffix)
            and line.startswith(self.header_prefix)
            and line.endswith(self.header_suffix)
        )

    def header_date_text(self, line: str) -> str:
        """Date text wrapped by the header delimiters."""
        return line[len(self.header_prefix):len(line) - len(self.header_suffix)]

    def is_section_marker(self, line: str) -> bool:
        return line.startswith(self.section_prefix)

    def section_name(self, line: str) -> str | None:
        """Section name of a marker line, or None if the closing delimiter is missing."""
        line = line.rstrip()
        if len(line) < len(self.section_prefix) + len(self.section_suffix):
            return None
        if not line.endswith(self.section_suffix):
            return None
        return line[len(self.section_prefix):len(line) - len(self.section_suffix)]


DEFAULT_FORMAT = NoteFormat()


def canonical_path(root: Path | str, note_date: date, time_format: str, extension: str) -> Path:
    """File path for the note of a given date. Pure, no I/O."""
    return Path(root) / f"{note_date.strftime(time_format)}.{extension}"
