"""Dated note documents - pure template logic, no I/O."""

import logging
from datetime import date

from .errors import MalformedDocumentError, SectionNotFoundError, UnknownSectionError
from .grammar import DEFAULT_FORMAT, NoteFormat, canonical_path
from .section import ContentItem, Section

logger = logging.getLogger(__name__)


class Template:
    """
    One date's note document.

    Sections keep the order of the configured names. `section_idx` maps each
    name to its position in `sections` and is updated on every append, so
    name lookups never scan the list.
    """

    def __init__(self, section_names: list[str], note_date: date, fmt: NoteFormat | None = None):
        self.date = note_date
        self.fmt = fmt or DEFAULT_FORMAT
        self.sections: list[Section] = [Section(name) for name in section_names]
        # Duplicate names collapse here: the last position wins
        self.section_idx: dict[str, int] = {}
        for i, section in enumerate(self.sections):
            self.section_idx[section.name] = i

    def get_section(self, name: str, side: str | None = None) -> Section:
        """Look up a section by name, raising SectionNotFoundError if absent."""
        idx = self.section_idx.get(name)
        if idx is None:
            raise SectionNotFoundError(name, side)
        return self.sections[idx]

    def append_section(self, name: str, *contents: ContentItem) -> Section:
        """Append a section that is not part of the configured list."""
        if name in self.section_idx:
            raise ValueError(f"section [{name}] already exists")
        section = Section(name, *contents)
        self.sections.append(section)
        self.section_idx[name] = len(self.sections) - 1
        return section

    def file_name(self, time_format: str, extension: str) -> str:
        return canonical_path("", self.date, time_format, extension).name

    # Transfer

    def copy_section_contents(self, src: "Template", name: str) -> None:
        """Append the contents of `src`'s section to this template's section."""
        tgt_section = self.get_section(name, "target")
        src_section = src.get_section(name, "source")
        tgt_section.extend(src_section.contents)

    def delete_section_contents(self, name: str) -> None:
        """Clear a section's contents. Deleting an empty section is a no-op."""
        self.get_section(name).clear()

    # Rendering

    def render(self) -> str:
        """Render the note text. Same state always gives identical output."""
        parts = [self.fmt.date_header(self.date)]
        for section in self.sections:
            parts.append(self.fmt.section_marker(section.name))
            parts.append(section.render(self.fmt.empty_section_body()))
        return "".join(parts)

    def render_bytes(self) -> bytes:
        return self.render().encode("utf-8")

    # Parsing

    def populate(self, raw: str | bytes) -> None:
        """
        Replace every section's contents with those found in raw note text.

        Each section's body becomes a single header-less ContentItem with
        leading and trailing blank lines trimmed; blank bodies give an empty
        section. Sections missing from the text are emptied. The template is
        left unchanged when parsing fails.
        """
        if isinstance(raw, bytes):
            try:
                raw = raw.decode("utf-8")
            except UnicodeDecodeError as e:
                raise MalformedDocumentError(f"note is not valid UTF-8: {e.reason}") from e
        lines = raw.removeprefix("\ufeff").replace("\r\n", "\n").split("\n")

        header = lines[0].rstrip()
        if not self.fmt.is_date_header(header):
            raise MalformedDocumentError("missing date header", 1)
        self._check_header_date(header)

        bodies: dict[str, list[str]] = {}
        current: str | None = None
        for line_number, line in enumerate(lines[1:], start=2):
            if self.fmt.is_section_marker(line):
                name = self.fmt.section_name(line)
                if name is None:
                    raise MalformedDocumentError(f"ill-formed section marker {line!r}", line_number)
                if not name:
                    raise MalformedDocumentError("empty section name", line_number)
                if name not in self.section_idx:
                    raise UnknownSectionError(name)
                if name in bodies:
                    raise MalformedDocumentError(f"duplicate section [{name}]", line_number)
                bodies[name] = []
                current = name
            elif current is None:
                if line.strip():
                    raise MalformedDocumentError("content before first section marker", line_number)
            else:
                bodies[current].append(line)

        for section in self.sections:
            body = _trim_blank_lines(bodies.get(section.name, []))
            section.contents = [ContentItem(text="\n".join(body))] if body else []

    def _check_header_date(self, line: str) -> None:
        found = self.fmt.header_date_text(line)
        expected = self.date.strftime(self.fmt.header_time_format)
        if found != expected:
            logger.warning(f"Date header [{found}] does not match note date [{expected}]")

    def __repr__(self):
        return f"Template(date={self.date!r}, sections={self.sections!r})"


def _trim_blank_lines(lines: list[str]) -> list[str]:
    start = 0
    end = len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return lines[start:end]


def copy_section_contents(src: Template, tgt: Template, name: str) -> None:
    """Append `src`'s section contents to `tgt`'s section of the same name."""
    tgt.copy_section_contents(src, name)


def move_section_contents(src: Template, tgt: Template, name: str) -> None:
    """Copy a section from `src` to `tgt`, then clear it in `src`."""
    # Resolve both sides first so a miss mutates neither template
    src.get_section(name, "source")
    tgt.get_section(name, "target")
    tgt.copy_section_contents(src, name)
    src.delete_section_contents(name)


def delete_section_contents(template: Template, name: str) -> None:
    template.delete_section_contents(name)
