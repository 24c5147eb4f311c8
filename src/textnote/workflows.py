"""Shared workflow layer between the CLI and the template core.

Each workflow reads the notes it needs once, applies section transfers in
memory, and writes each changed note once at the end. A failure part way
through a batch returns before any write, so nothing partial is persisted.
"""

import logging
from datetime import date, timedelta

from .adapters.editor import SubprocessEditor
from .adapters.file_store import FileNoteStore
from .config import Config
from .core.errors import TextNoteError
from .core.template import Template, copy_section_contents, move_section_contents
from .ports import Editor, NoteStore

logger = logging.getLogger(__name__)


def get_store(config: Config) -> FileNoteStore:
    """Resolve note storage from config."""
    return FileNoteStore(config.notes_dir, config.file_time_format, config.file_ext)


def new_template(config: Config, note_date: date) -> Template:
    """Empty template for a date using the configured sections and format."""
    return Template(config.section_names, note_date, config.note_format())


def ensure_note(store: NoteStore, template: Template) -> bool:
    """Create the note file with empty sections if it does not exist yet."""
    return store.write_if_not_exists(template)


def _read_pair(store: NoteStore, src: Template, tgt: Template) -> None:
    store.read(src, operation="read-source")
    store.read(tgt, operation="read-target")


def copy_sections(store: NoteStore, src: Template, tgt: Template, section_names: list[str]) -> None:
    """Copy sections from the source note into the target note and save the target."""
    _read_pair(store, src, tgt)
    for name in section_names:
        try:
            copy_section_contents(src, tgt, name)
        except TextNoteError:
            logger.error(f"Cannot copy section [{name}] from {src.date} to {tgt.date}, nothing saved")
            raise
    store.overwrite(tgt, operation="write-target")
    logger.info(f"Copied sections {section_names} from {src.date} to {tgt.date}")


def move_sections(store: NoteStore, src: Template, tgt: Template, section_names: list[str]) -> None:
    """Move sections from the source note into the target note and save both."""
    _read_pair(store, src, tgt)
    for name in section_names:
        try:
            move_section_contents(src, tgt, name)
        except TextNoteError:
            logger.error(f"Cannot move section [{name}] from {src.date} to {tgt.date}, nothing saved")
            raise
    store.overwrite(src, operation="write-source")
    store.overwrite(tgt, operation="write-target")
    logger.info(f"Moved sections {section_names} from {src.date} to {tgt.date}")


def delete_sections(store: NoteStore, template: Template, section_names: list[str]) -> None:
    """Clear sections of a note and save it."""
    store.read(template)
    for name in section_names:
        template.delete_section_contents(name)
    store.overwrite(template)


def open_note(
    config: Config,
    note_date: date,
    copy: list[str] | tuple[str, ...] = (),
    delete: bool = False,
    store: NoteStore | None = None,
    editor: Editor | None = None,
) -> Template:
    """
    Ensure the note for a date exists, optionally pull sections from the
    previous day's note, then open it in the editor.

    `delete` turns the copy into a move and is a no-op without `copy`.
    """
    store = store or get_store(config)
    editor = editor or SubprocessEditor(config.resolve_editor())

    tgt = new_template(config, note_date)
    ensure_note(store, tgt)

    if copy:
        src = new_template(config, note_date - timedelta(days=1))
        if delete:
            move_sections(store, src, tgt, list(copy))
        else:
            copy_sections(store, src, tgt, list(copy))

    editor.open(store.path_for(tgt))
    return tgt
