"""Tests for configuration loading."""

from pathlib import Path

import pytest

from textnote.config import Config, load_config
from textnote.core import NoteFormat


@pytest.fixture
def conf_file(tmp_path):
    return tmp_path / "textnote.conf"


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(tmp_path / "absent.conf")
        assert config == Config()

    def test_parses_values(self, conf_file):
        conf_file.write_text(
            "# comment\n"
            "APP_DIR = ~/notes\n"
            "FILE_EXT = .md\n"
            "SECTION_NAMES = todo, done ,, notes\n"
            "SECTION_TRAILING_NEWLINES = 2\n"
            'HEADER_TIME_FORMAT = "%A %d %B" # quoted keeps spaces\n'
            "EDITOR = nano # inline comment\n"
        )
        config = load_config(conf_file)
        assert config.app_dir == "~/notes"
        assert config.notes_dir == Path.home() / "notes"
        assert config.file_ext == "md"
        assert config.section_names == ["todo", "done", "notes"]
        assert config.section_trailing_newlines == 2
        assert config.header_time_format == "%A %d %B"
        assert config.editor == "nano"

    def test_quoted_hash(self, conf_file):
        conf_file.write_text("SECTION_PREFIX = '#['\n")
        assert load_config(conf_file).section_prefix == "#["

    def test_invalid_int_keeps_default(self, conf_file, caplog):
        conf_file.write_text("HEADER_TRAILING_NEWLINES = lots\n")
        config = load_config(conf_file)
        assert config.header_trailing_newlines == 1
        assert "Invalid integer" in caplog.text

    def test_ignores_unknown_keys_and_junk(self, conf_file):
        conf_file.write_text("NOT_A_KEY = 1\njust some text\n")
        assert load_config(conf_file) == Config()


class TestConfig:
    def test_note_format(self):
        config = Config(section_prefix="<<", section_suffix=">>")
        fmt = config.note_format()
        assert fmt == NoteFormat(section_prefix="<<", section_suffix=">>")

    def test_note_format_rejects_empty_delimiter(self):
        with pytest.raises(ValueError):
            Config(header_suffix="").note_format()

    def test_resolve_editor_prefers_config(self, monkeypatch):
        monkeypatch.setenv("EDITOR", "emacs")
        assert Config(editor="nano").resolve_editor() == "nano"

    def test_resolve_editor_falls_back_to_env(self, monkeypatch):
        monkeypatch.setenv("EDITOR", "emacs")
        assert Config().resolve_editor() == "emacs"

    def test_resolve_editor_default(self, monkeypatch):
        monkeypatch.delenv("EDITOR", raising=False)
        assert Config().resolve_editor() == "vi"
