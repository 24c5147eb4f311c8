"""Tests for the click CLI."""

from datetime import date
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from textnote.cli import main
from textnote.config import Config
from textnote.core import ContentItem
from textnote.workflows import get_store, new_template


@pytest.fixture
def config(tmp_path):
    return Config(app_dir=str(tmp_path), section_names=["TODO", "NOTES"])


@pytest.fixture
def runner(config):
    with patch("textnote.cli.load_config", return_value=config):
        yield CliRunner()


def write_note(config, note_date, **sections):
    template = new_template(config, note_date)
    for name, text in sections.items():
        template.get_section(name).contents = [ContentItem(text=text)]
    get_store(config).overwrite(template)


class TestOpen:
    @patch("textnote.workflows.SubprocessEditor")
    def test_creates_and_opens(self, mock_editor, runner, config, tmp_path):
        result = runner.invoke(main, ["open", "--date", "2020-12-20"])
        assert result.exit_code == 0, result.output
        path = tmp_path / "2020-12-20.txt"
        assert path.exists()
        mock_editor.return_value.open.assert_called_once_with(path)

    @patch("textnote.workflows.SubprocessEditor")
    def test_copy_comma_separated(self, mock_editor, runner, config, tmp_path):
        write_note(config, date(2020, 12, 19), TODO="task", NOTES="note")
        result = runner.invoke(main, ["open", "-d", "2020-12-20", "-c", "TODO,NOTES"])
        assert result.exit_code == 0, result.output
        content = (tmp_path / "2020-12-20.txt").read_text()
        assert "task" in content
        assert "note" in content

    @patch("textnote.workflows.SubprocessEditor")
    def test_unknown_section_fails(self, mock_editor, runner, config):
        write_note(config, date(2020, 12, 19), TODO="task")
        result = runner.invoke(main, ["open", "-d", "2020-12-20", "-c", "Missing"])
        assert result.exit_code == 1
        assert "Error: section [Missing] not found" in result.output
        mock_editor.return_value.open.assert_not_called()

    def test_bad_date(self, runner):
        result = runner.invoke(main, ["open", "--date", "20/12/2020"])
        assert result.exit_code == 2
        assert "YYYY-MM-DD" in result.output


class TestShow:
    def test_prints_note(self, runner, config):
        write_note(config, date(2020, 12, 20), TODO="task")
        result = runner.invoke(main, ["show", "-d", "2020-12-20"])
        assert result.exit_code == 0
        assert result.output == "-^-[Sun] 20 Dec 2020-v-\n\n_p_TODO_q_\ntask\n_p_NOTES_q_\n\n\n\n"

    def test_missing_note(self, runner):
        result = runner.invoke(main, ["show", "-d", "2020-12-20"])
        assert result.exit_code == 1
        assert "does not exist" in result.output


class TestDeleteSection:
    def test_clears_section(self, runner, config, tmp_path):
        write_note(config, date(2020, 12, 20), TODO="task", NOTES="note")
        result = runner.invoke(main, ["delete-section", "TODO", "-d", "2020-12-20"])
        assert result.exit_code == 0, result.output
        content = (tmp_path / "2020-12-20.txt").read_text()
        assert "task" not in content
        assert "note" in content

    def test_unknown_section(self, runner, config):
        write_note(config, date(2020, 12, 20))
        result = runner.invoke(main, ["delete-section", "Missing", "-d", "2020-12-20"])
        assert result.exit_code == 1


class TestPath:
    def test_prints_path(self, runner, tmp_path):
        result = runner.invoke(main, ["path", "-d", "2020-12-20"])
        assert result.exit_code == 0
        assert result.output.strip() == str(tmp_path / "2020-12-20.txt")
