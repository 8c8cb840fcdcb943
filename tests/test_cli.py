"""Tests for the CLI interface."""

import pytest
from pathlib import Path
from unittest.mock import patch, Mock

from typer.testing import CliRunner

from notedoc.cli import app, describe_run, generate_output_path
from notedoc.formatting.ir import Run


runner = CliRunner()


class TestGenerateOutputPath:
    """Tests for output path generation."""

    def test_swaps_extension(self):
        """Test that the extension follows the output format."""
        output = generate_output_path(Path("/path/to/notes.md"), "docx")

        assert output.name == "notes.docx"
        assert output.parent == Path("/path/to")

    def test_never_overwrites_input(self):
        """Test that a .txt input exported as txt gets a suffix."""
        output = generate_output_path(Path("/path/to/notes.txt"), "txt")

        assert output.name == "notes-notes.txt"

    def test_custom_output_directory(self):
        output = generate_output_path(Path("/path/to/notes.md"), "pdf", Path("/out"))

        assert output == Path("/out/notes.pdf")


class TestDescribeRun:
    """Tests for the block outline run summary."""

    def test_flags(self):
        assert describe_run(Run(text="x", bold=True, italic=True)) == "b+i@24"
        assert describe_run(Run(text="x")) == "-@24"


class TestCLI:
    """Tests for CLI commands."""

    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "notedoc v" in result.stdout

    def test_help_flag(self):
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "Markdown" in result.stdout

    def test_missing_file_error(self, tmp_path: Path):
        result = runner.invoke(app, [str(tmp_path / "nonexistent.md")])

        assert result.exit_code != 0

    def test_unknown_format(self, tmp_markdown_file: Path):
        result = runner.invoke(app, [str(tmp_markdown_file), "--format", "odt"])

        assert result.exit_code == 2
        assert "Unknown format" in result.stdout

    def test_invalid_log_level(
        self, monkeypatch: pytest.MonkeyPatch, tmp_markdown_file: Path
    ):
        """Test that a bad log level is reported instead of raising."""
        monkeypatch.chdir(tmp_markdown_file.parent)
        monkeypatch.setattr("notedoc.config._settings", None)
        monkeypatch.setenv("NOTEDOC_LOG_LEVEL", "chatty")

        result = runner.invoke(app, [str(tmp_markdown_file)])

        assert result.exit_code == 2
        assert "Invalid configuration" in result.stdout
        assert not (tmp_markdown_file.parent / "notes.docx").exists()

    def test_single_file_export(self, tmp_markdown_file: Path):
        result = runner.invoke(app, [str(tmp_markdown_file)])

        assert result.exit_code == 0
        assert (tmp_markdown_file.parent / "notes.docx").exists()

    def test_output_option(self, tmp_markdown_file: Path, tmp_path: Path):
        output = tmp_path / "minutes.html"
        result = runner.invoke(
            app, [str(tmp_markdown_file), "-o", str(output), "-f", "html"]
        )

        assert result.exit_code == 0
        assert output.read_text(encoding="utf-8").startswith("<!DOCTYPE html>")

    def test_dump_does_not_write(self, tmp_markdown_file: Path):
        result = runner.invoke(app, [str(tmp_markdown_file), "--dump"])

        assert result.exit_code == 0
        assert "Weekly" in result.stdout
        assert not (tmp_markdown_file.parent / "notes.docx").exists()

    def test_failed_export_exit_code(self, tmp_path: Path):
        blank = tmp_path / "blank.md"
        blank.write_text("\n")

        result = runner.invoke(app, [str(blank)])

        assert result.exit_code == 1
        assert "no text" in result.stdout

    @patch("notedoc.cli.NoteExporter")
    def test_folder_processing(self, mock_exporter_class: Mock, tmp_path: Path):
        """Test that folder mode exports every Markdown file."""
        (tmp_path / "a.md").write_text("# A")
        sub = tmp_path / "sub"
        sub.mkdir()
        (sub / "b.markdown").write_text("# B")
        (tmp_path / "ignored.txt").write_text("not markdown")

        mock_exporter = Mock()
        mock_exporter.export_file.return_value = Mock(blocks=[])
        mock_exporter_class.return_value = mock_exporter

        result = runner.invoke(app, [str(tmp_path), "--format", "pdf"])

        assert result.exit_code == 0
        assert mock_exporter.export_file.call_count == 2
        outputs = {call.args[1].name for call in mock_exporter.export_file.call_args_list}
        assert outputs == {"a.pdf", "b.pdf"}

    def test_folder_ignores_output_option(self, tmp_path: Path):
        (tmp_path / "a.md").write_text("# A")

        result = runner.invoke(app, [str(tmp_path), "-o", str(tmp_path / "x.docx")])

        assert result.exit_code == 0
        assert "ignored in folder mode" in result.stdout
        assert (tmp_path / "a.docx").exists()

    def test_empty_folder(self, tmp_path: Path):
        result = runner.invoke(app, [str(tmp_path)])

        assert result.exit_code == 0
        assert "No Markdown files" in result.stdout
