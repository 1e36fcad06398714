"""Tests for the command line interface."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from mdtoc.cli import build_parser, main, resolve_settings
from mdtoc.schemas import FormatType, InsertionMethod, LinkFormat


@pytest.fixture
def settings_path(tmp_path: Path) -> Path:
    """Settings file that does not exist yet."""
    return tmp_path / "settings.json"


class TestResolveSettings:
    """Tests for resolve_settings function."""

    def test_file_values_are_overridden_by_flags(self, settings_path: Path, tmp_path: Path) -> None:
        settings_path.write_text(json.dumps({"formatType": "numbers", "indentSize": 4}), encoding="utf-8")
        args = build_parser().parse_args(
            ["--settings", str(settings_path), "--indent", "3", "--no-links", "show", str(tmp_path / "x.md")]
        )

        settings = resolve_settings(args)

        assert settings.format_type is FormatType.NUMBERED
        assert settings.indent_size == 3
        assert settings.include_links is False

    def test_defaults_without_file_or_flags(self, settings_path: Path) -> None:
        args = build_parser().parse_args(["--settings", str(settings_path), "folder", "."])

        settings = resolve_settings(args)

        assert settings.link_format is LinkFormat.WIKILINK
        assert settings.insertion_method is InsertionMethod.BEGINNING


class TestMain:
    """Tests for main function."""

    def test_file_command_updates_document(self, settings_path: Path, tmp_path: Path, capsys) -> None:
        doc = tmp_path / "doc.md"
        doc.write_text("# Title\n\n## Part", encoding="utf-8")

        exit_code = main(["--settings", str(settings_path), "--link-format", "markdown", "file", str(doc)])

        assert exit_code == 0
        assert "updated" in capsys.readouterr().out
        assert doc.read_text(encoding="utf-8") == (
            "# Title\n\n## Table of Contents\n- [Title](#title)\n  - [Part](#part)\n\n## Part"
        )

    def test_file_command_reports_missing_file(self, settings_path: Path, tmp_path: Path, capsys) -> None:
        exit_code = main(["--settings", str(settings_path), "file", str(tmp_path / "missing.md")])

        assert exit_code == 1
        assert "missing.md" in capsys.readouterr().err

    def test_file_command_rejects_non_markdown(self, settings_path: Path, tmp_path: Path) -> None:
        doc = tmp_path / "doc.txt"
        doc.write_text("# Title", encoding="utf-8")

        assert main(["--settings", str(settings_path), "file", str(doc)]) == 1
        assert doc.read_text(encoding="utf-8") == "# Title"

    def test_folder_command(self, settings_path: Path, tmp_path: Path, capsys) -> None:
        folder = tmp_path / "notes"
        folder.mkdir()
        (folder / "a.md").write_text("# A", encoding="utf-8")
        (folder / "b.md").write_text("no headers", encoding="utf-8")

        exit_code = main(["--settings", str(settings_path), "--insert", "end", "folder", str(folder)])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "a.md: updated" in out
        assert "b.md: unchanged" in out
        assert (folder / "a.md").read_text(encoding="utf-8") == "# A\n\n## Table of Contents\n- [[#A]]"

    def test_folder_command_requires_directory(self, settings_path: Path, tmp_path: Path) -> None:
        assert main(["--settings", str(settings_path), "folder", str(tmp_path / "nope")]) == 1

    def test_show_prints_outline_without_writing(self, settings_path: Path, tmp_path: Path, capsys) -> None:
        doc = tmp_path / "doc.md"
        doc.write_text("# One\n## Two", encoding="utf-8")

        exit_code = main(["--settings", str(settings_path), "--format", "mixed", "show", str(doc)])

        assert exit_code == 0
        assert capsys.readouterr().out == "1. [[#One]]\n  - [[#Two]]\n"
        assert doc.read_text(encoding="utf-8") == "# One\n## Two"

    def test_show_rejects_non_markdown(self, settings_path: Path, tmp_path: Path, capsys) -> None:
        doc = tmp_path / "doc.txt"
        doc.write_text("# One", encoding="utf-8")

        exit_code = main(["--settings", str(settings_path), "show", str(doc)])

        assert exit_code == 1
        captured = capsys.readouterr()
        assert "not a Markdown file" in captured.err
        assert captured.out == ""

    def test_unknown_log_level_is_a_usage_error(self, settings_path: Path) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(["--settings", str(settings_path), "--log-level", "loud", "show", "x.md"])

        assert excinfo.value.code == 2

    def test_log_level_is_case_insensitive(self, settings_path: Path, tmp_path: Path) -> None:
        doc = tmp_path / "doc.md"
        doc.write_text("# One", encoding="utf-8")

        assert main(["--settings", str(settings_path), "--log-level", "debug", "show", str(doc)]) == 0

    def test_show_reports_empty_range(self, settings_path: Path, tmp_path: Path, capsys) -> None:
        doc = tmp_path / "doc.md"
        doc.write_text("# One", encoding="utf-8")

        exit_code = main(["--settings", str(settings_path), "--min-level", "2", "show", str(doc)])

        assert exit_code == 1
        assert "No headers found in the specified range" in capsys.readouterr().err

    def test_invalid_level_range_is_a_usage_error(self, settings_path: Path, tmp_path: Path) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(["--settings", str(settings_path), "--min-level", "4", "--max-level", "2", "show", "x.md"])

        assert excinfo.value.code == 2
