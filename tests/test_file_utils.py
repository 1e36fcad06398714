"""Tests for file utilities module."""

from __future__ import annotations

from pathlib import Path

import pytest

from mdtoc.file_utils import is_markdown_file, iter_markdown_files, read_text_async, write_text_async


class TestIsMarkdownFile:
    """Tests for is_markdown_file function."""

    @pytest.mark.parametrize(("name", "expected"), [("a.md", True), ("B.MD", True), ("c.txt", False), ("md", False)])
    def test_checks_suffix(self, name: str, expected: bool) -> None:
        assert is_markdown_file(Path(name)) is expected


class TestIterMarkdownFiles:
    """Tests for iter_markdown_files function."""

    def test_finds_nested_markdown_files_sorted(self, tmp_path: Path) -> None:
        (tmp_path / "sub").mkdir()
        (tmp_path / "b.md").write_text("# B")
        (tmp_path / "a.md").write_text("# A")
        (tmp_path / "sub" / "c.md").write_text("# C")
        (tmp_path / "readme.txt").write_text("# not markdown")

        result = iter_markdown_files(tmp_path)

        assert result == [tmp_path / "a.md", tmp_path / "b.md", tmp_path / "sub" / "c.md"]

    def test_skips_directories_named_like_markdown(self, tmp_path: Path) -> None:
        (tmp_path / "folder.md").mkdir()

        assert iter_markdown_files(tmp_path) == []

    def test_empty_folder(self, tmp_path: Path) -> None:
        assert iter_markdown_files(tmp_path) == []


class TestReadTextAsync:
    """Tests for read_text_async function."""

    @pytest.mark.asyncio
    async def test_reads_text_content(self, tmp_path: Path) -> None:
        """Reads text content from file."""
        path = tmp_path / "test.md"
        path.write_text("# Hello", encoding="utf-8")

        result = await read_text_async(path)

        assert result == "# Hello"

    @pytest.mark.asyncio
    async def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            await read_text_async(tmp_path / "missing.md")


class TestWriteTextAsync:
    """Tests for write_text_async function."""

    @pytest.mark.asyncio
    async def test_writes_text_content(self, tmp_path: Path) -> None:
        """Writes text content to file."""
        path = tmp_path / "test.md"

        await write_text_async(path, "# Written")

        assert path.read_text(encoding="utf-8") == "# Written"
