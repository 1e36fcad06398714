"""File helpers for reading, writing and enumerating Markdown documents."""

from __future__ import annotations

import asyncio
from pathlib import Path

from mdtoc.config import MARKDOWN_SUFFIX


def is_markdown_file(path: Path) -> bool:
    """Check whether ``path`` names a Markdown document by its suffix."""
    return path.suffix.lower() == MARKDOWN_SUFFIX


def iter_markdown_files(folder: Path) -> list[Path]:
    """Collect every Markdown file under ``folder``, recursively.

    Args:
        folder: Directory to search.

    Returns:
        Markdown file paths sorted by path, so batches run in a stable order.
    """
    return sorted(path for path in folder.rglob("*") if path.is_file() and is_markdown_file(path))


async def read_text_async(path: Path, encoding: str = "utf-8") -> str:
    """Read text from a file asynchronously using a thread pool.

    Args:
        path: Path to the file to read.
        encoding: Text encoding to use.

    Returns:
        The file contents as a string.
    """
    return await asyncio.to_thread(path.read_text, encoding=encoding)


async def write_text_async(path: Path, content: str, encoding: str = "utf-8") -> None:
    """Write text to a file asynchronously using a thread pool.

    Args:
        path: Path to the file to write.
        content: Text content to write.
        encoding: Text encoding to use.
    """
    await asyncio.to_thread(path.write_text, content, encoding=encoding)
