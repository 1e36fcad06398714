"""Document pipeline: Markdown text -> headers -> outline -> updated text."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from mdtoc.exceptions import UnsupportedDocumentError
from mdtoc.extractor import extract_headers
from mdtoc.file_utils import is_markdown_file, iter_markdown_files, read_text_async, write_text_async
from mdtoc.renderer import generate_outline
from mdtoc.schemas import HeaderRecord, OutlineFailure, OutlineResult, TocSettings
from mdtoc.splice import splice_outline_into_document

logger = logging.getLogger(__name__)


@dataclass
class TocUpdate:
    """Outcome of adding a table of contents to one document.

    Attributes:
        headers: Headers extracted from the original text.
        outline: Render result, or None when the document had no headers.
        content: The updated document, or None when nothing changed.
    """

    headers: list[HeaderRecord]
    outline: OutlineResult | None = None
    content: str | None = None

    @property
    def changed(self) -> bool:
        return self.content is not None


@dataclass
class BatchReport:
    """Per-file outcome of a folder run.

    Attributes:
        updated: Files that received a table of contents.
        skipped: Files with nothing to add (no headers, or none in range).
        failed: Files whose update failed, with the error message.
    """

    updated: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)
    failed: dict[Path, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed


def add_toc_to_text(
    text: str,
    settings: TocSettings | None = None,
    *,
    cursor_line: int | None = None,
) -> TocUpdate:
    """Generate an outline for ``text`` and splice it in.

    Args:
        text: Markdown document.
        settings: Formatting and insertion settings. Uses defaults if None.
        cursor_line: Cursor position for ``cursor`` insertion.

    Returns:
        The extracted headers, the render result and the new text. ``content``
        is None when there are no headers or none within the level range.
    """
    opts = settings or TocSettings()
    headers = extract_headers(text)
    if not headers:
        return TocUpdate(headers=headers)

    outline = generate_outline(headers, opts.to_format_options())
    if isinstance(outline, OutlineFailure):
        return TocUpdate(headers=headers, outline=outline)

    content = splice_outline_into_document(
        text,
        outline.markdown,
        opts.insertion_method,
        cursor_line=cursor_line,
    )
    if content == text:
        return TocUpdate(headers=headers, outline=outline)
    return TocUpdate(headers=headers, outline=outline, content=content)


async def add_toc_to_file(
    path: Path,
    settings: TocSettings | None = None,
    *,
    cursor_line: int | None = None,
) -> bool:
    """Add a table of contents to a Markdown file in place.

    Args:
        path: The Markdown file.
        settings: Formatting and insertion settings. Uses defaults if None.
        cursor_line: Cursor position for ``cursor`` insertion.

    Returns:
        True if the file was rewritten, False if there was nothing to add.

    Raises:
        UnsupportedDocumentError: If ``path`` is not a Markdown file.
        OSError: If reading or writing the file fails.
    """
    if not is_markdown_file(path):
        raise UnsupportedDocumentError(f"Not a Markdown file: {path}")

    text = await read_text_async(path)
    update = add_toc_to_text(text, settings, cursor_line=cursor_line)

    if not update.headers:
        logger.info("No headers found", extra={"path": str(path)})
        return False
    if update.content is None:
        reason = update.outline.error if isinstance(update.outline, OutlineFailure) else "unchanged"
        logger.info("Table of contents not added", extra={"path": str(path), "reason": reason})
        return False

    await write_text_async(path, update.content)
    logger.info(
        "Table of contents added",
        extra={"path": str(path), "headers_found": update.outline.headers_found},
    )
    return True


async def add_toc_to_folder(folder: Path, settings: TocSettings | None = None) -> BatchReport:
    """Add a table of contents to every Markdown file under ``folder``.

    Files are processed one at a time. A file that fails to read or write is
    recorded in the report and the batch moves on; earlier writes are kept.
    """
    report = BatchReport()
    for path in iter_markdown_files(folder):
        try:
            changed = await add_toc_to_file(path, settings)
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Failed to update document", extra={"path": str(path), "error": str(exc)})
            report.failed[path] = str(exc)
            continue
        if changed:
            report.updated.append(path)
        else:
            report.skipped.append(path)

    logger.info(
        "Folder processed",
        extra={
            "folder": str(folder),
            "updated": len(report.updated),
            "skipped": len(report.skipped),
            "failed": len(report.failed),
        },
    )
    return report
