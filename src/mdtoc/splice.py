"""Splice a rendered outline into a Markdown document."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable

from mdtoc.config import MDTOC_TOC_HEADING
from mdtoc.extractor import match_header, trim_line
from mdtoc.schemas import InsertionMethod

logger = logging.getLogger(__name__)

_METADATA_DELIMITER = "---"


class _Step(Enum):
    """Stages of the beginning-of-document insertion walk."""

    METADATA = "metadata"
    BLANK_LINES = "blank_lines"
    TITLE = "title"
    DONE = "done"


def _skip_metadata(lines: list[str], index: int) -> int:
    if index >= len(lines) or trim_line(lines[index]) != _METADATA_DELIMITER:
        return index
    for closing in range(index + 1, len(lines)):
        if trim_line(lines[closing]) == _METADATA_DELIMITER:
            return closing + 1
    # Unclosed delimiter: not a metadata block.
    return index


def _skip_blank_lines(lines: list[str], index: int) -> int:
    while index < len(lines) and not trim_line(lines[index]):
        index += 1
    return index


def _skip_title(lines: list[str], index: int) -> int:
    if index >= len(lines):
        return index
    matched = match_header(lines[index])
    if matched is None or matched[0] != 1:
        return index
    index += 1
    if index < len(lines) and not trim_line(lines[index]):
        index += 1
    return index


_STEPS: dict[_Step, tuple[Callable[[list[str], int], int], _Step]] = {
    _Step.METADATA: (_skip_metadata, _Step.BLANK_LINES),
    _Step.BLANK_LINES: (_skip_blank_lines, _Step.TITLE),
    _Step.TITLE: (_skip_title, _Step.DONE),
}


def find_insertion_index(lines: list[str]) -> int:
    """Return the line index where a beginning-of-document outline goes.

    Walks past, in order: a ``---`` metadata block opening on the first line,
    any blank lines after it, and a level-1 title together with one blank line
    following it. The outline never lands inside the metadata block and is
    never separated from the title.
    """
    index = 0
    step = _Step.METADATA
    while step is not _Step.DONE:
        advance, step_after = _STEPS[step]
        index = advance(lines, index)
        step = step_after
    return index


def build_toc_section(outline: str, heading: str = MDTOC_TOC_HEADING) -> str:
    """Prefix the outline with the table of contents heading."""
    return f"{heading}\n{outline}"


def splice_outline_into_document(
    text: str,
    outline: str,
    mode: InsertionMethod | str,
    *,
    cursor_line: int | None = None,
    heading: str = MDTOC_TOC_HEADING,
) -> str:
    """Insert the outline section into ``text`` according to ``mode``.

    Args:
        text: The original document.
        outline: Rendered outline markup.
        mode: ``beginning``, ``end`` or ``cursor``.
        cursor_line: 0-based line index supplied by the editing surface for
            ``cursor`` mode. Out-of-range values are clamped.
        heading: Heading line placed above the outline.

    Returns:
        The updated document. In ``cursor`` mode without a cursor line the
        document is returned unchanged.
    """
    method = InsertionMethod(mode)
    lines = text.split("\n")
    section = build_toc_section(outline, heading)

    if method is InsertionMethod.BEGINNING:
        index = find_insertion_index(lines)
        lines[index:index] = [section, ""]
    elif method is InsertionMethod.END:
        lines.extend(["", section])
    elif cursor_line is None:
        logger.debug("Cursor insertion requested without a cursor position; document left unchanged")
        return text
    else:
        index = min(max(cursor_line, 0), len(lines))
        lines[index:index] = [section]

    return "\n".join(lines)
