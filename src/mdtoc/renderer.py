"""Render header records as a Markdown outline."""

from __future__ import annotations

from typing import Sequence

from mdtoc.config import NO_HEADERS_IN_RANGE_MESSAGE
from mdtoc.schemas import (
    FormatOptions,
    FormatType,
    HeaderRecord,
    LevelRange,
    LinkFormat,
    OutlineFailure,
    OutlineResult,
    OutlineSuccess,
)

_BULLET_MARKER = "-"
_ORDINAL_MARKER = "1."


def generate_outline(headers: Sequence[HeaderRecord], options: FormatOptions) -> OutlineResult:
    """Render the headers within ``options.level_range`` as an outline.

    The shallowest included header always sits at zero indent; deeper ones are
    indented by ``indent_size`` spaces per level below it.

    Args:
        headers: Header records in document order.
        options: Formatting configuration.

    Returns:
        ``OutlineSuccess`` with the outline text and the number of included
        headers, or ``OutlineFailure`` when no header falls in the range.
    """
    included = filter_headers_by_level(headers, options.level_range)
    if not included:
        return OutlineFailure(error=NO_HEADERS_IN_RANGE_MESSAGE)

    lines = format_outline_lines(included, options)
    return OutlineSuccess(markdown="\n".join(lines), headers_found=len(included))


def filter_headers_by_level(headers: Sequence[HeaderRecord], level_range: LevelRange) -> list[HeaderRecord]:
    """Keep headers whose level lies in the inclusive range, in order."""
    return [header for header in headers if header.level in level_range]


def format_outline_lines(headers: Sequence[HeaderRecord], options: FormatOptions) -> list[str]:
    min_level = min(header.level for header in headers)
    lines: list[str] = []
    for header in headers:
        relative_level = header.level - min_level
        indent = " " * (relative_level * options.indent_size)
        marker = _marker_for(options.format_type, relative_level)
        lines.append(f"{indent}{marker} {_link_text(header, options)}")
    return lines


def _marker_for(format_type: FormatType, relative_level: int) -> str:
    if format_type is FormatType.BULLETED:
        return _BULLET_MARKER
    if format_type is FormatType.NUMBERED:
        # Markdown renumbers ordered lists itself.
        return _ORDINAL_MARKER
    return _ORDINAL_MARKER if relative_level == 0 else _BULLET_MARKER


def _link_text(header: HeaderRecord, options: FormatOptions) -> str:
    if not options.include_links:
        return header.text
    if options.link_format is LinkFormat.WIKILINK:
        return f"[[#{header.text}]]"
    return f"[{header.text}](#{header.anchor})"
