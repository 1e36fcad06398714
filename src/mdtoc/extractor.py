"""Extract ATX headers from Markdown text."""

from __future__ import annotations

import re
from typing import Iterable

from mdtoc.anchors import AnchorAllocator
from mdtoc.schemas import HeaderRecord, TocStructure

_HEADER_RE = re.compile(r"^(#{1,6})\s+(.+)$")
# Editors may leave a byte-order mark at the start of the first line.
_EDGE_RE = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")


def trim_line(line: str) -> str:
    """Strip surrounding whitespace and byte-order marks from ``line``."""
    return _EDGE_RE.sub("", line)


def match_header(line: str) -> tuple[int, str] | None:
    """Return ``(level, text)`` if ``line`` is an ATX header, else None."""
    match = _HEADER_RE.match(trim_line(line))
    if not match:
        return None
    return len(match.group(1)), match.group(2).strip()


def extract_headers(text: str, allocator: AnchorAllocator | None = None) -> list[HeaderRecord]:
    """Scan ``text`` line by line and return its headers in document order.

    Lines inside fenced code blocks are not treated specially: anything that
    looks like a header is one.

    Args:
        text: Raw Markdown document.
        allocator: Anchor allocator to use. A fresh one is created when None,
            so anchors never depend on previously processed documents.

    Returns:
        Header records with document-unique anchors. Empty for blank input.
    """
    if not text or not text.strip():
        return []

    anchors = allocator if allocator is not None else AnchorAllocator()
    headers: list[HeaderRecord] = []
    for index, line in enumerate(text.split("\n")):
        matched = match_header(line)
        if matched is None:
            continue
        level, header_text = matched
        headers.append(
            HeaderRecord(
                level=level,
                text=header_text,
                anchor=anchors.anchor_for(header_text),
                line_number=index + 1,
            )
        )
    return headers


def build_toc_structure(headers: Iterable[HeaderRecord]) -> TocStructure:
    """Group headers by level, keeping document order within each level."""
    ordered = list(headers)
    hierarchy: dict[int, list[HeaderRecord]] = {}
    for header in ordered:
        hierarchy.setdefault(header.level, []).append(header)
    return TocStructure(headers=ordered, hierarchy=hierarchy)
