"""Test setup for mdtoc."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from mdtoc.schemas import FormatOptions, HeaderRecord, LevelRange, LinkFormat  # noqa: E402


@pytest.fixture
def sample_headers() -> list[HeaderRecord]:
    """Three nested headers, one per level."""
    return [
        HeaderRecord(level=1, text="Main Title", anchor="main-title", line_number=1),
        HeaderRecord(level=2, text="Section One", anchor="section-one", line_number=4),
        HeaderRecord(level=3, text="Subsection A", anchor="subsection-a", line_number=7),
    ]


@pytest.fixture
def markdown_options() -> FormatOptions:
    """Bulleted outline with Markdown links and two-space indent."""
    return FormatOptions(
        format_type="bulleted",
        indent_size=2,
        include_links=True,
        link_format=LinkFormat.MARKDOWN,
        level_range=LevelRange(min=1, max=6),
    )
