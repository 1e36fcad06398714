"""Anchor slugs for Markdown headers."""

from __future__ import annotations

import re

# ASCII-only word characters: anchors already written into existing documents
# drop accented letters, and must keep doing so.
_DISALLOWED_RE = re.compile(r"[^A-Za-z0-9_\s-]")
_WHITESPACE_RE = re.compile(r"\s+")
_HYPHENS_RE = re.compile(r"-+")


def slugify(text: str) -> str:
    """Derive the base anchor slug for header text.

    Punctuation is removed without substitution, so ``"API/REST Endpoints"``
    becomes ``"apirest-endpoints"`` and ``"Q&A Section"`` becomes
    ``"qa-section"``.
    """
    slug = _DISALLOWED_RE.sub("", text.lower())
    slug = _WHITESPACE_RE.sub("-", slug)
    slug = _HYPHENS_RE.sub("-", slug)
    return slug.strip("-")


class AnchorAllocator:
    """Hand out unique anchors for one document.

    The first occurrence of a base slug is returned bare; each later one gets
    ``-1``, ``-2``, ... appended. Use a fresh allocator per document.
    """

    def __init__(self) -> None:
        self._counts: dict[str, int] = {}

    def allocate(self, base: str) -> str:
        """Return a unique anchor for ``base`` and record the allocation."""
        seen = self._counts.get(base, 0)
        self._counts[base] = seen + 1
        return base if seen == 0 else f"{base}-{seen}"

    def anchor_for(self, text: str) -> str:
        """Slugify ``text`` and allocate the result."""
        return self.allocate(slugify(text))

    def count(self, base: str) -> int:
        """How many times ``base`` has been allocated so far."""
        return self._counts.get(base, 0)
