"""Header record models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class HeaderRecord(BaseModel):
    """One ATX header detected in a document.

    Attributes:
        level: Number of leading ``#`` characters (1-6).
        text: Header content, trimmed but otherwise exactly as written.
        anchor: Slug unique among the headers of the same document.
        line_number: 1-based source line, for diagnostics only.
    """

    model_config = ConfigDict(frozen=True)

    level: int = Field(..., ge=1, le=6)
    text: str
    anchor: str
    line_number: int = Field(default=1, ge=1)


class TocStructure(BaseModel):
    """Headers grouped by level, alongside the flat document-order list."""

    headers: list[HeaderRecord] = Field(default_factory=list)
    hierarchy: dict[int, list[HeaderRecord]] = Field(default_factory=dict)
