"""Outline formatting options."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class FormatType(str, Enum):
    """List marker style for outline entries."""

    BULLETED = "bulleted"
    NUMBERED = "numbered"
    MIXED = "mixed"


class LinkFormat(str, Enum):
    """Hyperlink syntax for outline entries."""

    MARKDOWN = "markdown"
    WIKILINK = "wikilink"


class InsertionMethod(str, Enum):
    """Where the rendered outline goes in the document."""

    BEGINNING = "beginning"
    END = "end"
    CURSOR = "cursor"


class LevelRange(BaseModel):
    """Inclusive range of header levels kept in the outline."""

    model_config = ConfigDict(frozen=True)

    min: int = Field(default=1, ge=1, le=6)
    max: int = Field(default=6, ge=1, le=6)

    def __contains__(self, level: object) -> bool:
        return isinstance(level, int) and self.min <= level <= self.max


class FormatOptions(BaseModel):
    """Rendering configuration for a single outline."""

    model_config = ConfigDict(frozen=True)

    format_type: FormatType = FormatType.BULLETED
    indent_size: int = Field(default=2, gt=0)
    include_links: bool = True
    link_format: LinkFormat = LinkFormat.MARKDOWN
    level_range: LevelRange = Field(default_factory=LevelRange)

    @model_validator(mode="after")
    def check_level_range(self) -> FormatOptions:
        if self.level_range.min > self.level_range.max:
            raise ValueError(
                f"level_range.min ({self.level_range.min}) exceeds level_range.max ({self.level_range.max})"
            )
        return self
