"""Persisted TOC settings."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator
from pydantic.alias_generators import to_camel

from mdtoc.exceptions import SettingsError
from mdtoc.schemas.options import FormatOptions, FormatType, InsertionMethod, LevelRange, LinkFormat

# Values written by earlier releases of the note-taking plugin.
_LEGACY_FORMAT_TYPES = {"bullets": "bulleted", "numbers": "numbered"}
_LEGACY_LINK_FORMATS = {"obsidian": "wikilink"}


class TocSettings(BaseModel):
    """Host settings that drive outline generation and insertion.

    Attributes:
        format_type: Marker style for outline entries.
        indent_size: Spaces per nesting level.
        include_links: Whether entries link to their headers.
        link_format: Link syntax used when ``include_links`` is set.
        min_header_level: Shallowest header level included in the outline.
        max_header_level: Deepest header level included in the outline.
        insertion_method: Where the outline is spliced into the document.
    """

    # Also accepts the camelCase keys of the plugin's data.json.
    model_config = ConfigDict(extra="ignore", alias_generator=to_camel, populate_by_name=True)

    format_type: FormatType = FormatType.BULLETED
    indent_size: int = Field(default=2, gt=0)
    include_links: bool = True
    link_format: LinkFormat = LinkFormat.WIKILINK
    min_header_level: int = Field(default=1, ge=1, le=6)
    max_header_level: int = Field(default=6, ge=1, le=6)
    insertion_method: InsertionMethod = InsertionMethod.BEGINNING

    @field_validator("format_type", mode="before")
    @classmethod
    def normalize_format_type(cls, v: object) -> object:
        """Map legacy ``bullets``/``numbers`` values onto the current names."""
        if isinstance(v, str):
            return _LEGACY_FORMAT_TYPES.get(v.strip().lower(), v.strip().lower())
        return v

    @field_validator("link_format", mode="before")
    @classmethod
    def normalize_link_format(cls, v: object) -> object:
        """Map the legacy ``obsidian`` link format onto ``wikilink``."""
        if isinstance(v, str):
            return _LEGACY_LINK_FORMATS.get(v.strip().lower(), v.strip().lower())
        return v

    @model_validator(mode="after")
    def check_level_order(self) -> TocSettings:
        """Reject an empty header level range."""
        if self.min_header_level > self.max_header_level:
            err = (
                f"min_header_level ({self.min_header_level}) cannot exceed "
                f"max_header_level ({self.max_header_level})"
            )
            raise ValueError(err)
        return self

    def to_format_options(self) -> FormatOptions:
        """Build the rendering options for one outline."""
        return FormatOptions(
            format_type=self.format_type,
            indent_size=self.indent_size,
            include_links=self.include_links,
            link_format=self.link_format,
            level_range=LevelRange(min=self.min_header_level, max=self.max_header_level),
        )

    @classmethod
    def load(cls, path: Path) -> TocSettings:
        """Load settings from a JSON file, falling back to defaults.

        Keys missing from the file keep their default values. A missing file
        yields the defaults.

        Args:
            path: Location of the JSON settings file.

        Returns:
            The merged settings.

        Raises:
            SettingsError: If the file cannot be read or does not validate.
        """
        if not path.exists():
            return cls()
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise SettingsError(f"Cannot read settings file {path}: {exc}") from exc
        if not raw.strip():
            return cls()
        try:
            return cls.model_validate_json(raw)
        except ValidationError as exc:
            raise SettingsError(f"Invalid settings file {path}: {exc}") from exc

    def save(self, path: Path) -> None:
        """Write settings to ``path`` as JSON."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.model_dump_json(indent=2) + "\n", encoding="utf-8")
