"""Shared schemas for mdtoc."""

from mdtoc.schemas.headers import HeaderRecord, TocStructure
from mdtoc.schemas.options import FormatOptions, FormatType, InsertionMethod, LevelRange, LinkFormat
from mdtoc.schemas.outline import OutlineFailure, OutlineResult, OutlineSuccess
from mdtoc.schemas.settings import TocSettings

__all__ = [
    "FormatOptions",
    "FormatType",
    "HeaderRecord",
    "InsertionMethod",
    "LevelRange",
    "LinkFormat",
    "OutlineFailure",
    "OutlineResult",
    "OutlineSuccess",
    "TocSettings",
    "TocStructure",
]
