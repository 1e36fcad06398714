"""mdtoc: generate and insert a table of contents for Markdown documents."""

from mdtoc.anchors import AnchorAllocator, slugify
from mdtoc.exceptions import MdtocError, SettingsError, UnsupportedDocumentError
from mdtoc.extractor import build_toc_structure, extract_headers
from mdtoc.pipeline import BatchReport, TocUpdate, add_toc_to_file, add_toc_to_folder, add_toc_to_text
from mdtoc.renderer import generate_outline
from mdtoc.schemas import (
    FormatOptions,
    FormatType,
    HeaderRecord,
    InsertionMethod,
    LevelRange,
    LinkFormat,
    OutlineFailure,
    OutlineResult,
    OutlineSuccess,
    TocSettings,
    TocStructure,
)
from mdtoc.splice import find_insertion_index, splice_outline_into_document

__all__ = [
    "AnchorAllocator",
    "BatchReport",
    "FormatOptions",
    "FormatType",
    "HeaderRecord",
    "InsertionMethod",
    "LevelRange",
    "LinkFormat",
    "MdtocError",
    "OutlineFailure",
    "OutlineResult",
    "OutlineSuccess",
    "SettingsError",
    "TocSettings",
    "TocStructure",
    "TocUpdate",
    "UnsupportedDocumentError",
    "add_toc_to_file",
    "add_toc_to_folder",
    "add_toc_to_text",
    "build_toc_structure",
    "extract_headers",
    "find_insertion_index",
    "generate_outline",
    "slugify",
    "splice_outline_into_document",
]
