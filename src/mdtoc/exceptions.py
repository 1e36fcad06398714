"""Custom exceptions for mdtoc."""


class MdtocError(Exception):
    """Base exception for mdtoc operations."""


class SettingsError(MdtocError):
    """Settings file could not be read or failed validation."""


class UnsupportedDocumentError(MdtocError):
    """Document is not a Markdown file."""
