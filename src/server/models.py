"""Pydantic models for the TOC API."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, Field, field_validator

from mdtoc.schemas import HeaderRecord, TocSettings
from server.server_config import MAX_CONTENT_SIZE


def _check_content_size(content: str) -> str:
    if len(content) > MAX_CONTENT_SIZE:
        err = f"content exceeds {MAX_CONTENT_SIZE} characters"
        raise ValueError(err)
    return content


class TocRequest(BaseModel):
    """Request model for the /api/toc endpoint.

    Attributes
    ----------
    content : str
        The Markdown document.
    settings : TocSettings
        Formatting and insertion settings. Defaults apply when omitted.
    cursor_line : int | None
        0-based line used when ``settings.insertion_method`` is ``cursor``.

    """

    content: str = Field(..., description="Markdown document")
    settings: TocSettings = Field(default_factory=TocSettings, description="TOC settings")
    cursor_line: int | None = Field(default=None, ge=0, description="Cursor line for cursor insertion")

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        """Validate that ``content`` is within the size limit."""
        return _check_content_size(v)


class HeadersRequest(BaseModel):
    """Request model for the /api/headers endpoint."""

    content: str = Field(..., description="Markdown document")

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        """Validate that ``content`` is within the size limit."""
        return _check_content_size(v)


class TocSuccessResponse(BaseModel):
    """Success response model for the /api/toc endpoint.

    Attributes
    ----------
    content : str
        The document with the table of contents spliced in.
    outline : str
        The rendered outline on its own.
    headers_found : int
        Number of headers included in the outline.
    headers : list[HeaderRecord]
        Every header extracted from the document.

    """

    content: str = Field(..., description="Updated Markdown document")
    outline: str = Field(..., description="Rendered outline")
    headers_found: int = Field(..., description="Headers included in the outline")
    headers: list[HeaderRecord] = Field(default_factory=list, description="Extracted headers")


class TocErrorResponse(BaseModel):
    """Error response model for the /api/toc endpoint.

    Attributes
    ----------
    error : str
        Error message describing why no outline was produced.

    """

    error: str = Field(..., description="Error message")


# Union type for API responses
TocResponse = Union[TocSuccessResponse, TocErrorResponse]
