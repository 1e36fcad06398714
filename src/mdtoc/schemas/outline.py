"""Outline rendering result models."""

from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, Field


class OutlineSuccess(BaseModel):
    """A rendered outline."""

    success: Literal[True] = True
    markdown: str
    headers_found: int = Field(..., ge=1)


class OutlineFailure(BaseModel):
    """No outline could be rendered; ``error`` says why."""

    success: Literal[False] = False
    error: str


# Union type for render results
OutlineResult = Union[OutlineSuccess, OutlineFailure]
