"""TOC endpoints for the API."""

from __future__ import annotations

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from mdtoc.extractor import extract_headers
from mdtoc.schemas import HeaderRecord
from server.models import HeadersRequest, TocErrorResponse, TocRequest, TocSuccessResponse
from server.toc_processor import process_toc_request

router = APIRouter()

TOC_RESPONSES = {
    status.HTTP_200_OK: {"model": TocSuccessResponse, "description": "Table of contents generated"},
    status.HTTP_400_BAD_REQUEST: {"model": TocErrorResponse, "description": "No headers to build an outline from"},
}


@router.post("/api/toc", responses=TOC_RESPONSES)
async def api_toc(toc_request: TocRequest) -> JSONResponse:
    """Generate a table of contents and splice it into the submitted document.

    **Parameters**

    - **toc_request** (`TocRequest`): the Markdown document and its TOC settings

    **Returns**

    - **JSONResponse**: the updated document and outline, or a 400 error response

    """
    response = process_toc_request(toc_request)
    if isinstance(response, TocErrorResponse):
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=response.model_dump())
    return JSONResponse(status_code=status.HTTP_200_OK, content=response.model_dump())


@router.post("/api/headers", response_model=list[HeaderRecord])
async def api_headers(headers_request: HeadersRequest) -> list[HeaderRecord]:
    """Return the headers extracted from the submitted document."""
    return extract_headers(headers_request.content)
