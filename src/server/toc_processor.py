"""Process a TOC request by running the mdtoc pipeline on the submitted text."""

from __future__ import annotations

from mdtoc.pipeline import add_toc_to_text
from mdtoc.schemas import OutlineSuccess
from mdtoc.utils.logging_config import get_logger
from server.models import TocErrorResponse, TocRequest, TocResponse, TocSuccessResponse

logger = get_logger(__name__)

NO_HEADERS_MESSAGE = "No headers found in document"


def process_toc_request(request: TocRequest) -> TocResponse:
    """Generate a table of contents for the request document.

    Parameters
    ----------
    request : TocRequest
        The document plus the settings to render it with.

    Returns
    -------
    TocResponse
        The updated document, or an error response when the document has no
        headers or none within the configured level range.

    """
    update = add_toc_to_text(request.content, request.settings, cursor_line=request.cursor_line)

    if not update.headers:
        logger.info("TOC request skipped", extra={"reason": NO_HEADERS_MESSAGE})
        return TocErrorResponse(error=NO_HEADERS_MESSAGE)

    if not isinstance(update.outline, OutlineSuccess):
        logger.info("TOC request skipped", extra={"reason": update.outline.error})
        return TocErrorResponse(error=update.outline.error)

    logger.info(
        "TOC request completed",
        extra={
            "headers_found": update.outline.headers_found,
            "insertion_method": request.settings.insertion_method.value,
        },
    )
    return TocSuccessResponse(
        content=update.content if update.content is not None else request.content,
        outline=update.outline.markdown,
        headers_found=update.outline.headers_found,
        headers=update.headers,
    )
