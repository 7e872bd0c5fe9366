"""Document endpoints for the API."""

from __future__ import annotations

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse, Response

from charter2pdf.exceptions import ExportError
from charter2pdf.utils.logging_config import get_logger
from server.document_processor import (
    process_export,
    process_layout,
    process_preview,
    process_render,
    process_search,
    process_validate,
)
from server.models import (
    DocumentRequest,
    ErrorResponse,
    ExportDocumentRequest,
    LayoutResponse,
    PreviewRequest,
    PreviewResponse,
    RenderResponse,
    SearchRequest,
    SearchResponse,
    ValidateResponse,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/api")

EXPORT_FILENAME = "constitution.pdf"


@router.post("/layout", response_model=LayoutResponse)
async def api_layout(request: DocumentRequest) -> LayoutResponse:
    """Paginate the sections and build the table of contents.

    **Returns**

    - **LayoutResponse**: section ids per content page and the TOC with its page arithmetic

    """
    return process_layout(request)


@router.post("/preview", response_model=PreviewResponse)
async def api_preview(request: PreviewRequest) -> PreviewResponse:
    """Build the interactive preview component tree."""
    return process_preview(request)


@router.post("/render", response_model=RenderResponse)
async def api_render(request: DocumentRequest) -> RenderResponse:
    """Assemble the self-contained HTML document handed to the render service."""
    return process_render(request)


@router.post("/validate", response_model=ValidateResponse)
async def api_validate(request: DocumentRequest) -> ValidateResponse:
    """Run the advisory consistency checks, including preview/document parity."""
    return process_validate(request)


@router.post("/search", response_model=SearchResponse)
async def api_search(request: SearchRequest) -> SearchResponse:
    """Search section titles and content, returning page numbers."""
    return process_search(request)


@router.post(
    "/export",
    response_model=None,
    responses={
        status.HTTP_200_OK: {"content": {"application/pdf": {}}},
        status.HTTP_502_BAD_GATEWAY: {"model": ErrorResponse},
    },
)
async def api_export(request: ExportDocumentRequest) -> Response:
    """Export the document to PDF through the external render service.

    **Returns**

    - **Response**: the PDF as an attachment

    **Errors**

    - **502**: the render service failed, answered with an empty document or with text

    """
    try:
        document = await process_export(request)
    except ExportError as exc:
        logger.error("Export failed", extra={"error": str(exc)})
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content=ErrorResponse(error=str(exc)).model_dump(),
        )
    return Response(
        content=document,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{EXPORT_FILENAME}"'},
    )
