"""Turn API requests into engine calls."""

from __future__ import annotations

from charter2pdf.export import export_document
from charter2pdf.layout import DocumentLayout, build_document_layout
from charter2pdf.preview import build_preview
from charter2pdf.render_html import render_document_html
from charter2pdf.search import search_layout
from charter2pdf.utils.logging_config import get_logger
from charter2pdf.validation import ConsistencyValidator, format_report
from server.models import (
    DocumentRequest,
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


def compute_layout(request: DocumentRequest) -> DocumentLayout:
    """Build (or fetch from the memo) the layout for ``request``.

    Parameters
    ----------
    request : DocumentRequest
        Sections plus layout settings.

    Returns
    -------
    DocumentLayout
        The shared layout consumed by every renderer.

    """
    settings = request.layout
    return build_document_layout(
        request.sections,
        page_height=settings.page_height,
        orphan_threshold=settings.orphan_threshold,
        entries_per_page=settings.entries_per_page,
    )


def process_layout(request: DocumentRequest) -> LayoutResponse:
    layout = compute_layout(request)
    return LayoutResponse(fingerprint=layout.fingerprint, pages=layout.page_ids(), toc=layout.toc)


def process_preview(request: PreviewRequest) -> PreviewResponse:
    layout = compute_layout(request)
    return PreviewResponse(tree=build_preview(layout, request.meta, highlighted_id=request.highlighted_id))


def process_render(request: DocumentRequest) -> RenderResponse:
    layout = compute_layout(request)
    return RenderResponse(content=render_document_html(layout, request.meta), total_pages=layout.toc.total_pages)


def process_validate(request: DocumentRequest) -> ValidateResponse:
    layout = compute_layout(request)
    report = ConsistencyValidator(request.sections, layout=layout, meta=request.meta, check_parity=True).validate()
    return ValidateResponse(report=report, text=format_report(report, layout.sections))


def process_search(request: SearchRequest) -> SearchResponse:
    layout = compute_layout(request)
    return SearchResponse(query=request.query, results=search_layout(layout, request.query))


async def process_export(request: ExportDocumentRequest) -> bytes:
    """Export the requested document through the render service.

    Parameters
    ----------
    request : ExportDocumentRequest
        Sections, metadata, layout settings and render options.

    Returns
    -------
    bytes
        The rendered document.

    Raises
    ------
    ExportError
        If the render service fails; the layout itself stays cached.

    """
    layout = compute_layout(request)
    logger.info(
        "Processing export",
        extra={"fingerprint": layout.fingerprint[:12], "total_pages": layout.toc.total_pages},
    )
    return await export_document(layout, meta=request.meta, options=request.options)
