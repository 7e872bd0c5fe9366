"""Pydantic models for the document API."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from charter2pdf.config import (
    CHARTER2PDF_ORPHAN_THRESHOLD_PT,
    CHARTER2PDF_PAGE_HEIGHT_PT,
    CHARTER2PDF_TOC_ENTRIES_PER_PAGE,
)
from charter2pdf.schemas import (
    DocumentMeta,
    ExportOptions,
    PreviewNode,
    SearchResult,
    Section,
    TableOfContents,
    ValidationReport,
)


class LayoutSettings(BaseModel):
    """Layout parameters accepted by every document endpoint.

    Attributes
    ----------
    page_height : float
        Vertical budget per content page, in points.
    orphan_threshold : float
        Minimum space left on a page before a section heading moves on.
    entries_per_page : int
        Table of contents entries printed per page.

    """

    page_height: float = Field(default=CHARTER2PDF_PAGE_HEIGHT_PT, gt=0, description="Page budget in points")
    orphan_threshold: float = Field(
        default=CHARTER2PDF_ORPHAN_THRESHOLD_PT,
        ge=0,
        description="Avoid-orphan-heading threshold in points",
    )
    entries_per_page: int = Field(default=CHARTER2PDF_TOC_ENTRIES_PER_PAGE, gt=0, description="TOC entries per page")


class DocumentRequest(BaseModel):
    """Request body shared by the document endpoints.

    Attributes
    ----------
    sections : list[Section]
        Snapshot of the document sections.
    meta : DocumentMeta
        Cover page metadata.
    layout : LayoutSettings
        Layout parameters.

    """

    sections: list[Section] = Field(default_factory=list, description="Document sections")
    meta: DocumentMeta = Field(default_factory=DocumentMeta, description="Cover page metadata")
    layout: LayoutSettings = Field(default_factory=LayoutSettings, description="Layout parameters")


class PreviewRequest(DocumentRequest):
    """Request body for /api/preview."""

    highlighted_id: str | None = Field(default=None, description="Section to highlight")


class SearchRequest(DocumentRequest):
    """Request body for /api/search."""

    query: str = Field(..., description="Text to look for in titles and content")

    @field_validator("query")
    @classmethod
    def normalize_query(cls, v: str) -> str:
        """Strip surrounding whitespace from ``query``."""
        return v.strip()


class ExportDocumentRequest(DocumentRequest):
    """Request body for /api/export."""

    options: ExportOptions = Field(default_factory=ExportOptions, description="Render service options")


class LayoutResponse(BaseModel):
    """Response model for /api/layout.

    Attributes
    ----------
    fingerprint : str
        Content fingerprint of the snapshot and layout parameters.
    pages : list[list[str]]
        Section ids per content page.
    toc : TableOfContents
        Table of contents with page arithmetic.

    """

    fingerprint: str
    pages: list[list[str]]
    toc: TableOfContents


class PreviewResponse(BaseModel):
    """Response model for /api/preview."""

    tree: PreviewNode


class RenderResponse(BaseModel):
    """Response model for /api/render."""

    content: str = Field(..., description="Self-contained HTML document")
    total_pages: int


class ValidateResponse(BaseModel):
    """Response model for /api/validate."""

    report: ValidationReport
    text: str = Field(..., description="Plain-text rendering of the report")


class SearchResponse(BaseModel):
    """Response model for /api/search."""

    query: str
    results: list[SearchResult]


class ErrorResponse(BaseModel):
    """Error response model.

    Attributes
    ----------
    error : str
        Error message describing what went wrong.

    """

    error: str = Field(..., description="Error message")
