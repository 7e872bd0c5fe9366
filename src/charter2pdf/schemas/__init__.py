"""Shared schemas for charter2pdf."""

from charter2pdf.schemas.blocks import BlockType, ContentBlock
from charter2pdf.schemas.export import DocumentMeta, ExportMargin, ExportOptions, ExportRequest
from charter2pdf.schemas.layout import (
    PreviewNode,
    TableOfContents,
    TocEntry,
    ValidationReport,
)
from charter2pdf.schemas.search import MatchType, SearchResult
from charter2pdf.schemas.sections import TOP_LEVEL_TYPES, Section, SectionType

__all__ = [
    "BlockType",
    "ContentBlock",
    "DocumentMeta",
    "ExportMargin",
    "ExportOptions",
    "ExportRequest",
    "MatchType",
    "PreviewNode",
    "SearchResult",
    "Section",
    "SectionType",
    "TOP_LEVEL_TYPES",
    "TableOfContents",
    "TocEntry",
    "ValidationReport",
]
