"""charter2pdf: paginate, number and render constitution-style documents."""

from charter2pdf.exceptions import (
    Charter2pdfError,
    EmptyDocumentError,
    ExportError,
    LayoutError,
    RenderServiceError,
)
from charter2pdf.export import export_document
from charter2pdf.layout import DocumentLayout, build_document_layout
from charter2pdf.markup import parse_markup
from charter2pdf.numbering import NumberingResolver, resolve_labels, to_roman
from charter2pdf.pagination import paginate
from charter2pdf.preview import build_preview
from charter2pdf.render_html import render_document_html
from charter2pdf.schemas import DocumentMeta, ExportOptions, Section, SectionType, TableOfContents
from charter2pdf.search import search_sections
from charter2pdf.toc import generate_table_of_contents
from charter2pdf.validation import validate_consistency

__all__ = [
    "Charter2pdfError",
    "DocumentLayout",
    "DocumentMeta",
    "EmptyDocumentError",
    "ExportError",
    "ExportOptions",
    "LayoutError",
    "NumberingResolver",
    "RenderServiceError",
    "Section",
    "SectionType",
    "TableOfContents",
    "build_document_layout",
    "build_preview",
    "export_document",
    "generate_table_of_contents",
    "paginate",
    "parse_markup",
    "render_document_html",
    "resolve_labels",
    "search_sections",
    "to_roman",
    "validate_consistency",
]
