"""Custom exceptions for charter2pdf."""


class Charter2pdfError(Exception):
    """Base exception for charter2pdf operations."""


class LayoutError(Charter2pdfError):
    """Invalid arguments passed to the layout engine."""


class ExportError(Charter2pdfError):
    """Error while exporting a document through the render service."""


class RenderServiceError(ExportError):
    """Render service returned a non-OK or non-binary response."""


class EmptyDocumentError(ExportError):
    """Render service returned an empty document."""
