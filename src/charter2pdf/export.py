"""Hand the static document to the external render service."""

from __future__ import annotations

from hashlib import sha256
from pathlib import Path

import httpx

from charter2pdf.cache_utils import (
    cache_dir_for,
    is_cache_fresh,
    mkdir_async,
    read_bytes_async,
    write_bytes_async,
)
from charter2pdf.config import (
    CHARTER2PDF_CACHE_PATH,
    CHARTER2PDF_CACHE_TTL_SECONDS,
    CHARTER2PDF_RENDER_URL,
)
from charter2pdf.exceptions import EmptyDocumentError, RenderServiceError
from charter2pdf.http_utils import post_with_retries
from charter2pdf.layout import DocumentLayout
from charter2pdf.render_html import render_document_html
from charter2pdf.schemas import DocumentMeta, ExportOptions, ExportRequest
from charter2pdf.utils.logging_config import get_logger

logger = get_logger(__name__)

_TEXTUAL_CONTENT_TYPES = ("text/", "application/json")
_CACHE_FILENAME = "document.pdf"


def build_export_request(
    layout: DocumentLayout,
    *,
    meta: DocumentMeta | None = None,
    options: ExportOptions | None = None,
) -> ExportRequest:
    """Assemble the ``{content, sections, options}`` payload for ``layout``."""
    return ExportRequest(
        content=render_document_html(layout, meta),
        sections=list(layout.sections),
        options=options or ExportOptions(),
    )


def _check_document(response: httpx.Response) -> bytes:
    content_type = response.headers.get("content-type", "").lower()
    if content_type.startswith(_TEXTUAL_CONTENT_TYPES):
        raise RenderServiceError(f"Render service returned {content_type} instead of a document")
    if not response.content:
        raise EmptyDocumentError("Render service returned an empty document")
    return response.content


async def export_document(
    layout: DocumentLayout,
    *,
    meta: DocumentMeta | None = None,
    options: ExportOptions | None = None,
    client: httpx.AsyncClient | None = None,
    render_url: str = CHARTER2PDF_RENDER_URL,
    use_cache: bool = False,
    cache_path: Path = CHARTER2PDF_CACHE_PATH,
    ttl_seconds: int = CHARTER2PDF_CACHE_TTL_SECONDS,
) -> bytes:
    """Render ``layout`` to HTML and have the render service turn it into a PDF.

    Args:
        layout: A computed document layout. It stays valid whatever the
            outcome, so a failed export can be retried with the same layout.
        meta: Cover page metadata.
        options: Page format options forwarded to the service.
        client: Optional httpx.AsyncClient for connection pooling.
        render_url: Render service endpoint.
        use_cache: Reuse and store exported documents on disk, keyed by the
            layout fingerprint and the request options.
        cache_path: Root of the on-disk cache.
        ttl_seconds: Lifetime of cached documents; <= 0 keeps them forever.

    Returns:
        The binary document returned by the service.

    Raises:
        RenderServiceError: Non-OK status, textual response or unreachable
            service.
        EmptyDocumentError: The service answered with an empty body.
    """
    request = build_export_request(layout, meta=meta, options=options)
    payload = request.model_dump(mode="json", by_alias=True)

    cache_file: Path | None = None
    if use_cache:
        key = _cache_key(layout, request)
        cache_file = cache_dir_for(key, cache_path) / _CACHE_FILENAME
        if is_cache_fresh(cache_file, ttl_seconds):
            logger.debug("Export cache hit", extra={"path": str(cache_file)})
            return await read_bytes_async(cache_file)

    logger.info(
        "Exporting document",
        extra={"url": render_url, "sections": len(request.sections), "pages": layout.toc.total_pages},
    )
    response = await post_with_retries(render_url, payload, client=client)
    document = _check_document(response)

    if cache_file is not None:
        await mkdir_async(cache_file.parent, parents=True, exist_ok=True)
        await write_bytes_async(cache_file, document)

    logger.info("Exported document", extra={"bytes": len(document)})
    return document


def _cache_key(layout: DocumentLayout, request: ExportRequest) -> str:
    digest = sha256(layout.fingerprint.encode("utf-8"))
    digest.update(request.content.encode("utf-8"))
    digest.update(request.options.model_dump_json().encode("utf-8"))
    return digest.hexdigest()
