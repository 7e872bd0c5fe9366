"""HTTP utilities for posting to the render service with retry logic."""

from __future__ import annotations

import asyncio
from typing import Any, Final

import httpx

from charter2pdf.config import (
    CHARTER2PDF_EXPORT_BACKOFF_S,
    CHARTER2PDF_EXPORT_MAX_RETRIES,
    CHARTER2PDF_EXPORT_TIMEOUT_S,
    CHARTER2PDF_USER_AGENT,
)
from charter2pdf.exceptions import RenderServiceError
from charter2pdf.utils.logging_config import get_logger

logger = get_logger(__name__)

_MAX_ERROR_DETAIL: Final[int] = 200


async def post_with_retries(
    url: str,
    payload: dict[str, Any],
    *,
    client: httpx.AsyncClient | None = None,
    max_retries: int = CHARTER2PDF_EXPORT_MAX_RETRIES,
    backoff_s: float = CHARTER2PDF_EXPORT_BACKOFF_S,
) -> httpx.Response:
    """POST JSON to ``url``, retrying only when the request never completed.

    A response with any non-2xx status is terminal: the service has seen the
    document and retrying would not change its answer.

    Args:
        url: Endpoint to post to.
        payload: JSON-serialisable request body.
        client: Optional httpx.AsyncClient for connection pooling. If not
            provided, a new client is created for this request.
        max_retries: Extra attempts after the first transport failure.
        backoff_s: Base delay, doubled after every failed attempt.

    Returns:
        The successful response.

    Raises:
        RenderServiceError: On a non-2xx response or when every attempt
            failed at the transport level.
    """
    timeout = httpx.Timeout(CHARTER2PDF_EXPORT_TIMEOUT_S)
    headers = {"User-Agent": CHARTER2PDF_USER_AGENT}
    last_exc: Exception | None = None

    async def do_post(http_client: httpx.AsyncClient) -> httpx.Response:
        nonlocal last_exc

        for attempt in range(max_retries + 1):
            try:
                response = await http_client.post(url, json=payload)
            except httpx.RequestError as exc:
                last_exc = exc
                logger.warning(
                    "Render service request failed",
                    extra={"url": url, "attempt": attempt + 1, "error": str(exc)},
                )
            else:
                if response.is_success:
                    return response
                detail = response.text[:_MAX_ERROR_DETAIL].strip()
                message = f"HTTP {response.status_code} from {url}"
                raise RenderServiceError(f"{message}: {detail}" if detail else message)

            if attempt < max_retries:
                await asyncio.sleep(backoff_s * (2**attempt))

        raise RenderServiceError(f"Failed to reach {url}: {last_exc}")

    if client is not None:
        return await do_post(client)

    async with httpx.AsyncClient(timeout=timeout, headers=headers) as new_client:
        return await do_post(new_client)
