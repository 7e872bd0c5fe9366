"""Tests for HTTP utilities module."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from charter2pdf.exceptions import RenderServiceError
from charter2pdf.http_utils import post_with_retries


def _response(status_code: int, text: str = "") -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.is_success = 200 <= status_code < 300
    response.text = text
    return response


def _client_class_mock(mock_client_class: MagicMock, post: AsyncMock) -> AsyncMock:
    mock_client = AsyncMock()
    mock_client.post = post
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=None)
    mock_client_class.return_value = mock_client
    return mock_client


class TestPostWithRetries:
    """Tests for post_with_retries function."""

    @pytest.mark.asyncio
    async def test_returns_successful_response(self) -> None:
        ok = _response(200)

        with patch("charter2pdf.http_utils.httpx.AsyncClient") as mock_client_class:
            mock_client = _client_class_mock(mock_client_class, AsyncMock(return_value=ok))

            result = await post_with_retries("https://render.test/pdf", {"content": "<html>"})

        assert result is ok
        mock_client.post.assert_called_once_with("https://render.test/pdf", json={"content": "<html>"})

    @pytest.mark.asyncio
    async def test_non_success_status_is_terminal(self) -> None:
        """A 5xx answer is not retried."""
        with patch("charter2pdf.http_utils.httpx.AsyncClient") as mock_client_class:
            mock_client = _client_class_mock(
                mock_client_class, AsyncMock(return_value=_response(503, "busy"))
            )

            with pytest.raises(RenderServiceError, match="HTTP 503 from https://render.test/pdf: busy"):
                await post_with_retries("https://render.test/pdf", {}, backoff_s=0.01)

        assert mock_client.post.call_count == 1

    @pytest.mark.asyncio
    async def test_retries_on_request_error(self) -> None:
        """Retries on network request errors."""
        ok = _response(200)

        with patch("charter2pdf.http_utils.httpx.AsyncClient") as mock_client_class:
            mock_client = _client_class_mock(
                mock_client_class,
                AsyncMock(side_effect=[httpx.ConnectError("Connection failed"), ok]),
            )

            result = await post_with_retries("https://render.test/pdf", {}, max_retries=2, backoff_s=0.01)

        assert result is ok
        assert mock_client.post.call_count == 2

    @pytest.mark.asyncio
    async def test_raises_after_max_retries(self) -> None:
        with patch("charter2pdf.http_utils.httpx.AsyncClient") as mock_client_class:
            mock_client = _client_class_mock(
                mock_client_class, AsyncMock(side_effect=httpx.ConnectError("down"))
            )

            with pytest.raises(RenderServiceError, match="Failed to reach"):
                await post_with_retries("https://render.test/pdf", {}, max_retries=2, backoff_s=0.01)

            # Initial attempt + 2 retries = 3 total
            assert mock_client.post.call_count == 3

    @pytest.mark.asyncio
    async def test_uses_provided_client(self) -> None:
        """Uses provided httpx.AsyncClient if passed."""
        mock_client = AsyncMock()
        mock_client.post = AsyncMock(return_value=_response(201))

        with patch("charter2pdf.http_utils.httpx.AsyncClient") as mock_client_class:
            await post_with_retries("https://render.test/pdf", {"a": 1}, client=mock_client)

        mock_client_class.assert_not_called()
        mock_client.post.assert_called_once_with("https://render.test/pdf", json={"a": 1})

    @pytest.mark.asyncio
    async def test_client_has_correct_settings(self) -> None:
        with patch("charter2pdf.http_utils.httpx.AsyncClient") as mock_client_class:
            _client_class_mock(mock_client_class, AsyncMock(return_value=_response(200)))

            await post_with_retries("https://render.test/pdf", {})

            call_kwargs = mock_client_class.call_args[1]
            assert "timeout" in call_kwargs
            assert call_kwargs["headers"]["User-Agent"].startswith("charter2pdf")
