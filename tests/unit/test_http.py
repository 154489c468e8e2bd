"""Testes unitários para infra/http.py.

Valida cliente HTTP genérico: uma requisição por chamada, conversão de
falhas de transporte e sanitização de URL para logs.
"""

from __future__ import annotations

import httpx
import pytest

from whatsapp_cloud.infra.http import (
    HttpClient,
    HttpClientConfig,
    HttpTransportError,
    _describe_transport_error,
    _sanitize_url,
)


class TestHttpClientConfig:
    """Testes para HttpClientConfig."""

    def test_default_values(self) -> None:
        """Valores padrão devem ser seguros."""
        config = HttpClientConfig()
        assert config.timeout_seconds == 30.0
        assert config.verify_ssl is True
        assert config.default_headers == {}
        assert config.transport is None


class TestSanitizeUrl:
    def test_masks_access_token(self) -> None:
        url = "https://graph.facebook.com/v18.0/me?access_token=SECRET&fields=id"

        sanitized = _sanitize_url(url)

        assert "SECRET" not in sanitized
        assert "access_token=***" in sanitized
        assert "fields=id" in sanitized

    def test_masks_presigned_media_params(self) -> None:
        url = "https://lookaside.fbsbx.com/whatsapp_business/attachments/?mid=1&hash=abc&oh=xyz"

        sanitized = _sanitize_url(url)

        assert "hash=***" in sanitized
        assert "oh=***" in sanitized
        assert "mid=1" in sanitized

    def test_url_without_query_is_unchanged(self) -> None:
        assert _sanitize_url("https://example.com/path") == "https://example.com/path"


class TestDescribeTransportError:
    def test_timeout(self) -> None:
        assert _describe_transport_error(httpx.ReadTimeout("slow")) == "Timeout"

    def test_connect(self) -> None:
        assert _describe_transport_error(httpx.ConnectError("refused")) == "Erro de conexão"


class TestHttpClientRequest:
    @pytest.mark.asyncio
    async def test_returns_response_for_any_status(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(500, json={"x": 1}))
        client = HttpClient(HttpClientConfig(transport=transport))

        response = await client.request("GET", "https://example.com/resource")

        assert response.status_code == 500
        await client.close()

    @pytest.mark.asyncio
    async def test_single_attempt_on_transport_failure(self) -> None:
        calls: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            raise httpx.ConnectError("refused", request=request)

        client = HttpClient(HttpClientConfig(transport=httpx.MockTransport(handler)))

        with pytest.raises(HttpTransportError) as exc_info:
            await client.request("POST", "https://example.com/resource")

        assert len(calls) == 1
        assert isinstance(exc_info.value.cause, httpx.ConnectError)
        assert str(exc_info.value) == "Erro de conexão"
        await client.close()

    @pytest.mark.asyncio
    async def test_default_headers_are_sent(self) -> None:
        seen: dict[str, str] = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen.update(request.headers)
            return httpx.Response(204)

        config = HttpClientConfig(
            default_headers={"User-Agent": "whatsapp_cloud/0.1.0"},
            transport=httpx.MockTransport(handler),
        )

        async with HttpClient(config) as client:
            await client.request("GET", "https://example.com/")

        assert seen["user-agent"] == "whatsapp_cloud/0.1.0"

    @pytest.mark.asyncio
    async def test_close_allows_lazy_reopen(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(200))
        client = HttpClient(HttpClientConfig(transport=transport))

        await client.request("GET", "https://example.com/")
        await client.close()
        response = await client.request("GET", "https://example.com/")

        assert response.status_code == 200
        await client.close()
