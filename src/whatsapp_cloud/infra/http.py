"""Cliente HTTP centralizado com timeout e logging.

Este módulo fornece um cliente HTTP assíncrono configurável para chamadas
externas (Graph API), com:
- Timeouts configuráveis
- Logging estruturado (sem tokens)
- Injeção de headers padrão
- Falhas de transporte convertidas em HttpTransportError

Cada chamada executa exatamente uma requisição: política de retry,
backoff ou rate limiting é responsabilidade de quem chama.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any

import httpx

from whatsapp_cloud.observability.logging import get_logger

logger: logging.Logger = get_logger(__name__)

# Regex pré-compilado para sanitização de URL (tokens e assinaturas de URLs pré-assinadas)
_SENSITIVE_QUERY_PATTERN = re.compile(r"(access_token|oh|oe|hash|signature|_nc_sid)=[^&]+")


def _sanitize_url(url: str) -> str:
    """Remove tokens e credenciais da URL para logging seguro."""
    if "=" not in url:
        return url
    return _SENSITIVE_QUERY_PATTERN.sub(lambda m: f"{m.group(1)}=***", url)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP.

    Valores padrão são seguros e conservadores. `transport` permite
    injetar um transporte httpx (ex.: MockTransport em testes).
    """

    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True
    transport: httpx.AsyncBaseTransport | None = None


class HttpTransportError(Exception):
    """Requisição não completou (conexão, timeout, DNS, protocolo).

    Nenhum status HTTP foi recebido; `cause` guarda a exceção original.
    """

    def __init__(self, message: str, cause: BaseException) -> None:
        super().__init__(message)
        self.cause = cause


def _describe_transport_error(exc: httpx.TransportError) -> str:
    """Mensagem curta e sem dados sensíveis para a falha."""
    if isinstance(exc, httpx.TimeoutException):
        return "Timeout"
    if isinstance(exc, httpx.ConnectError):
        return "Erro de conexão"
    if isinstance(exc, httpx.ProtocolError):
        return "Erro de protocolo"
    return f"Erro de transporte: {type(exc).__name__}"


def _log_request_start(method: str, url: str) -> None:
    """Loga início de requisição sem dados sensíveis."""
    logger.debug(
        "Executando requisição HTTP",
        extra={"method": method, "url": _sanitize_url(url)},
    )


def _log_response_received(method: str, url: str, status_code: int) -> None:
    """Loga recebimento de resposta (qualquer status)."""
    logger.debug(
        "Resposta HTTP recebida",
        extra={
            "method": method,
            "url": _sanitize_url(url),
            "status_code": status_code,
        },
    )


def _log_transport_error(method: str, url: str, description: str, error: str) -> None:
    """Loga falha de transporte (timeout, conexão)."""
    logger.warning(
        "Falha de transporte em requisição HTTP",
        extra={
            "method": method,
            "url": _sanitize_url(url),
            "reason": description,
            "error": error,
        },
    )


class HttpClient:
    """Cliente HTTP assíncrono com timeout e logging.

    Uso típico:
        async with HttpClient(config) as client:
            response = await client.request("POST", url, json=payload)
    """

    def __init__(self, config: HttpClientConfig | None = None) -> None:
        """Inicializa cliente com configuração."""
        self._config = config or HttpClientConfig()
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Retorna cliente httpx (lazy loading)."""
        if self._client is None or self._client.is_closed:
            kwargs: dict[str, Any] = {
                "timeout": httpx.Timeout(self._config.timeout_seconds),
                "headers": self._config.default_headers,
                "verify": self._config.verify_ssl,
            }
            if self._config.transport is not None:
                kwargs["transport"] = self._config.transport
            self._client = httpx.AsyncClient(**kwargs)
        return self._client

    async def close(self) -> None:
        """Fecha o cliente e libera recursos."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> HttpClient:
        """Suporte a async context manager."""
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Fecha cliente ao sair do context."""
        await self.close()

    async def request(
        self,
        method: str,
        url: str,
        **kwargs: Any,
    ) -> httpx.Response:
        """Executa uma única requisição.

        Args:
            method: Método HTTP (GET, POST, DELETE)
            url: URL completa
            **kwargs: Argumentos passados para httpx

        Returns:
            Resposta HTTP, qualquer que seja o status

        Raises:
            HttpTransportError: Se nenhuma resposta foi recebida
        """
        client = await self._get_client()
        _log_request_start(method, url)

        try:
            response = await client.request(method, url, **kwargs)
        except httpx.TransportError as exc:
            description = _describe_transport_error(exc)
            _log_transport_error(method, url, description, str(exc))
            raise HttpTransportError(description, exc) from exc

        _log_response_received(method, url, response.status_code)
        return response
