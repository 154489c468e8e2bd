"""Cliente HTTP especializado para a Graph API do WhatsApp.

Estende HttpClient genérico com o contrato de despacho da Graph API:
- Validação de credenciais antes de qualquer chamada (ConfigurationError)
- Montagem da URL {base_url}/{api_version}[/{phone_number_id}]/{endpoint}
- Corpo JSON ou multipart/form-data (upload de arquivo)
- Headers Content-Type + Authorization: Bearer
- Classificação da resposta: Success | ApiError | TransportError
- Logging estruturado sem tokens, números ou corpo de mensagens
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any
from urllib.parse import urlencode

import httpx

from whatsapp_cloud.adapters.whatsapp.multipart import MultipartForm, encode_multipart
from whatsapp_cloud.adapters.whatsapp.outcomes import (
    ApiError,
    ConfigurationError,
    ResponseOutcome,
    Success,
    TransportError,
    parse_meta_error,
)
from whatsapp_cloud.config.resolver import ApiConfig, validate_required
from whatsapp_cloud.infra.http import HttpClient, HttpClientConfig, HttpTransportError
from whatsapp_cloud.observability.logging import get_logger

if TYPE_CHECKING:
    from whatsapp_cloud.config.settings import Settings

logger: logging.Logger = get_logger(__name__)

JSON_CONTENT_TYPE = "application/json"
ALLOWED_METHODS = frozenset({"GET", "POST", "DELETE"})


def _stringify_param(value: Any) -> str:
    """Converte valor de query para string (listas/dicts viram JSON)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple, dict)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def build_query(params: Mapping[str, Any] | None) -> str:
    """Monta query string a partir de mapa plano (None é descartado)."""
    if not params:
        return ""
    pairs = [(key, _stringify_param(value)) for key, value in params.items() if value is not None]
    return urlencode(pairs)


def build_url(
    config: ApiConfig,
    endpoint: str,
    *,
    include_identifier: bool = True,
    params: Mapping[str, Any] | None = None,
) -> str:
    """Compõe a URL completa da chamada.

    include_identifier=True  → {base_url}/{api_version}/{phone_number_id}/{endpoint}
    include_identifier=False → {base_url}/{api_version}/{endpoint}
    Endpoint vazio não gera segmento final; params vazio não gera '?'.
    """
    segments = [config.api_root]
    if include_identifier:
        segments.append(config.phone_number_id)
    path = endpoint.strip("/")
    if path:
        segments.append(path)
    url = "/".join(segments)

    query = build_query(params)
    return f"{url}?{query}" if query else url


def encode_body(body: Any) -> tuple[bytes | None, str]:
    """Serializa o corpo conforme o tipo: MultipartForm ou JSON."""
    if isinstance(body, MultipartForm):
        encoded = encode_multipart(body)
        return encoded.content, encoded.content_type
    if body is None:
        return None, JSON_CONTENT_TYPE
    return json.dumps(body).encode("utf-8"), JSON_CONTENT_TYPE


def build_headers(token: str, content_type: str = JSON_CONTENT_TYPE) -> dict[str, str]:
    """Headers padrão de toda chamada."""
    return {
        "Content-Type": content_type,
        "Authorization": f"Bearer {token}",
    }


def _decode_body(response: httpx.Response) -> Any:
    """Decodifica JSON em best-effort; cai para texto bruto."""
    if not response.content:
        return {}
    try:
        return response.json()
    except ValueError:
        return response.text


def _log_configuration_error(method: str, endpoint: str, missing: list[str]) -> None:
    logger.error(
        "Configuração WhatsApp incompleta, chamada abortada",
        extra={"method": method, "endpoint": endpoint, "missing_fields": missing},
    )


def _log_send_start(method: str, endpoint: str, content_type: str) -> None:
    logger.info(
        "Enviando requisição à Graph API",
        extra={"method": method, "endpoint": endpoint, "content_type": content_type},
    )


def _log_success(method: str, endpoint: str, status_code: int) -> None:
    """Loga sucesso sem expor dados sensíveis."""
    logger.debug(
        "Requisição WhatsApp bem-sucedida",
        extra={"method": method, "endpoint": endpoint, "status_code": status_code},
    )


def _log_api_error(method: str, endpoint: str, outcome: ApiError) -> None:
    """Loga erro da Meta sem expor dados sensíveis."""
    extra: dict[str, Any] = {
        "method": method,
        "endpoint": endpoint,
        "status_code": outcome.status_code,
    }
    if outcome.meta_error is not None:
        extra.update(
            error_type=outcome.meta_error.error_type,
            error_code=outcome.meta_error.error_code,
            is_permanent=outcome.meta_error.is_permanent,
        )
    logger.warning("Erro da API Meta/WhatsApp", extra=extra)


def _log_transport_failure(method: str, endpoint: str, message: str) -> None:
    logger.error(
        "Falha de transporte na chamada WhatsApp",
        extra={"method": method, "endpoint": endpoint, "reason": message},
    )


class WhatsAppHttpClient(HttpClient):
    """Despachante de requisições para a Graph API.

    Cada chamada recebe sua ApiConfig já resolvida; o cliente não guarda
    credenciais, então chamadas concorrentes com configurações diferentes
    não interferem entre si.
    """

    async def send(
        self,
        method: str,
        endpoint: str,
        body: Any = None,
        *,
        config: ApiConfig,
        include_identifier: bool = True,
        params: Mapping[str, Any] | None = None,
    ) -> ResponseOutcome:
        """Envia uma requisição e classifica o resultado.

        Args:
            method: GET, POST ou DELETE
            endpoint: Caminho relativo (pode conter id/sub-recurso)
            body: Valor JSON-serializável ou MultipartForm
            config: Configuração efetiva da chamada
            include_identifier: Injeta phone_number_id na URL
            params: Query string (mapa plano)

        Returns:
            Success, ApiError ou TransportError

        Raises:
            ConfigurationError: Se token/phone_number_id obrigatórios faltam
            ValueError: Se o método não é suportado
        """
        method = method.upper()
        if method not in ALLOWED_METHODS:
            raise ValueError(f"Método HTTP não suportado: {method}")

        self._ensure_configured(config, method, endpoint, include_identifier)

        url = build_url(config, endpoint, include_identifier=include_identifier, params=params)
        content, content_type = encode_body(body)
        headers = build_headers(config.token, content_type)
        _log_send_start(method, endpoint, content_type)

        try:
            response = await self.request(method, url, content=content, headers=headers)
        except HttpTransportError as exc:
            _log_transport_failure(method, endpoint, str(exc))
            return TransportError(cause=exc.cause, message=str(exc))

        return self._classify_response(response, method, endpoint)

    async def download(self, url: str, *, config: ApiConfig) -> ResponseOutcome:
        """Baixa recurso binário de uma URL pré-assinada.

        Mesma classificação de send(), mas o corpo de sucesso é bytes opacos.
        """
        self._ensure_configured(config, "GET", "<download>", include_identifier=False)
        headers = {"Authorization": f"Bearer {config.token}"}
        _log_send_start("GET", "<download>", "application/octet-stream")

        try:
            response = await self.request("GET", url, headers=headers)
        except HttpTransportError as exc:
            _log_transport_failure("GET", "<download>", str(exc))
            return TransportError(cause=exc.cause, message=str(exc))

        if response.is_success:
            _log_success("GET", "<download>", response.status_code)
            return Success(status_code=response.status_code, body=response.content)

        body = _decode_body(response)
        outcome = ApiError(
            status_code=response.status_code,
            body=body,
            meta_error=parse_meta_error(body, response.status_code),
        )
        _log_api_error("GET", "<download>", outcome)
        return outcome

    def _ensure_configured(
        self,
        config: ApiConfig,
        method: str,
        endpoint: str,
        include_identifier: bool,
    ) -> None:
        """Falha rápido (sem rede) se faltam campos para este formato de chamada."""
        required = ("token", "phone_number_id") if include_identifier else ("token",)
        missing = validate_required(config, required)
        if missing:
            _log_configuration_error(method, endpoint, missing)
            raise ConfigurationError(missing)

    def _classify_response(
        self,
        response: httpx.Response,
        method: str,
        endpoint: str,
    ) -> ResponseOutcome:
        """2xx → Success; qualquer outro status → ApiError."""
        body = _decode_body(response)

        if response.is_success:
            _log_success(method, endpoint, response.status_code)
            return Success(status_code=response.status_code, body=body)

        outcome = ApiError(
            status_code=response.status_code,
            body=body,
            meta_error=parse_meta_error(body, response.status_code),
        )
        _log_api_error(method, endpoint, outcome)
        return outcome


def create_whatsapp_http_client(
    settings: Settings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> WhatsAppHttpClient:
    """Factory para criar despachante configurado.

    Args:
        settings: Configurações da aplicação
        transport: Transporte httpx alternativo (testes)

    Returns:
        WhatsAppHttpClient pronto para uso
    """
    config = HttpClientConfig(
        timeout_seconds=float(settings.request_timeout_seconds),
        default_headers={
            "User-Agent": f"{settings.service_name}/{settings.version}",
        },
        verify_ssl=settings.verify_ssl,
        transport=transport,
    )

    logger.info(
        "Cliente WhatsApp HTTP criado",
        extra={"timeout": config.timeout_seconds},
    )

    return WhatsAppHttpClient(config)
