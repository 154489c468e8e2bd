"""Fachada do cliente WhatsApp Cloud API.

Uso típico:
    async with WhatsAppClient.from_settings(get_settings()) as client:
        await client.messages.send_message("5511999999999", "Olá")
        await client.messages.send_message(
            "5511888888888", "Olá", override={"phone_number_id": "outro"}
        )
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import httpx

from whatsapp_cloud.adapters.whatsapp.flows import FlowsApi
from whatsapp_cloud.adapters.whatsapp.http_client import (
    WhatsAppHttpClient,
    create_whatsapp_http_client,
)
from whatsapp_cloud.adapters.whatsapp.media import MediaMessagesApi
from whatsapp_cloud.adapters.whatsapp.media_uploader import MediaApi
from whatsapp_cloud.adapters.whatsapp.messages import MessagesApi
from whatsapp_cloud.adapters.whatsapp.templates import TemplatesApi
from whatsapp_cloud.config.resolver import ApiConfig, ConfigLayer, resolve_config
from whatsapp_cloud.config.settings import get_settings
from whatsapp_cloud.observability.logging import get_logger

if TYPE_CHECKING:
    from whatsapp_cloud.adapters.whatsapp.outcomes import ResponseOutcome
    from whatsapp_cloud.config.settings import Settings

logger: logging.Logger = get_logger(__name__)


class WhatsAppClient:
    """Ponto de entrada: configuração do processo + despachante + APIs.

    A configuração do processo é um snapshot imutável; cada chamada pode
    sobrepor campos via `override` sem afetar outras chamadas.
    """

    def __init__(
        self,
        config: ConfigLayer = None,
        *,
        http_client: WhatsAppHttpClient | None = None,
    ) -> None:
        process_layer = config if config is not None else get_settings().to_api_config()
        self._config: ApiConfig = resolve_config(process_layer)
        self._http = http_client or WhatsAppHttpClient()

        self.messages = MessagesApi(self)
        self.media = MediaMessagesApi(self)
        self.uploads = MediaApi(self)
        self.templates = TemplatesApi(self)
        self.flows = FlowsApi(self)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> WhatsAppClient:
        """Cria cliente a partir das Settings (credenciais + timeouts)."""
        return cls(
            settings.to_api_config(),
            http_client=create_whatsapp_http_client(settings, transport=transport),
        )

    @property
    def config(self) -> ApiConfig:
        """Configuração do processo (sem override)."""
        return self._config

    def resolve(self, override: ConfigLayer = None) -> ApiConfig:
        """Configuração efetiva para uma chamada."""
        return resolve_config(self._config, override)

    async def request(
        self,
        method: str,
        endpoint: str,
        body: Any = None,
        *,
        override: ConfigLayer = None,
        include_identifier: bool = True,
        params: Mapping[str, Any] | None = None,
    ) -> ResponseOutcome:
        """Despacha chamada genérica à Graph API com a config resolvida."""
        return await self._http.send(
            method,
            endpoint,
            body,
            config=self.resolve(override),
            include_identifier=include_identifier,
            params=params,
        )

    async def download(self, url: str, *, override: ConfigLayer = None) -> ResponseOutcome:
        """Baixa binário de URL pré-assinada."""
        return await self._http.download(url, config=self.resolve(override))

    async def close(self) -> None:
        await self._http.close()

    async def __aenter__(self) -> WhatsAppClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()
