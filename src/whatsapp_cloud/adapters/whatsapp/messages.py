"""Envio de mensagens de texto, templates, interativas e contatos.

Todas as operações fazem POST em `{phone_number_id}/messages` com um
payload de formato fixo; o resultado é o ResponseOutcome do despacho.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from whatsapp_cloud.adapters.whatsapp import payload_builders as builders
from whatsapp_cloud.adapters.whatsapp.validators import (
    validate_list_button,
    validate_reply_buttons,
)
from whatsapp_cloud.adapters.whatsapp.webhook import extractor
from whatsapp_cloud.observability.logging import get_logger

if TYPE_CHECKING:
    from whatsapp_cloud.adapters.whatsapp.client import WhatsAppClient
    from whatsapp_cloud.adapters.whatsapp.outcomes import ResponseOutcome
    from whatsapp_cloud.config.resolver import ConfigLayer

logger: logging.Logger = get_logger(__name__)

MESSAGES_ENDPOINT = "messages"


class MessagesApi:
    """Operações sobre o endpoint de mensagens."""

    def __init__(self, client: WhatsAppClient) -> None:
        self._client = client

    async def _post(
        self,
        payload: dict[str, Any],
        override: ConfigLayer,
    ) -> ResponseOutcome:
        logger.debug(
            "Enviando mensagem",
            extra={"message_type": payload.get("type", payload.get("status"))},
        )
        return await self._client.request(
            "POST",
            MESSAGES_ENDPOINT,
            payload,
            override=override,
        )

    async def send_message(
        self,
        to: str,
        content: str,
        preview_url: bool = True,
        *,
        override: ConfigLayer = None,
    ) -> ResponseOutcome:
        """Envia mensagem de texto simples."""
        return await self._post(builders.build_text_payload(to, content, preview_url), override)

    async def reply(
        self,
        payload: Any,
        reply_text: str = "",
        preview_url: bool = True,
        *,
        override: ConfigLayer = None,
    ) -> ResponseOutcome:
        """Responde a uma mensagem recebida.

        Destinatário e mensagem de contexto vêm do payload do webhook
        (`messages[0].from` e `messages[0].id`).
        """
        reply_payload = builders.build_reply_payload(
            extractor.get_author(payload),
            extractor.get_message_id(payload),
            reply_text,
            preview_url,
        )
        return await self._post(reply_payload, override)

    async def mark_as_read(
        self,
        message_id: str,
        *,
        override: ConfigLayer = None,
    ) -> ResponseOutcome:
        """Marca mensagem recebida como lida."""
        return await self._post(builders.build_read_receipt(message_id), override)

    async def send_template(
        self,
        template: str,
        recipient_id: str,
        components: list[dict[str, Any]],
        lang: str = "en_US",
        *,
        override: ConfigLayer = None,
    ) -> ResponseOutcome:
        """Envia template aprovado com seus componentes."""
        payload = builders.build_template_payload(template, recipient_id, components, lang)
        return await self._post(payload, override)

    async def send_button(
        self,
        button: Mapping[str, Any],
        recipient_id: str,
        *,
        override: ConfigLayer = None,
    ) -> ResponseOutcome:
        """Envia mensagem interativa de lista.

        Raises:
            ValidationError: Se `action` estiver ausente
        """
        validate_list_button(button)
        return await self._post(builders.build_list_payload(button, recipient_id), override)

    async def send_reply_button(
        self,
        button: Mapping[str, Any],
        recipient_id: str,
        *,
        override: ConfigLayer = None,
    ) -> ResponseOutcome:
        """Envia botões de resposta (no máximo 3).

        Raises:
            ValidationError: Se não houver botões ou exceder o limite
        """
        validate_reply_buttons(button)
        return await self._post(
            builders.build_reply_buttons_payload(button, recipient_id),
            override,
        )

    async def send_custom_json(
        self,
        data: Mapping[str, Any],
        recipient_id: str = "",
        *,
        override: ConfigLayer = None,
    ) -> ResponseOutcome:
        """Envia JSON arbitrário; `to` só é preenchido se ausente."""
        return await self._post(builders.build_custom_payload(data, recipient_id), override)

    async def send_contacts(
        self,
        contacts: list[dict[str, Any]],
        recipient_id: str,
        *,
        override: ConfigLayer = None,
    ) -> ResponseOutcome:
        return await self._post(builders.build_contacts_payload(contacts, recipient_id), override)
