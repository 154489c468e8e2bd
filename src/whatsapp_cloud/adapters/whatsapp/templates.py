"""Gerenciamento de templates de mensagem da conta (WABA).

O `phone_number_id` configurado é usado como id da conta nas rotas
`{id}/message_templates`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from whatsapp_cloud.adapters.whatsapp.validators import ValidationError, validate_template_data
from whatsapp_cloud.observability.logging import get_logger

if TYPE_CHECKING:
    from whatsapp_cloud.adapters.whatsapp.client import WhatsAppClient
    from whatsapp_cloud.adapters.whatsapp.outcomes import ResponseOutcome
    from whatsapp_cloud.config.resolver import ConfigLayer

logger: logging.Logger = get_logger(__name__)

TEMPLATES_ENDPOINT = "message_templates"


class TemplatesApi:
    """CRUD de templates de mensagem."""

    def __init__(self, client: WhatsAppClient) -> None:
        self._client = client

    async def create_template(
        self,
        template_data: Mapping[str, Any],
        *,
        override: ConfigLayer = None,
    ) -> ResponseOutcome:
        """Cria template.

        Campos obrigatórios: name, category, language, components.

        Raises:
            ValidationError: Se os dados forem inválidos
        """
        validate_template_data(template_data)
        logger.info(
            "Criando template",
            extra={"template_category": template_data["category"]},
        )
        return await self._client.request(
            "POST",
            TEMPLATES_ENDPOINT,
            dict(template_data),
            override=override,
        )

    async def list_templates(
        self,
        fields: str = "",
        limit: int | None = None,
        *,
        override: ConfigLayer = None,
    ) -> ResponseOutcome:
        params = {"fields": fields or None, "limit": limit}
        return await self._client.request(
            "GET",
            TEMPLATES_ENDPOINT,
            override=override,
            params=params,
        )

    async def retrieve_template_namespace(
        self,
        *,
        override: ConfigLayer = None,
    ) -> ResponseOutcome:
        """Namespace de templates da conta (GET na raiz do id)."""
        return await self._client.request(
            "GET",
            "",
            override=override,
            params={"fields": "message_template_namespace"},
        )

    async def edit_template(
        self,
        template_id: str,
        params: Mapping[str, Any],
        *,
        override: ConfigLayer = None,
    ) -> ResponseOutcome:
        """Edita template existente (category e/ou components)."""
        return await self._client.request(
            "POST",
            template_id,
            dict(params),
            override=override,
            include_identifier=False,
        )

    async def delete_template(
        self,
        template_id: str | None = None,
        name: str | None = None,
        *,
        override: ConfigLayer = None,
    ) -> ResponseOutcome:
        """Remove template por id (`hsm_id`), por nome ou ambos.

        Raises:
            ValidationError: Se nenhum identificador for informado
        """
        if not template_id and not name:
            raise ValidationError("template_id ou name deve ser informado")

        return await self._client.request(
            "DELETE",
            TEMPLATES_ENDPOINT,
            override=override,
            params={"hsm_id": template_id, "name": name},
        )
