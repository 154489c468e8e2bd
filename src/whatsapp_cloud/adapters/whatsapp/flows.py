"""Flows API: criação, ciclo de vida, assets e migração entre contas.

Ciclo de vida: DRAFT → publish → PUBLISHED → deprecate → DEPRECATED.
Apenas Flows em DRAFT podem ser removidos.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from whatsapp_cloud.adapters.whatsapp.multipart import FilePart, MultipartForm
from whatsapp_cloud.adapters.whatsapp.validators import (
    validate_categories,
    validate_flow_creation,
    validate_migration_names,
)
from whatsapp_cloud.adapters.whatsapp.validators.limits import MAX_FLOW_JSON_SIZE_MB
from whatsapp_cloud.adapters.whatsapp.validators.media import validate_upload_content
from whatsapp_cloud.observability.logging import get_logger

if TYPE_CHECKING:
    from whatsapp_cloud.adapters.whatsapp.client import WhatsAppClient
    from whatsapp_cloud.adapters.whatsapp.outcomes import ResponseOutcome
    from whatsapp_cloud.config.resolver import ConfigLayer

logger: logging.Logger = get_logger(__name__)

FLOWS_ENDPOINT = "flows"
FLOW_JSON_FILENAME = "flow.json"
FLOW_JSON_ASSET_TYPE = "FLOW_JSON"

_CREATE_KEYS = ("name", "categories", "flow_json", "publish", "clone_flow_id", "endpoint_uri")
_METADATA_KEYS = ("name", "categories", "endpoint_uri", "application_id")


def _pick(data: Mapping[str, Any], keys: tuple[str, ...]) -> dict[str, Any]:
    return {key: data[key] for key in keys if data.get(key) is not None}


def _flow_json_bytes(flow_json: str | bytes | Mapping[str, Any]) -> bytes:
    if isinstance(flow_json, bytes):
        return flow_json
    if isinstance(flow_json, str):
        return flow_json.encode("utf-8")
    return json.dumps(flow_json).encode("utf-8")


class FlowsApi:
    """Operações da Flows API."""

    def __init__(self, client: WhatsAppClient) -> None:
        self._client = client

    async def create_flow(
        self,
        flow_data: Mapping[str, Any],
        *,
        override: ConfigLayer = None,
    ) -> ResponseOutcome:
        """Cria Flow na conta configurada.

        Args:
            flow_data: name, categories (obrigatórios) e opcionalmente
                flow_json, publish, clone_flow_id, endpoint_uri

        Raises:
            ValidationError: Dados inválidos ou publish sem flow_json
        """
        validate_flow_creation(flow_data)
        body = _pick(flow_data, _CREATE_KEYS)
        if isinstance(body.get("flow_json"), Mapping):
            body["flow_json"] = json.dumps(body["flow_json"])

        logger.info("Criando Flow", extra={"publish": bool(flow_data.get("publish"))})
        return await self._client.request("POST", FLOWS_ENDPOINT, body, override=override)

    async def update_flow_metadata(
        self,
        flow_id: str,
        flow_data: Mapping[str, Any],
        *,
        override: ConfigLayer = None,
    ) -> ResponseOutcome:
        """Atualiza nome, categorias, endpoint_uri ou application_id."""
        if "categories" in flow_data:
            validate_categories(flow_data["categories"])
        return await self._client.request(
            "POST",
            flow_id,
            _pick(flow_data, _METADATA_KEYS),
            override=override,
            include_identifier=False,
        )

    async def update_flow_json(
        self,
        flow_id: str,
        flow_json: str | bytes | Mapping[str, Any],
        *,
        override: ConfigLayer = None,
    ) -> ResponseOutcome:
        """Substitui o Flow JSON via upload multipart em `{flow_id}/assets`."""
        content = _flow_json_bytes(flow_json)
        validate_upload_content(content, MAX_FLOW_JSON_SIZE_MB)
        form = MultipartForm(
            fields=[("name", FLOW_JSON_FILENAME), ("asset_type", FLOW_JSON_ASSET_TYPE)],
            file=FilePart(
                field_name="file",
                filename=FLOW_JSON_FILENAME,
                content=content,
                content_type="application/json",
            ),
        )
        return await self._client.request(
            "POST",
            f"{flow_id}/assets",
            form,
            override=override,
            include_identifier=False,
        )

    async def publish_flow(self, flow_id: str, *, override: ConfigLayer = None) -> ResponseOutcome:
        return await self._client.request(
            "POST", f"{flow_id}/publish", override=override, include_identifier=False
        )

    async def deprecate_flow(
        self, flow_id: str, *, override: ConfigLayer = None
    ) -> ResponseOutcome:
        return await self._client.request(
            "POST", f"{flow_id}/deprecate", override=override, include_identifier=False
        )

    async def delete_flow(self, flow_id: str, *, override: ConfigLayer = None) -> ResponseOutcome:
        """Remove Flow (somente em DRAFT)."""
        return await self._client.request(
            "DELETE", flow_id, override=override, include_identifier=False
        )

    async def get_flows(
        self,
        fields: str | None = None,
        *,
        override: ConfigLayer = None,
    ) -> ResponseOutcome:
        """Lista Flows da conta."""
        return await self._client.request(
            "GET", FLOWS_ENDPOINT, override=override, params={"fields": fields}
        )

    async def get_flow(
        self,
        flow_id: str,
        fields: str | None = None,
        phone_number_id: str | None = None,
        *,
        override: ConfigLayer = None,
    ) -> ResponseOutcome:
        """Detalhes de um Flow.

        Com `phone_number_id`, inclui a saúde do Flow para aquele número.
        """
        requested = [fields] if fields else []
        if phone_number_id:
            requested.append(f"health_status.phone_number({phone_number_id})")
        params = {"fields": ",".join(requested) or None}
        return await self._client.request(
            "GET", flow_id, override=override, include_identifier=False, params=params
        )

    async def get_flow_assets(
        self, flow_id: str, *, override: ConfigLayer = None
    ) -> ResponseOutcome:
        return await self._client.request(
            "GET", f"{flow_id}/assets", override=override, include_identifier=False
        )

    async def generate_preview(
        self,
        flow_id: str,
        invalidate_existing: bool = False,
        *,
        override: ConfigLayer = None,
    ) -> ResponseOutcome:
        """URL de preview do Flow (opcionalmente invalidando a anterior)."""
        invalidate = "true" if invalidate_existing else "false"
        return await self._client.request(
            "GET",
            flow_id,
            override=override,
            include_identifier=False,
            params={"fields": f"preview.invalidate({invalidate})"},
        )

    async def migrate_flows(
        self,
        destination_waba_id: str,
        source_waba_id: str,
        source_flow_names: list[str] | None = None,
        *,
        override: ConfigLayer = None,
    ) -> ResponseOutcome:
        """Copia Flows de outra conta para `destination_waba_id`.

        Sem `source_flow_names`, todos os Flows da origem são migrados.

        Raises:
            ValidationError: Se mais nomes que o limite forem informados
        """
        validate_migration_names(source_flow_names)
        params: dict[str, Any] = {
            "source_waba_id": source_waba_id,
            "source_flow_names": source_flow_names or None,
        }
        logger.info(
            "Migrando Flows",
            extra={"flow_count": len(source_flow_names) if source_flow_names else None},
        )
        return await self._client.request(
            "POST",
            f"{destination_waba_id}/migrate_flows",
            override=override,
            include_identifier=False,
            params=params,
        )
