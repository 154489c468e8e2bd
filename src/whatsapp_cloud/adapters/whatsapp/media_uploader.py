"""Mídia hospedada na Meta: upload, consulta de URL, remoção e download.

Fluxo típico:
    upload_media(...) → id → send_image(id, link=False)
    webhook image.id → query_media_url(id) → download_media(url, mime)
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from whatsapp_cloud.adapters.whatsapp.multipart import FilePart, MultipartForm
from whatsapp_cloud.adapters.whatsapp.outcomes import Success
from whatsapp_cloud.adapters.whatsapp.payload_builders.base import MESSAGING_PRODUCT
from whatsapp_cloud.adapters.whatsapp.validators import (
    extension_from_mime,
    validate_upload_content,
)
from whatsapp_cloud.observability.logging import get_logger

if TYPE_CHECKING:
    from whatsapp_cloud.adapters.whatsapp.client import WhatsAppClient
    from whatsapp_cloud.adapters.whatsapp.outcomes import ResponseOutcome
    from whatsapp_cloud.config.resolver import ConfigLayer

logger: logging.Logger = get_logger(__name__)

MEDIA_ENDPOINT = "media"


def _read_source(media: str | Path | bytes, filename: str | None, mime_type: str) -> FilePart:
    """Normaliza caminho ou bytes em parte de arquivo `file`."""
    if isinstance(media, bytes):
        content = media
        name = filename or f"upload.{extension_from_mime(mime_type)}"
    else:
        path = Path(media)
        content = path.read_bytes()
        name = filename or path.name

    validate_upload_content(content)
    return FilePart(field_name="file", filename=name, content=content, content_type=mime_type)


class MediaApi:
    """Operações sobre mídia hospedada na Meta."""

    def __init__(self, client: WhatsAppClient) -> None:
        self._client = client

    async def upload_media(
        self,
        media: str | Path | bytes,
        mime_type: str,
        filename: str | None = None,
        *,
        override: ConfigLayer = None,
    ) -> ResponseOutcome:
        """Faz upload multipart para `{phone_number_id}/media`.

        Args:
            media: Caminho do arquivo ou conteúdo em bytes
            mime_type: Tipo MIME enviado no campo `type`
            filename: Nome do arquivo (padrão: nome do caminho)

        Returns:
            Outcome; em sucesso o corpo contém {"id": ...}

        Raises:
            ValidationError: Conteúdo vazio, grande demais ou MIME inválido
            OSError: Se o caminho não puder ser lido
        """
        form = MultipartForm(
            fields=[("messaging_product", MESSAGING_PRODUCT), ("type", mime_type)],
            file=_read_source(media, filename, mime_type),
        )
        logger.info(
            "Upload de mídia iniciado",
            extra={"mime_type": mime_type, "size_bytes": len(form.file.content)},
        )
        return await self._client.request("POST", MEDIA_ENDPOINT, form, override=override)

    async def query_media_url(
        self,
        media_id: str,
        *,
        override: ConfigLayer = None,
    ) -> ResponseOutcome:
        """Consulta a URL pré-assinada de uma mídia.

        Em sucesso com `url` no corpo, Success.body é a própria URL.
        """
        outcome = await self._client.request(
            "GET",
            media_id,
            override=override,
            include_identifier=False,
        )
        body = outcome.body if isinstance(outcome, Success) else None
        if isinstance(body, dict) and "url" in body:
            return Success(status_code=outcome.status_code, body=body["url"])
        return outcome

    async def delete_media(
        self,
        media_id: str,
        *,
        override: ConfigLayer = None,
    ) -> ResponseOutcome:
        return await self._client.request(
            "DELETE",
            media_id,
            override=override,
            include_identifier=False,
        )

    async def download_media(
        self,
        media_url: str,
        mime_type: str,
        file_path: str = "temp",
        *,
        override: ConfigLayer = None,
    ) -> ResponseOutcome:
        """Baixa a mídia e grava em `{file_path}.{ext}`.

        Returns:
            Success com o caminho gravado no corpo, ou o erro do download

        Raises:
            ValidationError: Se o MIME type for inválido (antes da rede)
        """
        extension = extension_from_mime(mime_type)
        outcome = await self._client.download(media_url, override=override)
        if not isinstance(outcome, Success):
            return outcome

        destination = f"{file_path}.{extension}"
        await asyncio.to_thread(Path(destination).write_bytes, outcome.body)
        logger.info(
            "Mídia baixada",
            extra={"mime_type": mime_type, "size_bytes": len(outcome.body)},
        )
        return Success(status_code=outcome.status_code, body=destination)
