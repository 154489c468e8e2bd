"""Builders para mensagens de mídia (imagem, vídeo, áudio, documento, sticker)."""

from __future__ import annotations

from typing import Any

from whatsapp_cloud.adapters.whatsapp.payload_builders.base import build_base_payload


def build_media_object(
    media: str,
    link: bool = True,
    caption: str | None = None,
    filename: str | None = None,
) -> dict[str, Any]:
    """Constrói objeto de mídia base.

    Args:
        media: URL pública (link=True) ou ID de mídia hospedada na Meta
        link: Define se `media` é link ou id
        caption: Legenda (None omite)
        filename: Nome do arquivo, apenas documentos (None omite)

    Returns:
        Objeto media conforme API Meta
    """
    media_obj: dict[str, Any] = {"link": media} if link else {"id": media}

    if caption is not None:
        media_obj["caption"] = caption
    if filename is not None:
        media_obj["filename"] = filename

    return media_obj


def build_media_payload(
    media_type: str,
    to: str,
    media_obj: dict[str, Any],
    recipient_type: str | None = None,
) -> dict[str, Any]:
    """Payload completo de mídia: base + bloco nomeado pelo tipo."""
    payload = build_base_payload(to, media_type, recipient_type)
    payload[media_type] = media_obj
    return payload
