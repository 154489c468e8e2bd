"""Builders para mensagens de texto, respostas e confirmação de leitura."""

from __future__ import annotations

from typing import Any

from whatsapp_cloud.adapters.whatsapp.payload_builders.base import (
    MESSAGING_PRODUCT,
    build_base_payload,
)


def build_text_payload(to: str, body: str, preview_url: bool = True) -> dict[str, Any]:
    """Constrói payload para mensagem de texto."""
    payload = build_base_payload(to, "text")
    payload["text"] = {"preview_url": preview_url, "body": body}
    return payload


def build_reply_payload(
    to: str | None,
    message_id: str | None,
    body: str,
    preview_url: bool = True,
) -> dict[str, Any]:
    """Resposta de texto vinculada à mensagem original (context)."""
    payload = build_text_payload(to or "", body, preview_url)
    payload["context"] = {"message_id": message_id}
    return payload


def build_read_receipt(message_id: str) -> dict[str, Any]:
    """Marca mensagem recebida como lida."""
    return {
        "messaging_product": MESSAGING_PRODUCT,
        "status": "read",
        "message_id": message_id,
    }
