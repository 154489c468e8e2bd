"""Builders para mensagens interativas (lista e botões de resposta)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from whatsapp_cloud.adapters.whatsapp.payload_builders.base import build_base_payload


def build_list_interactive(button: Mapping[str, Any]) -> dict[str, Any]:
    """Converte descrição simplificada em objeto `interactive` de lista.

    Chaves aceitas: header, body, footer (texto) e action (obrigatória).
    """
    interactive: dict[str, Any] = {"type": "list", "action": button["action"]}

    if button.get("header"):
        interactive["header"] = {"type": "text", "text": button["header"]}
    if button.get("body"):
        interactive["body"] = {"text": button["body"]}
    if button.get("footer"):
        interactive["footer"] = {"text": button["footer"]}

    return interactive


def build_list_payload(button: Mapping[str, Any], to: str) -> dict[str, Any]:
    """Payload de mensagem interativa do tipo lista."""
    payload = build_base_payload(to, "interactive", recipient_type=None)
    payload["interactive"] = build_list_interactive(button)
    return payload


def build_reply_buttons_payload(button: Mapping[str, Any], to: str) -> dict[str, Any]:
    """Payload de botões de resposta; `button` já é o objeto interactive."""
    payload = build_base_payload(to, "interactive")
    payload["interactive"] = dict(button)
    return payload
