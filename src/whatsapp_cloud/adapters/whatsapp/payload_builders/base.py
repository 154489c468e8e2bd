"""Utilidades base para builders de payload."""

from __future__ import annotations

from typing import Any

MESSAGING_PRODUCT = "whatsapp"


def build_base_payload(
    to: str,
    message_type: str,
    recipient_type: str | None = "individual",
) -> dict[str, Any]:
    """Constrói payload base comum às mensagens.

    Args:
        to: Número destino com DDI, sem "+"
        message_type: Tipo técnico (text, image, template, ...)
        recipient_type: "individual" (padrão); None omite o campo

    Returns:
        Payload com campos obrigatórios
    """
    payload: dict[str, Any] = {"messaging_product": MESSAGING_PRODUCT}
    if recipient_type:
        payload["recipient_type"] = recipient_type
    payload["to"] = to
    payload["type"] = message_type
    return payload
