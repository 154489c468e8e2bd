"""Builder para mensagens de template."""

from __future__ import annotations

from typing import Any

from whatsapp_cloud.adapters.whatsapp.payload_builders.base import build_base_payload


def build_template_payload(
    template: str,
    to: str,
    components: list[dict[str, Any]],
    lang: str = "en_US",
) -> dict[str, Any]:
    """Constrói payload para mensagem de template.

    Args:
        template: Nome do template aprovado
        to: Número destino
        components: Componentes com parâmetros (header, body, buttons)
        lang: Código de idioma/locale

    Returns:
        Payload template conforme API Meta
    """
    payload = build_base_payload(to, "template", recipient_type=None)
    payload["template"] = {
        "name": template,
        "language": {"code": lang},
        "components": components,
    }
    return payload
