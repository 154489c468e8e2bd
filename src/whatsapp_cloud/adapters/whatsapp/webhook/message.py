"""Projeção desnormalizada de um evento recebido."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from whatsapp_cloud.adapters.whatsapp.webhook import extractor


class InboundMessage(BaseModel):
    """Snapshot plano de um evento do webhook.

    Vive apenas durante a invocação do handler; `data` guarda o payload
    bruto para quem precisar de campos não projetados.
    """

    id: str | None = None
    data: dict[str, Any] = Field(default_factory=dict)
    content: str = ""
    to: str = ""
    rec_type: str = "individual"
    type: str = "text"  # Tipo implícito da plataforma
    sender: str | None = None
    name: str | None = None
    image: Any = None
    video: Any = None
    audio: Any = None
    document: Any = None
    location: Any = None
    interactive: Any = None


def build_message(payload: Any) -> InboundMessage:
    """Monta InboundMessage chamando cada acessor uma vez."""
    return InboundMessage(
        id=extractor.get_message_id(payload),
        data=dict(payload) if isinstance(payload, dict) else {},
        content=extractor.get_message(payload) or "",
        type=extractor.get_message_type(payload) or "text",
        sender=extractor.get_mobile(payload),
        name=extractor.get_name(payload),
        image=extractor.get_image(payload),
        video=extractor.get_video(payload),
        audio=extractor.get_audio(payload),
        document=extractor.get_document(payload),
        location=extractor.get_location(payload),
        interactive=extractor.get_interactive_response(payload),
    )
