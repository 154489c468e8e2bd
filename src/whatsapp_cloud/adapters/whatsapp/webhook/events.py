"""Decodificação do webhook em variantes tipadas.

Em vez de testar presença de chaves repetidamente, o handler recebe uma
variante e faz match pelo `kind`:
    MessageEvent | StatusEvent | ContactEvent | UnknownEvent

Precedência: messages > statuses > contacts.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal, Union

from pydantic import BaseModel, Field

from whatsapp_cloud.adapters.whatsapp.webhook import extractor


class MessageEvent(BaseModel):
    """Mensagem recebida."""

    kind: Literal["message"] = "message"
    message_id: str | None = None
    message_type: str | None = None
    sender: str | None = None  # messages[0].from
    timestamp: str | None = None
    wa_id: str | None = None  # contacts[0].wa_id
    name: str | None = None  # contacts[0].profile.name
    text: str | None = None
    content: Any = None  # Bloco específico do tipo (image, location, ...)
    context_message_id: str | None = None  # Mensagem respondida, se houver


class StatusEvent(BaseModel):
    """Recibo de entrega/leitura de mensagem enviada."""

    kind: Literal["status"] = "status"
    message_id: str | None = None
    status: str | None = None  # sent, delivered, read, failed
    recipient_id: str | None = None
    timestamp: str | None = None
    errors: list[dict[str, Any]] = Field(default_factory=list)


class ContactEvent(BaseModel):
    """Notificação apenas com contato (ex.: início de sessão)."""

    kind: Literal["contact"] = "contact"
    wa_id: str | None = None
    name: str | None = None


class UnknownEvent(BaseModel):
    """Qualquer outro formato de `value` (ou payload malformado)."""

    kind: Literal["unknown"] = "unknown"
    field: str | None = None
    value: dict[str, Any] = Field(default_factory=dict)


WebhookEvent = Union[MessageEvent, StatusEvent, ContactEvent, UnknownEvent]


def _first_item(value: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    items = value.get(key)
    if isinstance(items, list) and items and isinstance(items[0], Mapping):
        return items[0]
    return {}


def _message_event(payload: Any, value: Mapping[str, Any]) -> MessageEvent:
    message = _first_item(value, "messages")
    message_type = extractor.get_message_type(payload)
    content = message.get(message_type) if isinstance(message_type, str) else None
    context = message.get("context")
    context_id = context.get("id") if isinstance(context, Mapping) else None
    return MessageEvent(
        message_id=extractor.get_message_id(payload),
        message_type=message_type,
        sender=extractor.get_author(payload),
        timestamp=extractor.get_message_timestamp(payload),
        wa_id=extractor.get_mobile(payload),
        name=extractor.get_name(payload),
        text=extractor.get_message(payload),
        content=content,
        context_message_id=extractor.as_text(context_id),
    )


def _status_event(value: Mapping[str, Any]) -> StatusEvent:
    status = _first_item(value, "statuses")
    errors = status.get("errors")
    return StatusEvent(
        message_id=extractor.as_text(status.get("id")),
        status=extractor.as_text(status.get("status")),
        recipient_id=extractor.as_text(status.get("recipient_id")),
        timestamp=extractor.as_text(status.get("timestamp")),
        errors=[err for err in errors if isinstance(err, dict)] if isinstance(errors, list) else [],
    )


def decode_event(payload: Any) -> WebhookEvent:
    """Classifica o payload na variante correspondente.

    Nunca levanta: payload sem entry/changes/value vira UnknownEvent.
    """
    value = extractor.get_value(payload)
    if value is None:
        return UnknownEvent(field=extractor.changed_field(payload))

    if "messages" in value:
        return _message_event(payload, value)
    if "statuses" in value:
        return _status_event(value)
    if "contacts" in value:
        return ContactEvent(
            wa_id=extractor.get_mobile(payload),
            name=extractor.get_name(payload),
        )
    return UnknownEvent(field=extractor.changed_field(payload), value=dict(value))
