"""Acessores totais sobre o payload bruto do webhook.

Formato: {"entry": [{"changes": [{"field": ..., "value": {...}}]}]}

Somente a primeira entry e a primeira change são consultadas (a plataforma
entrega um evento por requisição). Cada acessor navega de novo a partir da
raiz e devolve None quando o campo não se aplica à variante do evento
(messages, statuses ou apenas contacts). Nenhum acessor levanta exceção,
nem para payloads malformados. Campos textuais só aceitam string ou
inteiro (convertido); qualquer outro tipo é tratado como ausente.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

MEDIA_TYPES = ("image", "video", "audio", "document", "sticker")


def _first(sequence: Any) -> Any:
    if isinstance(sequence, list) and sequence:
        return sequence[0]
    return None


def _mapping_or_none(node: Any) -> Mapping[str, Any] | None:
    return node if isinstance(node, Mapping) else None


def _dig(node: Any, *keys: str) -> Any:
    """Desce por chaves de dicts; None no primeiro nó ausente."""
    for key in keys:
        if not isinstance(node, Mapping):
            return None
        node = node.get(key)
    return node


def as_text(value: Any) -> str | None:
    """Escalar textual: str como está, inteiro vira str, demais viram None."""
    if isinstance(value, str):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return None


def get_change(payload: Any) -> Mapping[str, Any] | None:
    """Primeira change da primeira entry."""
    entry = _mapping_or_none(_first(_dig(payload, "entry")))
    if entry is None:
        return None
    return _mapping_or_none(_first(entry.get("changes")))


def get_value(payload: Any) -> Mapping[str, Any] | None:
    """Objeto `value` da primeira change."""
    change = get_change(payload)
    if change is None:
        return None
    return _mapping_or_none(change.get("value"))


def _first_of(payload: Any, key: str) -> Mapping[str, Any] | None:
    """Primeiro item de value[key], apenas se a chave existir."""
    value = get_value(payload)
    if value is None or key not in value:
        return None
    return _mapping_or_none(_first(value[key]))


def _message_field(payload: Any, *keys: str) -> Any:
    return _dig(_first_of(payload, "messages"), *keys)


def is_message(payload: Any) -> bool:
    """True sse value contém a chave `messages`."""
    value = get_value(payload)
    return value is not None and "messages" in value


def changed_field(payload: Any) -> str | None:
    """Campo alterado (`changes[0].field`), ex.: "messages"."""
    return as_text(_dig(get_change(payload), "field"))


def get_mobile(payload: Any) -> str | None:
    """wa_id do remetente (`contacts[0].wa_id`)."""
    return as_text(_dig(_first_of(payload, "contacts"), "wa_id"))


def get_name(payload: Any) -> str | None:
    """Nome de exibição do remetente (`contacts[0].profile.name`)."""
    return as_text(_dig(_first_of(payload, "contacts"), "profile", "name"))


def get_message(payload: Any) -> str | None:
    """Texto da mensagem (`messages[0].text.body`)."""
    return as_text(_message_field(payload, "text", "body"))


def get_message_id(payload: Any) -> str | None:
    return as_text(_message_field(payload, "id"))


def get_message_type(payload: Any) -> str | None:
    return as_text(_message_field(payload, "type"))


def get_message_timestamp(payload: Any) -> str | None:
    return as_text(_message_field(payload, "timestamp"))


def get_author(payload: Any) -> str | None:
    """Autor da mensagem recebida (`messages[0].from`), usado em replies.

    Tolera qualquer nó intermediário ausente ou malformado: ausência
    estrutural e entrada inválida são indistinguíveis aqui.
    """
    return as_text(_message_field(payload, "from"))


def get_delivery(payload: Any) -> str | None:
    """Status de entrega/leitura (`statuses[0].status`)."""
    return as_text(_dig(_first_of(payload, "statuses"), "status"))


def get_interactive_response(payload: Any) -> Any:
    return _message_field(payload, "interactive")


def get_location(payload: Any) -> Any:
    return _message_field(payload, "location")


def get_image(payload: Any) -> Any:
    return _message_field(payload, "image")


def get_video(payload: Any) -> Any:
    return _message_field(payload, "video")


def get_audio(payload: Any) -> Any:
    return _message_field(payload, "audio")


def get_document(payload: Any) -> Any:
    return _message_field(payload, "document")


def get_sticker(payload: Any) -> Any:
    return _message_field(payload, "sticker")
