"""Validadores para mensagens interativas."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from whatsapp_cloud.adapters.whatsapp.validators.errors import ValidationError
from whatsapp_cloud.adapters.whatsapp.validators.limits import MAX_BUTTONS_PER_MESSAGE


def validate_list_button(button: Mapping[str, Any]) -> None:
    """Valida descrição de mensagem interativa do tipo lista.

    Raises:
        ValidationError: Se `action` estiver ausente
    """
    if not isinstance(button, Mapping) or not button.get("action"):
        raise ValidationError("action é obrigatório para mensagens interativas de lista")


def validate_reply_buttons(button: Mapping[str, Any]) -> None:
    """Valida menu de botões de resposta (máximo 3 botões).

    Raises:
        ValidationError: Se não houver botões ou exceder o limite
    """
    action = button.get("action") if isinstance(button, Mapping) else None
    buttons = action.get("buttons") if isinstance(action, Mapping) else None
    if not isinstance(buttons, list) or not buttons:
        raise ValidationError("action.buttons é obrigatório")

    if len(buttons) > MAX_BUTTONS_PER_MESSAGE:
        raise ValidationError(f"O número máximo de botões é {MAX_BUTTONS_PER_MESSAGE}.")
