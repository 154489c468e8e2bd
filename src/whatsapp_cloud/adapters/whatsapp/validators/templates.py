"""Validadores para gerenciamento de templates."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from whatsapp_cloud.adapters.whatsapp.validators.errors import ValidationError
from whatsapp_cloud.adapters.whatsapp.validators.flows import validate_required_fields
from whatsapp_cloud.adapters.whatsapp.validators.limits import (
    MAX_TEMPLATE_NAME_LENGTH,
    TEMPLATE_CATEGORIES,
    TEMPLATE_PARAMETER_FORMATS,
)

TEMPLATE_REQUIRED_FIELDS = ("name", "category", "language", "components")


def validate_template_data(template_data: Mapping[str, Any]) -> None:
    """Valida dados de criação de template.

    Raises:
        ValidationError: Se campos obrigatórios faltam ou valores fora do domínio
    """
    validate_required_fields(template_data, TEMPLATE_REQUIRED_FIELDS)

    if len(str(template_data["name"])) > MAX_TEMPLATE_NAME_LENGTH:
        raise ValidationError(
            f"name excede o limite de {MAX_TEMPLATE_NAME_LENGTH} caracteres"
        )

    if str(template_data["category"]).upper() not in TEMPLATE_CATEGORIES:
        raise ValidationError(f"Categoria de template inválida: {template_data['category']}")

    parameter_format = template_data.get("parameter_format")
    if parameter_format is not None and parameter_format not in TEMPLATE_PARAMETER_FORMATS:
        raise ValidationError(f"parameter_format inválido: {parameter_format}")
