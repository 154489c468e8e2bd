"""Validadores para a Flows API."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from whatsapp_cloud.adapters.whatsapp.validators.errors import ValidationError
from whatsapp_cloud.adapters.whatsapp.validators.limits import (
    FLOW_CATEGORIES,
    MAX_MIGRATION_FLOW_NAMES,
)


def validate_required_fields(data: Mapping[str, Any], required: Iterable[str]) -> None:
    """Exige que cada campo esteja presente e não vazio.

    Raises:
        ValidationError: No primeiro campo ausente
    """
    for name in required:
        if data.get(name) in (None, "", []):
            raise ValidationError(f"{name} must be provided")


def validate_categories(categories: Any) -> None:
    """Valida lista de categorias de Flow.

    Raises:
        ValidationError: Se não for lista, estiver vazia ou tiver categoria inválida
    """
    if not isinstance(categories, list):
        raise ValidationError("Categories must be a list")

    if not categories:
        raise ValidationError("At least one category must be provided")

    invalid = [category for category in categories if category not in FLOW_CATEGORIES]
    if invalid:
        raise ValidationError(
            f"Invalid categories: {', '.join(map(str, invalid))}. "
            f"Valid categories are: {', '.join(FLOW_CATEGORIES)}"
        )


def validate_flow_creation(flow_data: Mapping[str, Any]) -> None:
    """Valida dados de criação de Flow.

    Raises:
        ValidationError: Se nome/categorias faltam ou publish sem flow_json
    """
    validate_required_fields(flow_data, ("name", "categories"))
    validate_categories(flow_data.get("categories"))

    if flow_data.get("publish") and "flow_json" not in flow_data:
        raise ValidationError("flow_json must be provided when publish is true")


def validate_migration_names(source_flow_names: list[str] | None) -> None:
    """Limita a quantidade de Flows migrados por chamada."""
    if source_flow_names is not None and len(source_flow_names) > MAX_MIGRATION_FLOW_NAMES:
        raise ValidationError(
            f"source_flow_names aceita no máximo {MAX_MIGRATION_FLOW_NAMES} nomes"
        )
