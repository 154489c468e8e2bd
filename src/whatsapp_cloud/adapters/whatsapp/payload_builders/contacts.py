"""Builders para contatos e JSON customizado."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from whatsapp_cloud.adapters.whatsapp.payload_builders.base import build_base_payload


def build_contacts_payload(contacts: list[dict[str, Any]], to: str) -> dict[str, Any]:
    """Payload com lista de contatos (objeto contacts da Cloud API)."""
    payload = build_base_payload(to, "contacts", recipient_type=None)
    payload["contacts"] = contacts
    return payload


def build_custom_payload(data: Mapping[str, Any], to: str = "") -> dict[str, Any]:
    """Copia JSON customizado, preenchendo `to` apenas se ausente."""
    payload = dict(data)
    if to and "to" not in payload:
        payload["to"] = to
    return payload
