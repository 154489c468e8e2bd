"""Builder para mensagens de localização."""

from __future__ import annotations

from typing import Any

from whatsapp_cloud.adapters.whatsapp.payload_builders.base import build_base_payload


def build_location_payload(
    to: str,
    latitude: float | str,
    longitude: float | str,
    name: str,
    address: str,
) -> dict[str, Any]:
    """Constrói payload para mensagem de localização."""
    payload = build_base_payload(to, "location", recipient_type=None)
    payload["location"] = {
        "latitude": latitude,
        "longitude": longitude,
        "name": name,
        "address": address,
    }
    return payload
