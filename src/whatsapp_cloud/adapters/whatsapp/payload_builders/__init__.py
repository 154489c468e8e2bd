"""Builders de payload para API Meta/WhatsApp.

Cada builder devolve o dict pronto para o endpoint `messages`; nenhum
deles faz I/O.
"""

from whatsapp_cloud.adapters.whatsapp.payload_builders.base import build_base_payload
from whatsapp_cloud.adapters.whatsapp.payload_builders.contacts import (
    build_contacts_payload,
    build_custom_payload,
)
from whatsapp_cloud.adapters.whatsapp.payload_builders.interactive import (
    build_list_interactive,
    build_list_payload,
    build_reply_buttons_payload,
)
from whatsapp_cloud.adapters.whatsapp.payload_builders.location import build_location_payload
from whatsapp_cloud.adapters.whatsapp.payload_builders.media import (
    build_media_object,
    build_media_payload,
)
from whatsapp_cloud.adapters.whatsapp.payload_builders.template import build_template_payload
from whatsapp_cloud.adapters.whatsapp.payload_builders.text import (
    build_read_receipt,
    build_reply_payload,
    build_text_payload,
)

__all__ = [
    "build_base_payload",
    "build_contacts_payload",
    "build_custom_payload",
    "build_list_interactive",
    "build_list_payload",
    "build_location_payload",
    "build_media_object",
    "build_media_payload",
    "build_read_receipt",
    "build_reply_buttons_payload",
    "build_reply_payload",
    "build_template_payload",
    "build_text_payload",
]
