from __future__ import annotations

from .events import (
    ContactEvent,
    MessageEvent,
    StatusEvent,
    UnknownEvent,
    WebhookEvent,
    decode_event,
)
from .extractor import (
    changed_field,
    get_audio,
    get_author,
    get_delivery,
    get_document,
    get_image,
    get_interactive_response,
    get_location,
    get_message,
    get_message_id,
    get_message_timestamp,
    get_message_type,
    get_mobile,
    get_name,
    get_sticker,
    get_video,
    is_message,
)
from .message import InboundMessage, build_message

__all__ = [
    "ContactEvent",
    "InboundMessage",
    "MessageEvent",
    "StatusEvent",
    "UnknownEvent",
    "WebhookEvent",
    "build_message",
    "changed_field",
    "decode_event",
    "get_audio",
    "get_author",
    "get_delivery",
    "get_document",
    "get_image",
    "get_interactive_response",
    "get_location",
    "get_message",
    "get_message_id",
    "get_message_timestamp",
    "get_message_type",
    "get_mobile",
    "get_name",
    "get_sticker",
    "get_video",
    "is_message",
]
