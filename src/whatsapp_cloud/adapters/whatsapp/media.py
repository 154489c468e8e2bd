"""Envio de localização e mensagens de mídia (link público ou id)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from whatsapp_cloud.adapters.whatsapp import payload_builders as builders
from whatsapp_cloud.adapters.whatsapp.messages import MESSAGES_ENDPOINT

if TYPE_CHECKING:
    from whatsapp_cloud.adapters.whatsapp.client import WhatsAppClient
    from whatsapp_cloud.adapters.whatsapp.outcomes import ResponseOutcome
    from whatsapp_cloud.config.resolver import ConfigLayer


class MediaMessagesApi:
    """Mensagens de mídia.

    `link=True` envia {"link": media}; caso contrário {"id": media}, onde
    o id vem de um upload prévio (ver MediaApi.upload_media).
    """

    def __init__(self, client: WhatsAppClient) -> None:
        self._client = client

    async def _post(self, payload: dict[str, Any], override: ConfigLayer) -> ResponseOutcome:
        return await self._client.request("POST", MESSAGES_ENDPOINT, payload, override=override)

    async def send_location(
        self,
        lat: float | str,
        long: float | str,
        name: str,
        address: str,
        recipient_id: str,
        *,
        override: ConfigLayer = None,
    ) -> ResponseOutcome:
        payload = builders.build_location_payload(recipient_id, lat, long, name, address)
        return await self._post(payload, override)

    async def send_image(
        self,
        image: str,
        recipient_id: str,
        recipient_type: str = "individual",
        caption: str | None = None,
        link: bool = True,
        *,
        override: ConfigLayer = None,
    ) -> ResponseOutcome:
        media_obj = builders.build_media_object(image, link, caption)
        payload = builders.build_media_payload("image", recipient_id, media_obj, recipient_type)
        return await self._post(payload, override)

    async def send_sticker(
        self,
        sticker: str,
        recipient_id: str,
        recipient_type: str = "individual",
        link: bool = True,
        *,
        override: ConfigLayer = None,
    ) -> ResponseOutcome:
        media_obj = builders.build_media_object(sticker, link)
        payload = builders.build_media_payload("sticker", recipient_id, media_obj, recipient_type)
        return await self._post(payload, override)

    async def send_audio(
        self,
        audio: str,
        recipient_id: str,
        link: bool = True,
        *,
        override: ConfigLayer = None,
    ) -> ResponseOutcome:
        """Áudio não aceita legenda."""
        media_obj = builders.build_media_object(audio, link)
        payload = builders.build_media_payload("audio", recipient_id, media_obj)
        return await self._post(payload, override)

    async def send_video(
        self,
        video: str,
        recipient_id: str,
        caption: str | None = None,
        link: bool = True,
        *,
        override: ConfigLayer = None,
    ) -> ResponseOutcome:
        media_obj = builders.build_media_object(video, link, caption)
        payload = builders.build_media_payload("video", recipient_id, media_obj)
        return await self._post(payload, override)

    async def send_document(
        self,
        document: str,
        recipient_id: str,
        caption: str | None = None,
        link: bool = True,
        filename: str | None = None,
        *,
        override: ConfigLayer = None,
    ) -> ResponseOutcome:
        media_obj = builders.build_media_object(document, link, caption, filename)
        payload = builders.build_media_payload("document", recipient_id, media_obj)
        return await self._post(payload, override)
