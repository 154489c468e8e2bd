"""Testes de MediaMessagesApi (localização e mídia)."""

from __future__ import annotations

import json

import pytest


def _body(transport) -> dict:
    return json.loads(transport.last.content)


class TestMediaMessagesApi:
    @pytest.mark.asyncio
    async def test_send_location(self, make_client) -> None:
        client, transport = make_client()

        await client.media.send_location(-23.55, -46.63, "Escritório", "Av. Paulista", "5511")

        body = _body(transport)
        assert body["type"] == "location"
        assert body["location"] == {
            "latitude": -23.55,
            "longitude": -46.63,
            "name": "Escritório",
            "address": "Av. Paulista",
        }

    @pytest.mark.asyncio
    async def test_send_image_by_link(self, make_client) -> None:
        client, transport = make_client()

        await client.media.send_image("https://img.example/a.png", "5511", caption="Foto")

        body = _body(transport)
        assert body["recipient_type"] == "individual"
        assert body["image"] == {"link": "https://img.example/a.png", "caption": "Foto"}

    @pytest.mark.asyncio
    async def test_send_image_by_id(self, make_client) -> None:
        client, transport = make_client()

        await client.media.send_image("1234", "5511", link=False)

        assert _body(transport)["image"] == {"id": "1234"}

    @pytest.mark.asyncio
    async def test_send_sticker(self, make_client) -> None:
        client, transport = make_client()

        await client.media.send_sticker("st-1", "5511", link=False)

        assert _body(transport)["sticker"] == {"id": "st-1"}

    @pytest.mark.asyncio
    async def test_send_audio(self, make_client) -> None:
        client, transport = make_client()

        await client.media.send_audio("https://a.example/x.ogg", "5511")

        body = _body(transport)
        assert body["type"] == "audio"
        assert body["audio"] == {"link": "https://a.example/x.ogg"}

    @pytest.mark.asyncio
    async def test_send_video(self, make_client) -> None:
        client, transport = make_client()

        await client.media.send_video("vid-1", "5511", caption="Demo", link=False)

        assert _body(transport)["video"] == {"id": "vid-1", "caption": "Demo"}

    @pytest.mark.asyncio
    async def test_send_document(self, make_client) -> None:
        client, transport = make_client()

        await client.media.send_document(
            "https://d.example/nf.pdf", "5511", caption="Nota", filename="nf.pdf"
        )

        assert _body(transport)["document"] == {
            "link": "https://d.example/nf.pdf",
            "caption": "Nota",
            "filename": "nf.pdf",
        }
