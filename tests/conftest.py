from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import httpx
import pytest

from whatsapp_cloud.adapters.whatsapp.client import WhatsAppClient
from whatsapp_cloud.adapters.whatsapp.http_client import WhatsAppHttpClient
from whatsapp_cloud.config.resolver import ApiConfig
from whatsapp_cloud.config.settings import get_settings
from whatsapp_cloud.infra.http import HttpClientConfig

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures" / "whatsapp" / "webhook"

TEST_TOKEN = "test-token"
TEST_PHONE_NUMBER_ID = "106540352242922"


class RecordingTransport(httpx.MockTransport):
    """MockTransport que guarda as requisições recebidas."""

    def __init__(self, responder: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return responder(request)

        super().__init__(handler)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def json_responder(
    status_code: int = 200, body: Any = None
) -> Callable[[httpx.Request], httpx.Response]:
    """Responder fixo com corpo JSON."""
    payload = {"success": True} if body is None else body

    def responder(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=payload)

    return responder


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def api_config() -> ApiConfig:
    return ApiConfig(token=TEST_TOKEN, phone_number_id=TEST_PHONE_NUMBER_ID)


@pytest.fixture()
def make_client(api_config: ApiConfig) -> Callable[..., tuple[WhatsAppClient, RecordingTransport]]:
    """Cria WhatsAppClient ligado a um transporte gravador."""

    def factory(
        status_code: int = 200,
        body: Any = None,
        config: Any = None,
    ) -> tuple[WhatsAppClient, RecordingTransport]:
        transport = RecordingTransport(json_responder(status_code, body))
        http_client = WhatsAppHttpClient(HttpClientConfig(transport=transport))
        client = WhatsAppClient(config or api_config, http_client=http_client)
        return client, transport

    return factory


def load_fixture(name: str) -> dict[str, Any]:
    return json.loads((FIXTURES_DIR / name).read_text(encoding="utf-8"))


@pytest.fixture()
def text_payload() -> dict[str, Any]:
    return load_fixture("text.single.json")


@pytest.fixture()
def status_payload() -> dict[str, Any]:
    return load_fixture("status.delivered.json")


@pytest.fixture()
def image_payload() -> dict[str, Any]:
    return load_fixture("image.single.json")


@pytest.fixture()
def contacts_payload() -> dict[str, Any]:
    return load_fixture("contacts.only.json")
