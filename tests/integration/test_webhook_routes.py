"""Testes de integração das rotas do webhook.

Valida:
- Handshake GET (hub.mode / hub.verify_token / hub.challenge)
- Assinatura X-Hub-Signature-256 no POST
- JSON malformado
- Entrega do InboundMessage ao handler (sync e async)
"""

from __future__ import annotations

import hashlib
import hmac
import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from whatsapp_cloud.adapters.whatsapp.webhook import InboundMessage
from whatsapp_cloud.api.app import create_app
from whatsapp_cloud.config.settings import Settings

FIXTURES_DIR = Path(__file__).resolve().parents[1] / "fixtures" / "whatsapp" / "webhook"
WEBHOOK_SECRET = "test-webhook-secret-for-signature"
VERIFY_TOKEN = "test-verify-token"


def _compute_signature(payload: bytes, secret: str) -> str:
    """Computa assinatura HMAC SHA-256 no formato esperado pela Meta."""
    digest = hmac.new(secret.encode("utf-8"), payload, hashlib.sha256).hexdigest()
    return f"sha256={digest}"


@pytest.fixture()
def received() -> list[InboundMessage]:
    return []


@pytest.fixture()
def client_with_secret(received: list[InboundMessage]):
    """Cliente com verify token e app secret configurados."""
    settings = Settings(
        _env_file=None,
        verify_token=VERIFY_TOKEN,
        app_secret=WEBHOOK_SECRET,
        log_format="text",
    )
    app = create_app(received.append, settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def sample_payload() -> bytes:
    return (FIXTURES_DIR / "text.single.json").read_bytes()


class TestVerification:
    def test_challenge_echoed(self, client_with_secret: TestClient) -> None:
        response = client_with_secret.get(
            "/webhooks/whatsapp",
            params={
                "hub.mode": "subscribe",
                "hub.verify_token": VERIFY_TOKEN,
                "hub.challenge": "1158201444",
            },
        )

        assert response.status_code == 200
        assert response.text == "1158201444"

    def test_wrong_token_forbidden(self, client_with_secret: TestClient) -> None:
        response = client_with_secret.get(
            "/webhooks/whatsapp",
            params={"hub.mode": "subscribe", "hub.verify_token": "wrong", "hub.challenge": "1"},
        )

        assert response.status_code == 403

    def test_wrong_mode_forbidden(self, client_with_secret: TestClient) -> None:
        response = client_with_secret.get(
            "/webhooks/whatsapp",
            params={"hub.mode": "unsubscribe", "hub.verify_token": VERIFY_TOKEN},
        )

        assert response.status_code == 403

    def test_missing_verify_token_config(self) -> None:
        settings = Settings(_env_file=None, verify_token="", log_format="text")
        app = create_app(lambda message: None, settings)

        with TestClient(app) as client:
            response = client.get(
                "/webhooks/whatsapp",
                params={"hub.mode": "subscribe", "hub.verify_token": "", "hub.challenge": "1"},
            )

        assert response.status_code == 500


class TestReceive:
    def test_valid_signature_delivers_message(
        self,
        client_with_secret: TestClient,
        sample_payload: bytes,
        received: list[InboundMessage],
    ) -> None:
        response = client_with_secret.post(
            "/webhooks/whatsapp",
            content=sample_payload,
            headers={
                "Content-Type": "application/json",
                "X-Hub-Signature-256": _compute_signature(sample_payload, WEBHOOK_SECRET),
                "X-Correlation-Id": "corr-123",
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["ok"] is True
        assert data["is_message"] is True
        assert data["correlation_id"] == "corr-123"
        assert response.headers["x-correlation-id"] == "corr-123"

        assert len(received) == 1
        assert received[0].content == "Olá, tudo bem?"
        assert received[0].sender == "5511999990000"

    def test_invalid_signature_rejected(
        self,
        client_with_secret: TestClient,
        sample_payload: bytes,
        received: list[InboundMessage],
    ) -> None:
        response = client_with_secret.post(
            "/webhooks/whatsapp",
            content=sample_payload,
            headers={"X-Hub-Signature-256": _compute_signature(sample_payload, "other")},
        )

        assert response.status_code == 401
        assert received == []

    def test_missing_signature_rejected(
        self, client_with_secret: TestClient, sample_payload: bytes
    ) -> None:
        response = client_with_secret.post("/webhooks/whatsapp", content=sample_payload)

        assert response.status_code == 401

    def test_malformed_json(self, client_with_secret: TestClient) -> None:
        body = b"{not json"
        response = client_with_secret.post(
            "/webhooks/whatsapp",
            content=body,
            headers={"X-Hub-Signature-256": _compute_signature(body, WEBHOOK_SECRET)},
        )

        assert response.status_code == 400

    def test_async_handler_without_secret(self) -> None:
        seen: list[str | None] = []

        async def handler(message: InboundMessage) -> None:
            seen.append(message.type)

        settings = Settings(_env_file=None, verify_token=VERIFY_TOKEN, log_format="text")
        status_body = (FIXTURES_DIR / "status.delivered.json").read_bytes()

        with TestClient(create_app(handler, settings)) as client:
            response = client.post("/webhooks/whatsapp", content=status_body)

        assert response.status_code == 200
        assert response.json()["is_message"] is False
        assert response.json()["signature_skipped"] is True
        assert seen == ["text"]


def test_numeric_fields_in_signed_payload(
    client_with_secret: TestClient, received: list[InboundMessage]
) -> None:
    message = {
        "id": "m1",
        "from": "1",
        "type": "text",
        "timestamp": 1710000000,
        "text": {"body": 42},
    }
    body = json.dumps({"entry": [{"changes": [{"value": {"messages": [message]}}]}]}).encode()

    response = client_with_secret.post(
        "/webhooks/whatsapp",
        content=body,
        headers={"X-Hub-Signature-256": _compute_signature(body, WEBHOOK_SECRET)},
    )

    assert response.status_code == 200
    assert response.json()["is_message"] is True
    assert received[0].content == "42"


def test_health(client_with_secret: TestClient) -> None:
    response = client_with_secret.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_payload_fixture_is_valid_json(sample_payload: bytes) -> None:
    assert json.loads(sample_payload)["object"] == "whatsapp_business_account"
