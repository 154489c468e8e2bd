"""Rotas do webhook WhatsApp (verificação e recebimento de eventos)."""

from __future__ import annotations

import inspect
import json
from collections.abc import Awaitable, Callable
from typing import Any, Union

from fastapi import APIRouter, HTTPException, Query, Request, Response, status

from whatsapp_cloud.adapters.whatsapp.signature import verify_meta_signature, verify_token
from whatsapp_cloud.adapters.whatsapp.webhook import InboundMessage, build_message, is_message
from whatsapp_cloud.config.settings import Settings, get_settings
from whatsapp_cloud.observability.context import get_correlation_id
from whatsapp_cloud.observability.logging import get_logger

logger = get_logger(__name__)

WEBHOOK_PATH = "/webhooks/whatsapp"

MessageHandler = Callable[[InboundMessage], Union[Awaitable[Any], Any]]


def create_webhook_router(
    handler: MessageHandler,
    settings: Settings | None = None,
) -> APIRouter:
    """Cria router com GET (handshake) e POST (eventos) do webhook.

    Args:
        handler: Função (sync ou async) chamada com cada InboundMessage
        settings: Configurações; padrão get_settings()

    Returns:
        APIRouter pronto para include_router
    """
    settings = settings or get_settings()
    router = APIRouter()

    @router.get(WEBHOOK_PATH)
    def whatsapp_verify(
        hub_mode: str | None = Query(None, alias="hub.mode"),
        hub_verify_token: str | None = Query(None, alias="hub.verify_token"),
        hub_challenge: str | None = Query(None, alias="hub.challenge"),
    ) -> Response:
        """Verificação de webhook exigida pela Meta."""
        if not settings.verify_token:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="missing_verify_token",
            )

        if hub_mode != "subscribe" or not verify_token(settings.verify_token, hub_verify_token):
            logger.warning("webhook_verification_failed", extra={"hub_mode": hub_mode})
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="verification_failed",
            )

        return Response(content=hub_challenge or "", media_type="text/plain")

    @router.post(WEBHOOK_PATH)
    async def whatsapp_webhook(request: Request) -> dict[str, Any]:
        """Recebe evento, valida assinatura e entrega ao handler."""
        raw_body = await request.body()
        signature_result = verify_meta_signature(raw_body, request.headers, settings.app_secret)

        if not signature_result.valid:
            logger.warning(
                "webhook_signature_invalid",
                extra={"reason": signature_result.error},
            )
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED, detail="invalid_signature"
            )

        try:
            payload = json.loads(raw_body or b"{}")
        except json.JSONDecodeError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="invalid_json"
            ) from exc

        message = build_message(payload)
        message_received = is_message(payload)
        logger.info(
            "webhook_event_received",
            extra={"is_message": message_received, "message_type": message.type},
        )

        result = handler(message)
        if inspect.isawaitable(result):
            await result

        return {
            "ok": True,
            "is_message": message_received,
            "correlation_id": get_correlation_id(),
            "signature_skipped": signature_result.skipped,
        }

    return router
