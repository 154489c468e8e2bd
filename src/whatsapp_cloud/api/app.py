"""Fábrica da aplicação FastAPI do webhook."""

from __future__ import annotations

from fastapi import FastAPI

from whatsapp_cloud.api.webhook import MessageHandler, create_webhook_router
from whatsapp_cloud.config.settings import Settings, get_settings
from whatsapp_cloud.observability.logging import configure_logging, get_logger
from whatsapp_cloud.observability.middleware import CorrelationIdMiddleware

logger = get_logger(__name__)


def create_app(handler: MessageHandler, settings: Settings | None = None) -> FastAPI:
    """Cria app com logging, correlation id e rotas do webhook."""
    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.service_name, settings.log_format)

    app = FastAPI(title=settings.service_name, version=settings.version)
    app.add_middleware(CorrelationIdMiddleware)
    app.include_router(create_webhook_router(handler, settings))

    @app.get("/health")
    def health() -> dict[str, str]:
        """Healthcheck simples."""
        return {"status": "ok", "service": settings.service_name, "version": settings.version}

    missing = settings.validate_whatsapp_config()
    logger.info(
        "app_created",
        extra={
            "environment": settings.environment,
            "webhook_signature_enabled": bool(settings.app_secret),
            "missing_config": missing,
        },
    )
    return app
