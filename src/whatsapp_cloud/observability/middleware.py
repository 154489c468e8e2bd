"""Middlewares de observabilidade."""

from __future__ import annotations

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from whatsapp_cloud.observability.context import correlation_scope


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Gera ou propaga correlation_id em cada request do webhook."""

    async def dispatch(self, request: Request, call_next) -> Response:  # type: ignore[override]
        incoming = request.headers.get("x-correlation-id")
        with correlation_scope(incoming) as correlation_id:
            response = await call_next(request)

        response.headers["x-correlation-id"] = correlation_id
        return response
