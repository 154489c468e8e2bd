"""Observabilidade: logging estruturado e correlation id."""

from whatsapp_cloud.observability.context import correlation_scope, get_correlation_id
from whatsapp_cloud.observability.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "correlation_scope",
    "get_correlation_id",
    "get_logger",
]
