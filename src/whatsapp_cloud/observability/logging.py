"""Configuração de logging estruturado (JSON)."""

from __future__ import annotations

import logging

from pythonjsonlogger.json import JsonFormatter

from whatsapp_cloud.observability.context import get_correlation_id

_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(correlation_id)s] %(message)s"


class CorrelationIdFilter(logging.Filter):
    """Insere correlation_id e service no record de log.

    Importante: nunca adicionar tokens, telefones ou corpo de mensagens.
    """

    def __init__(self, service_name: str) -> None:
        super().__init__()
        self._service_name = service_name

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else get_correlation_id()
        record.service = self._service_name
        return True


def configure_logging(level: str, service_name: str, log_format: str = "json") -> None:
    """Configura logging com campos padrão do serviço.

    log_format="text" usa formatter simples (útil em desenvolvimento local).
    """

    if log_format == "text":
        formatter: logging.Formatter = logging.Formatter(_TEXT_FORMAT)
    else:
        formatter = JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s %(correlation_id)s %(service)s",
            rename_fields={"levelname": "level", "name": "logger"},
        )

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(formatter)
    handler.addFilter(CorrelationIdFilter(service_name))

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger simples; o filtro injeta service/correlation_id."""

    return logging.getLogger(name)
