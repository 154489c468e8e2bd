"""Resultado classificado de uma chamada à Graph API.

Exatamente uma variante por chamada:
- Success: status 2xx, corpo decodificado
- ApiError: status não-2xx, corpo decodificado (ou texto bruto)
- TransportError: nenhuma resposta recebida (conexão, timeout, DNS)

ConfigurationError não é uma variante: é levantada antes de qualquer
chamada de rede quando faltam credenciais obrigatórias.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(frozen=True)
class MetaError:
    """Erro estruturado retornado pela API Meta (objeto `error`)."""

    error_type: str
    error_code: int
    error_message: str
    is_permanent: bool  # True se erro não é retentável


@dataclass(frozen=True)
class Success:
    """Resposta 2xx."""

    status_code: int
    body: Any

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class ApiError:
    """Resposta não-2xx da API."""

    status_code: int
    body: Any
    meta_error: MetaError | None = None

    @property
    def ok(self) -> bool:
        return False

    @property
    def message(self) -> str:
        if self.meta_error is not None:
            return self.meta_error.error_message
        return f"HTTP {self.status_code}"


@dataclass(frozen=True)
class TransportError:
    """Chamada não completou; sem status HTTP."""

    cause: BaseException
    message: str = field(default="Erro de transporte")

    @property
    def ok(self) -> bool:
        return False


ResponseOutcome = Union[Success, ApiError, TransportError]


class ConfigurationError(Exception):
    """Credencial ou identificador obrigatório ausente antes da chamada."""

    def __init__(self, missing_fields: Sequence[str]) -> None:
        self.missing_fields = tuple(missing_fields)
        super().__init__(
            "Configuração incompleta: " + ", ".join(self.missing_fields) + " obrigatório(s)"
        )


_TRANSIENT_STATUSES = frozenset({408, 429})
_PERMANENT_TYPES = frozenset({"OAuthException", "InvalidRequest"})


def _is_permanent_error(status_code: int | None, error_type: str) -> bool:
    """Classifica erro pelo status HTTP da resposta.

    Transitórios: 408, 429 e 5xx. Demais 4xx são permanentes.
    Sem status conhecido, decide pelo `type` do erro Meta.
    """
    if status_code is not None:
        if status_code in _TRANSIENT_STATUSES or status_code >= 500:
            return False
        if 400 <= status_code < 500:
            return True
    return error_type in _PERMANENT_TYPES


def parse_meta_error(response_data: Any, status_code: int | None = None) -> MetaError | None:
    """Extrai o objeto `error` do corpo da Meta.

    `status_code` é o status HTTP da resposta (os códigos Graph, como 100,
    190 ou 130429, não dizem se o erro é retentável).

    Returns:
        MetaError se houver erro estruturado, None caso contrário
    """
    if not isinstance(response_data, dict):
        return None
    error_obj = response_data.get("error")
    if not error_obj or not isinstance(error_obj, dict):
        return None

    error_type = error_obj.get("type", "unknown")
    error_code = error_obj.get("code", 0)
    error_message = error_obj.get("message", "Erro desconhecido")

    return MetaError(
        error_type=error_type,
        error_code=error_code,
        error_message=error_message,
        is_permanent=_is_permanent_error(status_code, error_type),
    )
