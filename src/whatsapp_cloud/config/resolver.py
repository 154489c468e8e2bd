"""Resolução de configuração em camadas.

Precedência (menor → maior):
    default compilado → configuração do processo → override por chamada

O merge é campo a campo: um campo presente (não-None) numa camada superior
substitui o da inferior; campos omitidos caem para a camada de baixo.
Cada chamada resolve sua própria configuração a partir de entradas
imutáveis, então um mesmo processo atende várias contas remetentes sem
mutar estado compartilhado.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Union

from pydantic import BaseModel, ConfigDict

from whatsapp_cloud.config.settings import GRAPH_API_BASE_URL, GRAPH_API_VERSION

CONFIG_FIELDS: tuple[str, ...] = (
    "token",
    "phone_number_id",
    "verify_token",
    "base_url",
    "api_version",
)


class ApiConfig(BaseModel):
    """Configuração efetiva de uma chamada (imutável)."""

    model_config = ConfigDict(frozen=True)

    token: str = ""
    phone_number_id: str = ""
    verify_token: str = ""
    base_url: str = GRAPH_API_BASE_URL
    api_version: str = GRAPH_API_VERSION

    @property
    def api_root(self) -> str:
        """Origem + versão, sem barra final."""
        return f"{self.base_url.rstrip('/')}/{self.api_version.strip('/')}"


class ConfigOverride(BaseModel):
    """Registro parcial de configuração; None significa "omitido"."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    token: str | None = None
    phone_number_id: str | None = None
    verify_token: str | None = None
    base_url: str | None = None
    api_version: str | None = None


ConfigLayer = Union[ApiConfig, ConfigOverride, Mapping[str, Any], None]

DEFAULT_CONFIG = ApiConfig()


def _layer_values(layer: ConfigLayer) -> dict[str, Any]:
    """Extrai apenas os campos presentes de uma camada.

    Em modelos, só contam campos definidos explicitamente (defaults de
    ApiConfig não sobrescrevem a camada inferior). Mapas passam pelo
    ConfigOverride, que rejeita chaves desconhecidas.
    """
    if layer is None:
        return {}
    if isinstance(layer, BaseModel):
        raw = layer.model_dump(exclude_unset=True)
    else:
        raw = ConfigOverride.model_validate(dict(layer)).model_dump()
    return {key: raw[key] for key in CONFIG_FIELDS if raw.get(key) is not None}


def resolve_config(
    process_config: ConfigLayer = None,
    override: ConfigLayer = None,
) -> ApiConfig:
    """Mescla default → processo → override numa ApiConfig nova.

    Não valida campos obrigatórios: isso acontece no ponto de uso
    (dispatcher), pois nem toda operação exige todos os campos.

    Raises:
        pydantic.ValidationError: Se um mapa traz chave desconhecida
    """
    merged = DEFAULT_CONFIG.model_dump()
    merged.update(_layer_values(process_config))
    merged.update(_layer_values(override))
    return ApiConfig(**merged)


def validate_required(config: ApiConfig, fields: Iterable[str]) -> list[str]:
    """Retorna os campos obrigatórios vazios (lista vazia = OK)."""
    return [name for name in fields if not getattr(config, name, "")]
