"""Configurações centralizadas do whatsapp_cloud.

Este módulo exporta:
- Settings / get_settings: camada process-wide via variáveis de ambiente
- ApiConfig / ConfigOverride / resolve_config: resolução em camadas
- Constantes da Graph API (GRAPH_API_VERSION, GRAPH_API_BASE_URL)

Uso típico:
    from whatsapp_cloud.config import get_settings, resolve_config
"""

from whatsapp_cloud.config.resolver import (
    DEFAULT_CONFIG,
    ApiConfig,
    ConfigOverride,
    resolve_config,
    validate_required,
)
from whatsapp_cloud.config.settings import (
    GRAPH_API_BASE_URL,
    GRAPH_API_VERSION,
    Settings,
    get_settings,
)

__all__ = [
    "ApiConfig",
    "ConfigOverride",
    "DEFAULT_CONFIG",
    "GRAPH_API_BASE_URL",
    "GRAPH_API_VERSION",
    "Settings",
    "get_settings",
    "resolve_config",
    "validate_required",
]
