"""Configurações do processo via variáveis de ambiente.

Esta é a camada "process-wide" da resolução de configuração: carregada
uma única vez na inicialização e tratada como somente leitura depois.
Nunca hardcode secrets ou valores sensíveis.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

from pydantic_settings import BaseSettings, SettingsConfigDict

if TYPE_CHECKING:
    from whatsapp_cloud.config.resolver import ApiConfig

# -----------------------------------------------------------------------------
# Constantes da Graph API (default compilado)
# Referência: https://developers.facebook.com/docs/graph-api/changelog
# -----------------------------------------------------------------------------
GRAPH_API_VERSION: str = "v18.0"
GRAPH_API_BASE_URL: str = "https://graph.facebook.com"


class Settings(BaseSettings):
    """Configurações lidas do ambiente (prefixo WHATSAPP_)."""

    model_config = SettingsConfigDict(
        env_prefix="WHATSAPP_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Aplicação
    service_name: str = "whatsapp_cloud"
    version: str = "0.1.0"
    environment: str = "development"
    log_level: str = "INFO"
    log_format: str = "json"  # json | text

    # Credenciais e endpoint da Graph API
    token: str = ""  # Bearer token
    phone_number_id: str = ""  # Também usado como WABA id em flows/templates
    verify_token: str = ""  # Handshake do webhook
    app_secret: str | None = None  # HMAC SHA-256 do webhook
    base_url: str = GRAPH_API_BASE_URL
    api_version: str = GRAPH_API_VERSION

    # Transporte HTTP
    request_timeout_seconds: float = 30.0
    verify_ssl: bool = True

    @property
    def is_production(self) -> bool:
        """Retorna True se ambiente é produção."""
        return self.environment.lower() in ("production", "prod")

    @property
    def api_endpoint(self) -> str:
        """URL base completa (origem + versão)."""
        return f"{self.base_url.rstrip('/')}/{self.api_version}"

    def to_api_config(self) -> ApiConfig:
        """Snapshot imutável usado como camada process-wide."""
        from whatsapp_cloud.config.resolver import ApiConfig

        return ApiConfig(
            token=self.token,
            phone_number_id=self.phone_number_id,
            verify_token=self.verify_token,
            base_url=self.base_url,
            api_version=self.api_version,
        )

    def validate_whatsapp_config(self) -> list[str]:
        """Valida se credenciais mínimas estão presentes.

        Retorna lista de erros (vazia = tudo OK).
        """
        errors: list[str] = []
        if not self.phone_number_id:
            errors.append("WHATSAPP_PHONE_NUMBER_ID não configurado")
        if not self.token:
            errors.append("WHATSAPP_TOKEN não configurado")
        return errors


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Retorna uma instância cacheada de Settings.

    A cache garante que mesmo múltiplas injeções não criam novos objetos.
    """
    return Settings()
