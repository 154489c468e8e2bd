"""Camada de infraestrutura: transporte HTTP genérico.

Uso típico:
    from whatsapp_cloud.infra import HttpClient, HttpClientConfig

Infraestrutura não conhece a Graph API: URL, headers e classificação de
respostas ficam no adapter WhatsApp.
"""

from whatsapp_cloud.infra.http import HttpClient, HttpClientConfig, HttpTransportError

__all__ = [
    "HttpClient",
    "HttpClientConfig",
    "HttpTransportError",
]
