"""Handshake (hub.verify_token) e assinatura X-Hub-Signature-256 do webhook."""

from __future__ import annotations

import hashlib
import hmac
from collections.abc import Mapping
from dataclasses import dataclass

SIGNATURE_HEADER = "x-hub-signature-256"
SIGNATURE_PREFIX = "sha256="


@dataclass(slots=True)
class SignatureResult:
    """Resultado da checagem; `skipped` quando não há app secret."""

    valid: bool
    skipped: bool = False
    error: str | None = None


def _header(headers: Mapping[str, str], name: str) -> str | None:
    """Busca header sem diferenciar maiúsculas (dict simples ou Headers)."""
    direct = headers.get(name)
    if direct is not None:
        return direct
    return next((value for key, value in headers.items() if key.lower() == name), None)


def compute_signature(raw_body: bytes, secret: str) -> str:
    """Valor esperado do header para o corpo bruto ("sha256=<hex>")."""
    digest = hmac.new(secret.encode("utf-8"), raw_body, hashlib.sha256).hexdigest()
    return SIGNATURE_PREFIX + digest


def verify_token(expected_token: str | None, provided_token: str | None) -> bool:
    """Compara o hub.verify_token recebido com o configurado.

    Token esperado vazio nunca confere.
    """
    if not expected_token or provided_token is None:
        return False
    return hmac.compare_digest(expected_token.encode("utf-8"), provided_token.encode("utf-8"))


def verify_meta_signature(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: str | None,
) -> SignatureResult:
    """Confere a assinatura HMAC SHA-256 enviada pela Meta.

    Sem secret configurado a checagem é pulada (valid=True, skipped=True).
    Códigos de erro: missing_signature, invalid_signature_format,
    signature_mismatch.
    """
    if not secret:
        return SignatureResult(valid=True, skipped=True)

    received = _header(headers, SIGNATURE_HEADER)
    if not received:
        return SignatureResult(valid=False, error="missing_signature")
    if not received.startswith(SIGNATURE_PREFIX):
        return SignatureResult(valid=False, error="invalid_signature_format")

    if hmac.compare_digest(compute_signature(raw_body, secret), received):
        return SignatureResult(valid=True)
    return SignatureResult(valid=False, error="signature_mismatch")
