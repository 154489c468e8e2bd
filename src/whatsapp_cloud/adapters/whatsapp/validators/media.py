"""Validadores para upload e download de mídia."""

from __future__ import annotations

from whatsapp_cloud.adapters.whatsapp.validators.errors import ValidationError
from whatsapp_cloud.adapters.whatsapp.validators.limits import MAX_FILE_SIZE_MB


def extension_from_mime(mime_type: str) -> str:
    """Extensão do arquivo a partir do MIME type ("image/png" → "png").

    Raises:
        ValidationError: Se o MIME type não tem formato tipo/subtipo
    """
    parts = mime_type.split("/") if isinstance(mime_type, str) else []
    if len(parts) != 2 or not all(parts):
        raise ValidationError(f"Invalid MIME type: {mime_type}")
    return parts[1]


def validate_upload_content(content: bytes, max_size_mb: int = MAX_FILE_SIZE_MB) -> None:
    """Valida conteúdo antes do upload.

    Raises:
        ValidationError: Se vazio ou maior que o limite
    """
    size_bytes = len(content)
    if size_bytes == 0:
        raise ValidationError("Conteúdo vazio não é permitido")

    if size_bytes > max_size_mb * 1024 * 1024:
        raise ValidationError(f"Arquivo excede limite de {max_size_mb}MB ({size_bytes} bytes)")
