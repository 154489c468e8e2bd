"""Codificação multipart/form-data para uploads (mídia, Flow JSON).

O corpo é montado pelo encoder multipart do httpx; aqui só descrevemos
campos de texto e, no máximo, uma parte binária.
"""

from __future__ import annotations

import mimetypes
from dataclasses import dataclass, field
from typing import Any

import httpx

# Host fictício: a Request só existe para serializar o corpo
_ENCODER_URL = "https://multipart.invalid/"


@dataclass(frozen=True)
class FilePart:
    """Parte binária de um formulário multipart."""

    field_name: str
    filename: str
    content: bytes
    content_type: str | None = None

    def resolved_content_type(self) -> str:
        if self.content_type:
            return self.content_type
        guessed, _ = mimetypes.guess_type(self.filename)
        return guessed or "application/octet-stream"


@dataclass(frozen=True)
class MultipartForm:
    """Campos de texto nomeados + parte de arquivo opcional."""

    fields: list[tuple[str, str]] = field(default_factory=list)
    file: FilePart | None = None


@dataclass(frozen=True)
class EncodedBody:
    """Corpo serializado e Content-Type com boundary."""

    content: bytes
    content_type: str


def _group_fields(fields: list[tuple[str, str]]) -> dict[str, Any]:
    """Agrupa campos repetidos preservando a ordem de inserção."""
    grouped: dict[str, Any] = {}
    for name, value in fields:
        if name in grouped:
            current = grouped[name]
            grouped[name] = [*current, value] if isinstance(current, list) else [current, value]
        else:
            grouped[name] = value
    return grouped


def encode_multipart(form: MultipartForm) -> EncodedBody:
    """Serializa o formulário em corpo multipart.

    Sem parte de arquivo, os campos de texto viram partes sem filename
    (o httpx só gera multipart quando há `files`).

    Raises:
        ValueError: Se o formulário não tem campos nem arquivo
    """
    if form.file is None and not form.fields:
        raise ValueError("Formulário multipart vazio")

    if form.file is not None:
        part = form.file
        request = httpx.Request(
            "POST",
            _ENCODER_URL,
            data=_group_fields(form.fields),
            files={part.field_name: (part.filename, part.content, part.resolved_content_type())},
        )
    else:
        request = httpx.Request(
            "POST",
            _ENCODER_URL,
            files=[(name, (None, value)) for name, value in form.fields],
        )

    content = request.read()
    return EncodedBody(content=content, content_type=request.headers["Content-Type"])
