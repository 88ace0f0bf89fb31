# domain/models.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Mapping

from domain.errors import DecodeError

Headers = Mapping[str, list[str]]


@dataclass(frozen=True)
class MimePart:
    headers: dict[str, list[str]]
    body: str
    children: tuple["MimePart", ...] = ()

    @property
    def is_leaf(self) -> bool:
        return not self.children


@dataclass(frozen=True)
class Message:
    id: str
    headers: dict[str, list[str]]
    root: MimePart
    created: str = ""

    def subject(self) -> str:
        values = self.headers.get("Subject") or []
        return values[0] if values else ""


@dataclass(frozen=True)
class MessageBatch:
    total: int
    count: int
    start: int
    items: tuple[Message, ...]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)


@dataclass(frozen=True)
class Attachment:
    filename: str
    content: bytes


@dataclass(frozen=True)
class UploadedFile:
    id: str
    name: str
    title: str
    private_download_url: str


@dataclass(frozen=True)
class MessageFailure:
    index: int
    message_id: str
    error: Exception


@dataclass
class RelayReport:
    messages_seen: int = 0
    uploads: list[UploadedFile] = field(default_factory=list)
    failures: list[MessageFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


# ───────── parsing del JSON de MailHog (api/v2) ─────────
def _headers_from(raw: Any) -> dict[str, list[str]]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise DecodeError(f"Headers no es un objeto: {type(raw).__name__}")
    out: dict[str, list[str]] = {}
    for name, values in raw.items():
        if isinstance(values, str):
            values = [values]
        if not isinstance(values, list):
            raise DecodeError(f"Valores de cabecera '{name}' no son una lista")
        out[str(name)] = [str(v) for v in values]
    return out


def _body_from(raw: Any) -> str:
    if raw is None:
        return ""
    if not isinstance(raw, str):
        raise DecodeError("Body no es una cadena")
    return raw


def _children_from(mime: Any) -> tuple[MimePart, ...]:
    # MIME es null en mensajes que no son multipart
    if not mime:
        return ()
    if not isinstance(mime, dict):
        raise DecodeError("MIME no es un objeto")
    parts = mime.get("Parts") or []
    if not isinstance(parts, list):
        raise DecodeError("MIME.Parts no es una lista")
    return tuple(part_from_dict(p) for p in parts)


def part_from_dict(raw: Any) -> MimePart:
    if not isinstance(raw, dict):
        raise DecodeError(f"Parte MIME no es un objeto: {type(raw).__name__}")
    return MimePart(
        headers=_headers_from(raw.get("Headers")),
        body=_body_from(raw.get("Body")),
        children=_children_from(raw.get("MIME")),
    )


def message_from_dict(raw: Any) -> Message:
    if not isinstance(raw, dict):
        raise DecodeError(f"Mensaje no es un objeto: {type(raw).__name__}")
    content = raw.get("Content") or {}
    if not isinstance(content, dict):
        raise DecodeError("Content no es un objeto")
    headers = _headers_from(content.get("Headers"))
    root = MimePart(
        headers=headers,
        body=_body_from(content.get("Body")),
        children=_children_from(raw.get("MIME")),
    )
    return Message(id=str(raw.get("ID") or ""), headers=headers, root=root, created=str(raw.get("Created") or ""))


def batch_from_dict(raw: Any) -> MessageBatch:
    if not isinstance(raw, dict):
        raise DecodeError(f"Respuesta de mensajes no es un objeto: {type(raw).__name__}")
    items = raw.get("items") or []
    if not isinstance(items, list):
        raise DecodeError("'items' no es una lista")
    try:
        total = int(raw.get("total", 0))
        count = int(raw.get("count", 0))
        start = int(raw.get("start", 0))
    except (TypeError, ValueError) as exc:
        raise DecodeError(f"Metadatos de lote inválidos: {exc}") from exc
    return MessageBatch(
        total=total,
        count=count,
        start=start,
        items=tuple(message_from_dict(it) for it in items),
    )
