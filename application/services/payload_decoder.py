# application/services/payload_decoder.py
from __future__ import annotations
import base64
import binascii

from domain.errors import DecodeError


def decode_base64(body: str) -> bytes:
    # MailHog guarda el cuerpo tal cual llegó: base64 partido en líneas de 76 columnas
    compact = body.replace("\r", "").replace("\n", "")
    try:
        return base64.b64decode(compact, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise DecodeError(f"Payload base64 inválido: {exc}") from exc
