# application/services/attachment_extractor.py
from __future__ import annotations
import logging

from domain.models import Attachment, Message
from application.services.mime_walker import iter_leaves
from application.services.disposition import filename_from_disposition
from application.services.payload_decoder import decode_base64

logger = logging.getLogger(__name__)


def extract_attachments(message: Message) -> list[Attachment]:
    """
    Adjuntos de un mensaje en orden de recorrido (profundidad, izquierda → derecha).
    Todo o nada: si una hoja no decodifica, la DecodeError sube y no se devuelve nada.
    Nombres repetidos se conservan como adjuntos distintos.
    """
    attachments: list[Attachment] = []
    for part in iter_leaves(message.root):
        filename = filename_from_disposition(part.headers)
        if not filename:
            continue
        logger.info("Adjunto encontrado: %s", filename)
        attachments.append(Attachment(filename=filename, content=decode_base64(part.body)))
    return attachments
