# application/services/disposition.py
from __future__ import annotations
import re

from domain.models import Headers

DISPOSITION_HEADER = "Content-Disposition"

# Gramática mínima: 'attachment;' + espacios opcionales + filename=, con o sin comillas.
_ATTACHMENT_RE = re.compile(r'^attachment;\s*filename="?([^"]+)"?$', re.MULTILINE)


def filename_from_disposition(headers: Headers) -> str:
    """
    Devuelve el nombre de fichero si la parte es un adjunto, "" si no lo es.

    Solo se acepta una cabecera Content-Disposition con exactamente un valor.
    Con cero o varios valores (aunque sean duplicados) la parte NO se trata como
    adjunto: política conservadora, no una limitación del parseo.
    """
    values = headers.get(DISPOSITION_HEADER) or []
    if len(values) != 1:
        return ""
    m = _ATTACHMENT_RE.search(values[0])
    if not m:
        return ""
    return m.group(1)
