# infrastructure/filesystem/storage.py
from __future__ import annotations
import logging
import re
import tempfile
import uuid
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from domain.errors import StagingError

logger = logging.getLogger(__name__)

MAX_SUFFIX_LEN = 16
_SAFE_SUFFIX_RE = re.compile(r"^\.[A-Za-z0-9_-]+$")


def _safe_suffix(name_hint: str) -> str:
    # El nombre lo elige el remitente: solo la última extensión, corta y alfanumérica
    ext = Path(name_hint).suffix
    if len(ext) > MAX_SUFFIX_LEN or not _SAFE_SUFFIX_RE.match(ext):
        return ""
    return ext


class TempStorage:
    def __init__(self, base: Path | None = None) -> None:
        self.base = (base or Path(tempfile.gettempdir())).resolve()
        self.base.mkdir(parents=True, exist_ok=True)

    @contextmanager
    def staged(self, name_hint: str, data: bytes) -> Iterator[Path]:
        """
        Escribe los bytes en un fichero propio (uuid + extensión del nombre) y lo
        borra al salir del bloque, haya ido bien o no.
        """
        fp = self.base / f"smtp_attachment_{uuid.uuid4().hex}{_safe_suffix(name_hint)}"
        try:
            try:
                fp.write_bytes(data)
            except OSError as exc:
                raise StagingError(f"No se pudo escribir {fp}: {exc}") from exc
            logger.info("Escribiendo: %s", fp)
            yield fp
        finally:
            fp.unlink(missing_ok=True)
