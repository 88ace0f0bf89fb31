# infrastructure/mailhog/client.py
from __future__ import annotations
import logging

import requests

from domain.errors import DecodeError, TransportError
from domain.models import MessageBatch, batch_from_dict

logger = logging.getLogger(__name__)


class MailHogClient:
    def __init__(self, host: str, port: int, timeout: float = 10.0) -> None:
        self.host = host
        self.port = port
        self.timeout = timeout

    # ───────── urls ─────────
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}"

    def messages_url(self) -> str:
        return f"{self.base_url()}/api/v2/messages"

    def events_url(self) -> str:
        return f"{self.base_url()}/api/v1/events"

    # ───────── mensajes ─────────
    def get_messages(self) -> MessageBatch:
        """Un único GET sin parámetros: el lote completo disponible."""
        url = self.messages_url()
        logger.info("Llamando a: %s", url)
        try:
            r = requests.get(url, timeout=self.timeout)
            r.raise_for_status()
        except requests.RequestException as exc:
            raise TransportError(f"GET {url} falló: {exc}") from exc
        try:
            data = r.json()
        except ValueError as exc:
            raise DecodeError(f"Respuesta de {url} no es JSON: {exc}") from exc
        return batch_from_dict(data)
