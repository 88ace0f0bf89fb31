# infrastructure/slack/client.py
from __future__ import annotations
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

import requests

from domain.errors import ChannelNotFoundError, DecodeError, TransportError, UploadError
from domain.models import UploadedFile

logger = logging.getLogger(__name__)


class SlackClient:
    def __init__(self, *, token: str, base: str = "https://slack.com/api", timeout: float = 10.0) -> None:
        self.token = token
        self.base = base.rstrip("/")
        self.timeout = timeout

    def _headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}

    # ───────── HTTP helpers ─────────
    def _call(self, method: str, *, params: Dict[str, Any] | None = None, data: Dict[str, Any] | None = None) -> Dict[str, Any]:
        """
        Llama a un método de la Web API. Slack responde 200 con {"ok": false, "error": ...}
        en los fallos de negocio; eso se devuelve tal cual y lo interpreta quien llama.
        """
        url = f"{self.base}/{method}"
        try:
            if data is None:
                r = requests.get(url, headers=self._headers(), params=params, timeout=self.timeout)
            else:
                r = requests.post(url, headers=self._headers(), data=data, timeout=self.timeout)
            r.raise_for_status()
        except requests.RequestException as exc:
            raise TransportError(f"Slack {method} falló: {exc}") from exc
        try:
            return r.json()
        except ValueError as exc:
            raise DecodeError(f"Slack {method} devolvió un cuerpo no JSON: {exc}") from exc

    # ───────── canales ─────────
    def find_channel_by_name(self, name: str) -> str:
        wanted = name.lstrip("#")
        cursor: Optional[str] = None
        while True:
            params: Dict[str, Any] = {
                "types": "public_channel,private_channel",
                "exclude_archived": "true",
                "limit": 200,
            }
            if cursor:
                params["cursor"] = cursor
            data = self._call("conversations.list", params=params)
            if not data.get("ok"):
                raise TransportError(f"conversations.list: {data.get('error', 'unknown_error')}")
            for ch in data.get("channels", []):
                if ch.get("name") == wanted:
                    return ch["id"]
            cursor = (data.get("response_metadata") or {}).get("next_cursor")
            if not cursor:
                raise ChannelNotFoundError(f"No se encontró el canal '{wanted}'")

    # ───────── ficheros ─────────
    def files_upload(
        self,
        *,
        filepath: Path,
        filetype: str,
        filename: str,
        title: str,
        channels: Iterable[str],
    ) -> UploadedFile:
        """
        Flujo de subida externa: pedir URL, enviar los bytes, completar en los canales
        y leer files.info para la URL privada de descarga. Con filetype="auto" Slack
        detecta el tipo por el nombre, así que solo se manda cuando es explícito.
        """
        channel_ids = ",".join(channels)
        size = os.path.getsize(filepath)
        logger.info("Subiendo %s (%d bytes) a %s", filename, size, channel_ids)
        params: Dict[str, Any] = {"filename": filename, "length": size}
        if filetype and filetype != "auto":
            params["snippet_type"] = filetype
        ticket = self._call("files.getUploadURLExternal", params=params)
        if not ticket.get("ok"):
            raise UploadError(f"files.getUploadURLExternal: {ticket.get('error', 'unknown_error')}")

        try:
            with open(filepath, "rb") as fh:
                r = requests.post(ticket["upload_url"], files={"file": (filename, fh)}, timeout=self.timeout)
            r.raise_for_status()
        except requests.RequestException as exc:
            raise TransportError(f"Subida de '{filename}' falló: {exc}") from exc

        done = self._call(
            "files.completeUploadExternal",
            data={
                "files": json.dumps([{"id": ticket["file_id"], "title": title}]),
                "channels": channel_ids,
            },
        )
        if not done.get("ok"):
            raise UploadError(f"files.completeUploadExternal: {done.get('error', 'unknown_error')}")

        info = self._call("files.info", params={"file": ticket["file_id"]})
        if not info.get("ok"):
            raise UploadError(f"files.info: {info.get('error', 'unknown_error')}")
        f = info.get("file") or {}
        return UploadedFile(
            id=f.get("id", ticket["file_id"]),
            name=f.get("name", filename),
            title=f.get("title", title),
            private_download_url=f.get("url_private_download", ""),
        )

