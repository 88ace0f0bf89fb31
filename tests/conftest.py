import os
import sys
from typing import Any, Optional

import pytest

# --- PATH FIX: los paquetes viven en la raíz del repo (layout plano) ---
current_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.dirname(current_dir)
if project_root not in sys.path:
    sys.path.insert(0, project_root)


def _part(headers: Optional[dict] = None, body: str = "", parts: Optional[list] = None) -> dict[str, Any]:
    return {
        "Headers": headers or {},
        "Body": body,
        "Size": len(body),
        "MIME": {"Parts": parts} if parts is not None else None,
    }


def _message(msg_id: str = "1@mailhog.example", parts: Optional[list] = None, subject: str = "test") -> dict[str, Any]:
    return {
        "ID": msg_id,
        "From": {"Relays": None, "Mailbox": "sender", "Domain": "example.com", "Params": ""},
        "To": [{"Relays": None, "Mailbox": "rcpt", "Domain": "example.com", "Params": ""}],
        "Content": {
            "Headers": {"Subject": [subject], "Content-Type": ["multipart/mixed; boundary=xyz"]},
            "Body": "",
            "Size": 0,
            "MIME": None,
        },
        "Created": "2024-01-01T00:00:00Z",
        "MIME": {"Parts": parts} if parts is not None else None,
        "Raw": {"From": "sender@example.com", "To": ["rcpt@example.com"], "Data": "", "Helo": "localhost"},
    }


def _batch(*messages: dict) -> dict[str, Any]:
    return {"total": len(messages), "count": len(messages), "start": 0, "items": list(messages)}


@pytest.fixture
def make_part():
    return _part


@pytest.fixture
def make_message():
    return _message


@pytest.fixture
def make_batch():
    return _batch


def attachment_part(filename: str, body: str) -> dict[str, Any]:
    return _part({"Content-Disposition": [f'attachment; filename="{filename}"']}, body)


@pytest.fixture
def make_attachment_part():
    return attachment_part
