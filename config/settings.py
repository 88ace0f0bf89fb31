# config/settings.py
from __future__ import annotations
from dataclasses import dataclass
import logging
import os
from typing import Mapping

from dotenv import load_dotenv

from domain.errors import ConfigError

ENV_PREFIX = "MESSAGE_RELAY_"
FAILURE_POLICIES = ("abort", "continue")


@dataclass(frozen=True)
class Settings:
    # Obligatorias (sin valores por defecto)
    SLACK_TOKEN: str
    MAILHOG_HOST: str
    MAILHOG_PORT: int
    SLACK_CHANNEL_NAME: str

    # Opcionales
    HTTP_TIMEOUT: float = 10.0
    FAILURE_POLICY: str = "abort"  # abort | continue
    LOG_LEVEL: str = "INFO"
    SLACK_API_BASE: str = "https://slack.com/api"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """
        Lee MESSAGE_RELAY_* del entorno (tras cargar .env). Si falta alguna obligatoria
        o alguna no se puede interpretar, lanza ConfigError con todas a la vez.
        """
        if environ is None:
            load_dotenv()
            environ = os.environ

        def get(name: str, default: str = "") -> str:
            return (environ.get(ENV_PREFIX + name) or default).strip()

        problems: list[str] = []
        for name in ("SLACK_TOKEN", "MAILHOG_HOST", "MAILHOG_PORT", "SLACK_CHANNEL_NAME"):
            if not get(name):
                problems.append(f"{ENV_PREFIX}{name} es obligatoria")

        port = 0
        if get("MAILHOG_PORT"):
            try:
                port = int(get("MAILHOG_PORT"))
            except ValueError:
                problems.append(f"{ENV_PREFIX}MAILHOG_PORT no es un entero: {get('MAILHOG_PORT')!r}")

        timeout = 10.0
        try:
            timeout = float(get("HTTP_TIMEOUT", "10"))
        except ValueError:
            problems.append(f"{ENV_PREFIX}HTTP_TIMEOUT no es un número: {get('HTTP_TIMEOUT')!r}")

        policy = get("FAILURE_POLICY", "abort").lower()
        if policy not in FAILURE_POLICIES:
            problems.append(f"{ENV_PREFIX}FAILURE_POLICY debe ser una de {FAILURE_POLICIES}: {policy!r}")

        level = get("LOG_LEVEL", "INFO").upper()
        if not isinstance(logging.getLevelName(level), int):
            problems.append(f"{ENV_PREFIX}LOG_LEVEL desconocido: {level!r}")

        if problems:
            raise ConfigError("; ".join(problems))

        return cls(
            SLACK_TOKEN=get("SLACK_TOKEN"),
            MAILHOG_HOST=get("MAILHOG_HOST"),
            MAILHOG_PORT=port,
            SLACK_CHANNEL_NAME=get("SLACK_CHANNEL_NAME"),
            HTTP_TIMEOUT=timeout,
            FAILURE_POLICY=policy,
            LOG_LEVEL=level,
            SLACK_API_BASE=get("SLACK_API_BASE", "https://slack.com/api"),
        )

    # ───────── helpers ─────────
    def mailhog_base_url(self) -> str:
        return f"http://{self.MAILHOG_HOST}:{self.MAILHOG_PORT}"

    def channel_name(self) -> str:
        return self.SLACK_CHANNEL_NAME.lstrip("#")
