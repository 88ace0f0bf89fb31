# domain/errors.py
from __future__ import annotations


class RelayError(Exception):
    """Base de todos los fallos que terminan (o marcan) una pasada de relay."""


class ConfigError(RelayError):
    pass


class TransportError(RelayError):
    """Fallo HTTP/red hablando con MailHog o con Slack."""


class DecodeError(RelayError):
    """JSON mal formado o payload base64 inválido."""


class ChannelNotFoundError(RelayError):
    pass


class UploadError(RelayError):
    """Slack rechazó la subida (respuesta ok=false)."""


class StagingError(RelayError):
    """No se pudo escribir el fichero temporal de un adjunto."""
