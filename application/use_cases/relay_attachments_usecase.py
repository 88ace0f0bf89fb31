# application/use_cases/relay_attachments_usecase.py
from __future__ import annotations
import enum
import logging
from contextlib import AbstractContextManager
from pathlib import Path
from typing import Iterable, Protocol

from domain.errors import RelayError
from domain.models import Attachment, Message, MessageBatch, MessageFailure, RelayReport, UploadedFile
from application.services.attachment_extractor import extract_attachments

logger = logging.getLogger(__name__)


class MessageSource(Protocol):
    def get_messages(self) -> MessageBatch: ...


class FileDestination(Protocol):
    def find_channel_by_name(self, name: str) -> str: ...

    def files_upload(
        self, *, filepath: Path, filetype: str, filename: str, title: str, channels: Iterable[str]
    ) -> UploadedFile: ...


class StagingArea(Protocol):
    def staged(self, name_hint: str, data: bytes) -> AbstractContextManager[Path]: ...


class FailurePolicy(str, enum.Enum):
    ABORT = "abort"        # el primer error de un mensaje corta toda la pasada
    CONTINUE = "continue"  # se anota el error y se sigue con el siguiente mensaje


class RelayAttachmentsUseCase:
    def __init__(
        self,
        *,
        source: MessageSource,
        destination: FileDestination,
        storage: StagingArea,
        channel_name: str,
        failure_policy: FailurePolicy = FailurePolicy.ABORT,
    ) -> None:
        self.source = source
        self.destination = destination
        self.storage = storage
        self.channel_name = channel_name
        self.failure_policy = FailurePolicy(failure_policy)

    def _upload(self, channel_id: str, attach: Attachment) -> UploadedFile:
        with self.storage.staged(attach.filename, attach.content) as fp:
            return self.destination.files_upload(
                filepath=fp,
                filetype="auto",
                filename=attach.filename,
                title=attach.filename,
                channels=[channel_id],
            )

    def _relay_message(self, channel_id: str, msg_num: int, msg: Message, report: RelayReport) -> None:
        logger.info("Mensaje #%d (id=%s, asunto=%s)", msg_num, msg.id, msg.subject() or "-")
        for attach in extract_attachments(msg):
            info = self._upload(channel_id, attach)
            logger.info("Subido %s -> %s", attach.filename, info.private_download_url)
            report.uploads.append(info)

    def run(self) -> RelayReport:
        """
        Fetch → Resolve → (Extract → Upload)* en orden, sin concurrencia ni reintentos.
        Fetch y resolve son siempre fatales; el resto depende de failure_policy.
        Con ABORT lo ya subido antes del fallo se queda subido (no hay rollback).
        """
        batch = self.source.get_messages()
        logger.info("Recibidos %d mensajes (total=%d, start=%d)", len(batch), batch.total, batch.start)
        channel_id = self.destination.find_channel_by_name(self.channel_name)
        logger.info("Canal '%s' -> %s", self.channel_name, channel_id)

        report = RelayReport()
        for msg_num, msg in enumerate(batch):
            report.messages_seen += 1
            try:
                self._relay_message(channel_id, msg_num, msg, report)
            except RelayError as exc:
                if self.failure_policy is FailurePolicy.ABORT:
                    raise
                logger.error("Mensaje #%d falló, se continúa: %s", msg_num, exc)
                report.failures.append(MessageFailure(index=msg_num, message_id=msg.id, error=exc))
                continue
            logger.info("You can delete Message #%d", msg_num)
        return report
