# interface_adapters/controllers/relay_controller.py
from __future__ import annotations
import logging

from config.settings import Settings
from domain.models import RelayReport
from infrastructure.filesystem.storage import TempStorage
from infrastructure.mailhog.client import MailHogClient
from infrastructure.slack.client import SlackClient
from application.use_cases.relay_attachments_usecase import FailurePolicy, RelayAttachmentsUseCase

logger = logging.getLogger(__name__)


class RelayController:
    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.mailhog = MailHogClient(settings.MAILHOG_HOST, settings.MAILHOG_PORT, timeout=settings.HTTP_TIMEOUT)
        self.slack = SlackClient(
            token=settings.SLACK_TOKEN,
            base=settings.SLACK_API_BASE,
            timeout=settings.HTTP_TIMEOUT,
        )
        self.tmp = TempStorage()
        self.uc = RelayAttachmentsUseCase(
            source=self.mailhog,
            destination=self.slack,
            storage=self.tmp,
            channel_name=settings.channel_name(),
            failure_policy=FailurePolicy(settings.FAILURE_POLICY),
        )

    def run_once(self) -> RelayReport:
        report = self.uc.run()
        logger.info(
            "Pasada terminada: %d mensajes, %d ficheros subidos, %d fallos",
            report.messages_seen, len(report.uploads), len(report.failures),
        )
        for f in report.failures:
            logger.error("Mensaje #%d (%s) no reenviado: %s", f.index, f.message_id or "-", f.error)
        return report
