# main.py
# Punto de entrada: una pasada MailHog -> adjuntos -> Slack
from __future__ import annotations
import logging
import sys
from config.settings import Settings
from domain.errors import RelayError
from interface_adapters.controllers.relay_controller import RelayController

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)


def main() -> int:
    try:
        settings = Settings.from_env()
        logging.getLogger().setLevel(settings.LOG_LEVEL)

        logger.info("=== MailHog -> Slack relay ===")
        logger.info("MailHog=%s canal=#%s", settings.mailhog_base_url(), settings.channel_name())
        report = RelayController(settings=settings).run_once()
    except RelayError as exc:
        logger.error("Relay abortado: %s", exc)
        return 1
    return 0 if report.ok else 1


if __name__ == "__main__":
    sys.exit(main())
