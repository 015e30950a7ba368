"""Console entry point"""

import logging
from prometheus_client import start_http_server

from bank_teller.app.computer import Computer
from bank_teller.app.dependencies import get_communicate, get_computer
from bank_teller.app.teller import Teller
from bank_teller.config import settings
from bank_teller.infrastructure.communicate import Communicate
from bank_teller.infrastructure.observability.logging import setup_logging

logger = logging.getLogger(__name__)


def create_teller(
    communicate: Communicate | None = None,
    computer: Computer | None = None,
) -> Teller:
    """Create a Teller, falling back to the default providers"""
    return Teller(
        communicate=communicate or get_communicate(),
        computer=computer or get_computer(),
    )


def main(teller: Teller | None = None) -> int:
    """Run one interactive session; returns the process exit code"""
    setup_logging(settings.log_level, settings.log_file)

    if settings.metrics_port is not None:
        start_http_server(settings.metrics_port)
        logger.info("Metrics server started", extra={"port": settings.metrics_port})

    teller = teller or create_teller()
    try:
        teller.interact()
    except (EOFError, KeyboardInterrupt):
        # Input closed or interrupted before quitting
        logger.info("Session aborted by end of input")
        teller.communicate.write_line("")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
