"""Structured JSON logging for session observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

from bank_teller.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "WARNING", log_file: str | None = None) -> None:
    """
    Configure structured JSON logging.

    Records go to log_file when given, otherwise to stderr; stdout is
    reserved for the teller's prompts.
    """
    logger = logging.getLogger()
    logger.setLevel(level.upper())

    # Remove existing handlers
    logger.handlers.clear()

    if log_file:
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_transaction(
    operation: str,
    customer: str,
    balance_before: float,
    balance_after: float,
    rating: str,
) -> None:
    """Log structured outcome of a deposit or withdrawal"""
    logging.getLogger("bank_teller.transactions").info(
        "Transaction completed",
        extra={
            "operation": operation,
            "customer": customer,
            "balance_before": balance_before,
            "balance_after": balance_after,
            "rating": rating,
        },
    )
