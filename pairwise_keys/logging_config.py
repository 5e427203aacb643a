"""
Structured Logging Configuration

Setup for structured logging with pairwise ids and JSON formatting.
Key material and master secrets are never passed to these loggers.
"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger import jsonlogger

from .config import get_settings


class PairwiseIdFilter(logging.Filter):
    """Ensure every record carries a pairwise_id field."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, 'pairwise_id'):
            record.pairwise_id = '-'
        return True


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with additional fields."""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record['timestamp'] = datetime.now(timezone.utc).isoformat()
        log_record['service'] = 'pairwise-keys'
        log_record['version'] = get_settings().app_version

        if not log_record.get('level'):
            log_record['level'] = record.levelname


def setup_logging() -> None:
    """Configure the package logger from settings."""
    settings = get_settings()

    package_logger = logging.getLogger('pairwise_keys')
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)

    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)
    package_logger.setLevel(log_level)
    package_logger.propagate = False

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.addFilter(PairwiseIdFilter())

    if settings.log_format.lower() == 'json':
        formatter = CustomJsonFormatter(
            fmt='%(timestamp)s %(level)s %(name)s %(pairwise_id)s %(message)s'
        )
    else:
        formatter = logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(pairwise_id)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    package_logger.info(
        f"Logging configured - level: {settings.log_level}, format: {settings.log_format}"
    )
