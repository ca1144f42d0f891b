"""
Process-wide logging setup.

Production writes one JSON object per line on stdout; development gets a
plain single-line format.
"""

import logging
import sys
from datetime import datetime, timezone
from pythonjsonlogger import jsonlogger

from jobboard.core.config import settings

# Loggers that drown out request logs at INFO
_NOISY_LOGGERS = {
    "sqlalchemy.engine": logging.WARNING,
    "passlib": logging.ERROR,
}


class JobBoardJsonFormatter(jsonlogger.JsonFormatter):
    """Tags each record with the service name and UTC time; warnings also get their source location."""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.fromtimestamp(record.created, timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record["service"] = settings.PROJECT_NAME

        if record.levelno >= logging.WARNING:
            log_record["location"] = f"{record.pathname}:{record.lineno}"


def _build_formatter(json_logs: bool) -> logging.Formatter:
    if json_logs:
        return JobBoardJsonFormatter("%(message)s %(module)s %(funcName)s")
    return logging.Formatter(
        "%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
    )


def setup_logging(log_level: str = "INFO", json_logs: bool = True) -> None:
    """
    Replace the root handlers with a single stdout handler.

    Args:
        log_level: Root level name, e.g. "DEBUG" or "INFO"
        json_logs: JSON lines when True, human-readable text otherwise
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_build_formatter(json_logs))

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(log_level.upper())

    for name, level in _NOISY_LOGGERS.items():
        logging.getLogger(name).setLevel(level)
