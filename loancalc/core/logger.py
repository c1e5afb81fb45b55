"""
Application logging.
Every record carries a correlation id so a request can be followed across log lines.
"""
import json
import logging
import sys
from typing import Any, Dict, Optional

from loancalc.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(correlation_id)s] - %(message)s"


class CorrelationIdFilter(logging.Filter):
    """Fills in a placeholder correlation id for records logged outside a request."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "correlation_id"):
            record.correlation_id = "-"
        return True


def setup_logger(name: str, level: str = "INFO") -> logging.Logger:
    """
    Configures and returns the application logger.
    Safe to call more than once: handlers are only attached the first time.
    """
    log = logging.getLogger(name)
    log.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not log.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.addFilter(CorrelationIdFilter())
        log.addHandler(handler)
        log.propagate = False

    return log


logger = setup_logger(settings.APP_NAME.lower(), settings.LOG_LEVEL)


def get_logger_with_correlation(correlation_id: str) -> logging.LoggerAdapter:
    """Returns a logger that stamps every record with the given correlation id."""
    return logging.LoggerAdapter(logger, {"correlation_id": correlation_id})


def audit_log(
    action: str,
    user: str,
    resource: str,
    details: Optional[Dict[str, Any]] = None
) -> None:
    """
    Emits a structured audit entry on the 'audit' child logger.
    Details are JSON-encoded so downstream collectors can parse them.
    """
    details = details or {}
    correlation_id = details.get("correlation_id", "-")
    payload = json.dumps(details, default=str, sort_keys=True)

    logger.getChild("audit").info(
        f"action={action} user={user} resource={resource} details={payload}",
        extra={"correlation_id": correlation_id}
    )
