"""Application logger: JSON lines on stdout in production, standard logging otherwise."""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime

LOGGER_NAME = "sophie"
_JSON_HANDLER = "sophie-json"


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        return json.dumps({
            "time": datetime.fromtimestamp(record.created).astimezone().isoformat(timespec="milliseconds"),
            "level": {"WARNING": "WARN", "CRITICAL": "ERROR"}.get(record.levelname, record.levelname),
            "msg": record.getMessage(),
        }, ensure_ascii=False)


def get_logger(environment: str | None = None) -> logging.Logger:
    """Return the application logger; environment defaults to $ENVIRONMENT."""
    if environment is None:
        environment = os.environ.get("ENVIRONMENT", "")
    logger = logging.getLogger(LOGGER_NAME)
    for handler in [h for h in logger.handlers if h.get_name() == _JSON_HANDLER]:
        logger.removeHandler(handler)
    logger.setLevel(logging.INFO)
    logger.propagate = environment != "PROD"
    if environment == "PROD":
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(_JSON_HANDLER)
        handler.setFormatter(_JsonFormatter())
        logger.addHandler(handler)
    return logger