"""
Logging Configuration

Structured JSON output for production and a plain, readable
format for local development.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional

from kundali_yoga.config import settings


class JsonFormatter(logging.Formatter):
    """
    One JSON object per record, for log aggregators.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "app": settings.APP_NAME,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if record.levelno >= logging.ERROR:
            log_data["source"] = {
                "file": record.pathname,
                "line": record.lineno,
                "function": record.funcName,
            }

        return json.dumps(log_data, ensure_ascii=False)


PLAIN_FORMAT = "%(levelname)-8s | %(asctime)s | %(name)s | %(message)s"


def configure_logging(
    level: Optional[str] = None,
    json_output: Optional[bool] = None,
) -> None:
    """
    Install a single stdout handler on the root logger.

    Defaults come from settings (LOG_LEVEL, DEBUG, LOG_JSON, ENV).
    JSON output is also switched on when ENV is "production".
    """
    if level is None:
        level = "DEBUG" if settings.DEBUG else settings.LOG_LEVEL
    level_name = level.upper()
    log_level = getattr(logging, level_name, logging.INFO)

    if json_output is None:
        json_output = settings.LOG_JSON or settings.ENV == "production"

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)

    if json_output:
        console_handler.setFormatter(JsonFormatter())
    else:
        console_handler.setFormatter(logging.Formatter(PLAIN_FORMAT))

    root_logger.addHandler(console_handler)

    logging.getLogger(__name__).debug(
        f"Logging configured - Environment: {settings.ENV}, Level: {level_name}"
    )