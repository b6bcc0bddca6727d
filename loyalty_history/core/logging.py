"""Process-wide logging setup."""

from __future__ import annotations

import json
import logging
import logging.config
from typing import Any

from loyalty_history.core.config import Settings


class JsonFormatter(logging.Formatter):
    """Render records as one JSON object per line.

    Dict messages are merged into the top level so their keys stay queryable.
    """

    def format(self, record: logging.LogRecord) -> str:
        data: dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
        }
        if isinstance(record.msg, dict):
            data.update(record.msg)
        else:
            data["message"] = record.getMessage()
        if record.exc_info:
            data["stack"] = self.formatException(record.exc_info)
        return json.dumps(data, ensure_ascii=False, default=str)


def configure_logging(settings: Settings) -> None:
    level = "DEBUG" if settings.debug else settings.logging.level.upper()
    formatter: dict[str, Any] = (
        {"()": JsonFormatter} if settings.logging.json_output else {"format": settings.logging.format}
    )
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": formatter,
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                },
            },
            "loggers": {
                "loyalty_history": {
                    "handlers": ["console"],
                    "level": level,
                    "propagate": True,
                },
            },
        }
    )
