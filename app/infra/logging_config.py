"""Logging setup for the API process: text or JSON lines on stdout."""

from __future__ import annotations

import json
import logging
import logging.config
import time
from typing import Any, Optional

from app.config import get_settings

ROOT_LOGGER_NAME = "beacon"


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": int(time.time() * 1000),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for key in ("user_id", "conversation_id", "alert_id", "invitation_id"):
            if hasattr(record, key):
                payload[key] = getattr(record, key)

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


class LoggingConfig:
    """Configure stdlib logging from settings. Safe to instantiate more than once."""

    def __init__(self, level: Optional[str] = None, fmt: Optional[str] = None) -> None:
        settings = get_settings()
        self.level = (level or settings.log_level).upper()
        self.fmt = (fmt or settings.log_format).lower()
        self.configure()

    def configure(self) -> None:
        formatter = "json" if self.fmt == "json" else "text"
        logging.config.dictConfig(
            {
                "version": 1,
                "disable_existing_loggers": False,
                "formatters": {
                    "text": {
                        "format": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
                    },
                    "json": {"()": JsonFormatter},
                },
                "handlers": {
                    "console": {
                        "class": "logging.StreamHandler",
                        "formatter": formatter,
                        "stream": "ext://sys.stdout",
                    },
                },
                "root": {"level": self.level, "handlers": ["console"]},
                "loggers": {
                    "uvicorn.access": {"level": "WARNING"},
                    "sqlalchemy.engine": {"level": "WARNING"},
                },
            }
        )


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger namespaced under the application root logger."""
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
