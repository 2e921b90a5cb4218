"""Logging setup for the SimpliOptions backend."""

from __future__ import annotations

import json
import logging
import os
from logging.config import dictConfig
from typing import Any


class JsonFormatter(logging.Formatter):
    """One JSON object per log line on stdout."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "time": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S%z"),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def setup_logging(level: str | None = None) -> None:
    """Configure JSON logging for the app and uvicorn. Level defaults to $LOG_LEVEL or INFO."""
    log_level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()

    config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"json": {"()": JsonFormatter}},
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json",
                "stream": "ext://sys.stdout",
            },
        },
        "root": {"level": log_level, "handlers": ["console"]},
        "loggers": {
            "uvicorn": {"level": log_level, "handlers": ["console"], "propagate": False},
            "uvicorn.error": {"level": log_level, "handlers": ["console"], "propagate": False},
            "uvicorn.access": {"level": "WARNING", "handlers": ["console"], "propagate": False},
            # httpx logs every request at INFO, which would echo the API key in the query string
            "httpx": {"level": "WARNING"},
            "simplioptions": {"level": log_level, "handlers": ["console"], "propagate": False},
        },
    }

    dictConfig(config)
