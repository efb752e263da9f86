"""Structured logging configuration for the API process."""

from __future__ import annotations

import logging
import sys
from datetime import UTC, datetime
from typing import Any

from pythonjsonlogger.json import JsonFormatter

_NOISY_LOGGERS = ("sqlalchemy.engine", "uvicorn.access")


class JoblyJsonFormatter(JsonFormatter):
    """JSON formatter that stamps every record with a fixed set of fields."""

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(UTC).isoformat()
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record["module"] = record.module
        log_record["function"] = record.funcName
        if record.levelno >= logging.WARNING:
            log_record["line"] = record.lineno


def build_formatter(*, json_logs: bool) -> logging.Formatter:
    """Return the JSON formatter for production or a plain one for development."""

    if json_logs:
        return JoblyJsonFormatter("%(timestamp)s %(level)s %(logger)s %(message)s")
    return logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def setup_logging(log_level: str = "INFO", *, json_logs: bool = True) -> None:
    """Configure the root logger with a single stdout handler.

    Calling it again replaces the previously installed handler instead of
    stacking a second one.
    """

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(build_formatter(json_logs=json_logs))

    root_logger.setLevel(log_level.upper())
    root_logger.addHandler(console_handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


__all__ = ["JoblyJsonFormatter", "build_formatter", "setup_logging"]
