"""Console logging setup and structured query events."""

import json
import logging
import os
import sys
from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any

ROOT_LOGGER_NAME = "nuget_client"


def _use_color() -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    try:
        return sys.stdout.isatty()
    except Exception:
        return False


def _c(role: str) -> str:
    if not _use_color():
        return ""
    codes = {
        "dim": "\033[38;5;239m",
        "warn": "\033[38;5;221m",
        "error": "\033[38;5;203m",
    }
    return codes.get(role, "")


def _reset() -> str:
    if not _use_color():
        return ""
    return "\033[0m"


class _ConsoleFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        if record.levelno >= logging.ERROR:
            return f"{_c('error')}{line}{_reset()}"
        if record.levelno >= logging.WARNING:
            return f"{_c('warn')}{line}{_reset()}"
        if record.levelno <= logging.DEBUG:
            return f"{_c('dim')}{line}{_reset()}"
        return line


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """Attach a single console handler to the package logger."""
    log = logging.getLogger(ROOT_LOGGER_NAME)
    log.setLevel(level)
    if not log.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(_ConsoleFormatter("%(asctime)s │ %(message)s", datefmt="%H:%M:%S"))
        log.addHandler(handler)
    for handler in log.handlers:
        handler.setLevel(level)
    # httpx logs every request at INFO.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    return log


@dataclass
class QueryEvent:
    event_type: str
    data: dict[str, Any] = field(default_factory=dict)
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())

    def to_dict(self) -> dict:
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), default=str)
