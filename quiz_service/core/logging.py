"""
Structured logging configuration.

Service modules log through ``get_logger``; anything passed as
``extra_data`` ends up as top-level keys of a JSON record (or as
``key=value`` pairs in text mode). The grading engine does not log.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from .config import settings

# LogRecord attribute carrying structured fields
EXTRA_ATTR = "extra_data"


def _extra_of(record: logging.LogRecord) -> Dict[str, Any]:
    return getattr(record, EXTRA_ATTR, None) or {}


class StructuredFormatter(logging.Formatter):
    """One JSON object per record, tagged with service and environment"""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "environment": settings.ENVIRONMENT,
            "location": f"{record.module}.{record.funcName}:{record.lineno}",
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Structured fields never overwrite the fixed keys
        for key, value in _extra_of(record).items():
            log_data.setdefault(key, value)

        return json.dumps(log_data, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable lines with structured fields appended as key=value"""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extra = _extra_of(record)
        if not extra:
            return line
        fields = " ".join(f"{key}={value}" for key, value in extra.items())
        return f"{line} [{fields}]"


def setup_logging(level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """
    Configure root logging for the service.

    Args:
        level: Log level name; defaults to DEBUG when ``settings.DEBUG`` is
            set, otherwise ``settings.LOG_LEVEL``
        log_format: "json" or "text"; defaults to ``settings.LOG_FORMAT``
    """
    if level is None:
        level = "DEBUG" if settings.DEBUG else settings.LOG_LEVEL
    log_level = getattr(logging, level.upper(), logging.INFO)
    formatter = StructuredFormatter() if (log_format or settings.LOG_FORMAT) == "json" else TextFormatter()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if settings.LOG_FILE:
        log_path = Path(settings.LOG_FILE)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(log_level)

    logging.basicConfig(level=log_level, handlers=handlers, force=True)


class LoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that merges permanent context with per-call ``extra_data``"""

    def process(self, msg: str, kwargs: Dict[str, Any]) -> tuple:
        call_data = kwargs.pop(EXTRA_ATTR, None) or {}
        kwargs.setdefault("extra", {})[EXTRA_ATTR] = {**self.extra, **call_data}
        return msg, kwargs

    def bind(self, **context: Any) -> "LoggerAdapter":
        """New adapter with additional permanent context"""
        return LoggerAdapter(self.logger, {**self.extra, **context})


def get_logger(name: str, **context: Any) -> LoggerAdapter:
    """
    Get a service logger.

    Examples:
        logger = get_logger(__name__)
        logger.info("Attempt graded", extra_data={"attempt_id": "42"})

        attempt_log = logger.bind(attempt_id="42")
        attempt_log.info("Answers received")
    """
    return LoggerAdapter(logging.getLogger(name), context)
