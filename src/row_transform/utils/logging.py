"""structlog setup for row-transform.

Events are rendered as one JSON object per line (ISO timestamp, level,
logger name, event, context keys) on stderr, so CLI output on stdout stays
machine-readable. Keys that look like credentials are redacted before
rendering.

Environment:
- LOG_LEVEL: DEBUG, INFO (default), WARNING, ERROR, CRITICAL
- LOG_TO_FILE: 1/true/yes adds a daily rotating file handler
- LOG_FILE_DIR: directory for that file (default: logs/)

Usage:
    >>> from row_transform.utils.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("cli.rows_written", rows=120, output="stdout")
"""

import logging
import os
import re
from datetime import datetime
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, Dict, List, MutableMapping, Optional

import structlog
from pydantic import ValidationError
from structlog.types import EventDict, Processor

from row_transform.config import get_settings

SENSITIVE_KEY = re.compile(r"password|token|api_key|secret", re.IGNORECASE)
REDACTED_VALUE = "[REDACTED]"
FILE_LOGGING_FLAGS = ("1", "true", "yes")


def sanitize_for_logging(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Return a copy of ``data`` with credential-like keys redacted.

    Nested dictionaries are sanitized recursively.

    Example:
        >>> sanitize_for_logging({"api_key": "abc", "template": "customers"})
        {'api_key': '[REDACTED]', 'template': 'customers'}
    """
    sanitized: Dict[str, Any] = {}
    for key, value in data.items():
        if SENSITIVE_KEY.search(str(key)):
            value = REDACTED_VALUE
        elif isinstance(value, dict):
            value = sanitize_for_logging(value)
        sanitized[key] = value
    return sanitized


def sanitization_processor(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> MutableMapping[str, Any]:
    return sanitize_for_logging(dict(event_dict))


def _resolve_level(level: Optional[str]) -> int:
    if level is None:
        try:
            level = get_settings().LOG_LEVEL
        except ValidationError:
            # A bad RT_* variable must not keep logging from starting
            level = os.getenv("LOG_LEVEL", "INFO")
    return getattr(logging, level.upper(), logging.INFO)


def _build_handlers(level: int) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]

    if os.getenv("LOG_TO_FILE", "").lower() in FILE_LOGGING_FLAGS:
        log_dir = Path(os.getenv("LOG_FILE_DIR", "logs"))
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(
            TimedRotatingFileHandler(
                filename=str(log_dir / f"row-transform-{datetime.now():%Y%m%d}.log"),
                when="midnight",
                backupCount=30,
                encoding="utf-8",
            )
        )

    for handler in handlers:
        handler.setLevel(level)
    return handlers


def _configure_logging(level: Optional[str] = None) -> None:
    """
    Route structlog through the stdlib root logger with JSON rendering.

    Args:
        level: Level name; defaults to ``Settings.LOG_LEVEL``
    """
    resolved = _resolve_level(level)
    root = logging.getLogger()
    root.setLevel(resolved)
    for handler in _build_handlers(resolved):
        root.addHandler(handler)

    processors: List[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        sanitization_processor,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


_configure_logging()


def get_logger(name: str) -> Any:
    """Return a structlog logger named ``name`` (usually ``__name__``)."""
    return structlog.get_logger(name)


__all__ = [
    "REDACTED_VALUE",
    "get_logger",
    "sanitization_processor",
    "sanitize_for_logging",
]
