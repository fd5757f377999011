"""Logging utilities for lookslike.

Library modules only create module-level loggers. Applications (or test
suites) that want to see engine diagnostics call ``setup_logging`` once,
usually through ``setup_logging_from_settings``.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Dict, List, Optional

if TYPE_CHECKING:
    from lookslike.lib.settings import LookslikeSettings

__all__ = [
    "JSONFormatter",
    "setup_logging",
    "setup_logging_from_settings",
]

_CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_RECORD_ATTRS = frozenset(logging.LogRecord("", 0, "", 0, "", (), None).__dict__) | {
    "message",
    "asctime",
}


class JSONFormatter(logging.Formatter):
    """One JSON object per record.

    Example output:
        {"timestamp": "2025-01-15T10:30:00.123Z", "level": "DEBUG",
         "logger": "lookslike.lib.compiler", "message": "Compiled map schema into 4 checks"}
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        # extra= attributes
        extra = {k: v for k, v in record.__dict__.items() if k not in _RECORD_ATTRS}
        if extra:
            entry["extra"] = extra

        return json.dumps(entry, default=str)


def setup_logging(
    level: str = "WARNING",
    json_format: bool = False,
    log_file: Optional[str] = None,
) -> None:
    """Configure the root logger.

    Args:
        level: Level name such as ``DEBUG`` or ``warning``
        json_format: Emit JSON lines instead of the console format
        log_file: Also write records to this file
    """
    log_level = logging.getLevelName(level.upper())
    formatter: logging.Formatter
    if json_format:
        formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(_CONSOLE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    root_logger.setLevel(log_level)
    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)


def setup_logging_from_settings(settings: Optional["LookslikeSettings"] = None) -> None:
    """Configure logging from environment-driven settings."""
    if settings is None:
        from lookslike.lib.settings import LookslikeSettings

        settings = LookslikeSettings()

    setup_logging(
        level=settings.log_level,
        json_format=settings.log_format == "json",
        log_file=settings.log_file,
    )
