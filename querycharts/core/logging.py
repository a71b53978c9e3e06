"""
QueryCharts Logging Configuration

Console logging for the service, plus two optional rotating files:
the application log and a dedicated chart log that records hydration
decisions (placeholder fallbacks, detected columns, rejected mappings)
at DEBUG without raising the console level.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from querycharts.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Namespace shared by every pipeline module logger
CHART_LOGGER_NAME = "querycharts.charts"

QUIET_LOGGERS = ("uvicorn.access", "uvicorn.error", "httpx", "httpcore", "asyncio")


def create_rotating_file_handler(
    log_path: str,
    max_bytes: int | None = None,
    backup_count: int | None = None,
    level: int = logging.DEBUG,
) -> RotatingFileHandler:
    """
    Create a rotating file handler with size limits.

    Args:
        log_path: Path to the log file; missing directories are created
        max_bytes: Maximum size per log file (default from settings)
        backup_count: Number of backup files to keep (default from settings)
        level: Logging level for this handler
    """
    Path(log_path).parent.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(
        log_path,
        maxBytes=max_bytes or settings.log_max_bytes,
        backupCount=backup_count or settings.log_backup_count,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.setLevel(level)
    return handler


def setup_chart_logging(log_path: str | None = None) -> logging.Logger:
    """
    Send chart pipeline logs to their own rotating file at DEBUG.

    Safe to call repeatedly: a second file handler is never attached.
    """
    logger = logging.getLogger(CHART_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    if not any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
        handler = create_rotating_file_handler(log_path or settings.chart_log_file_path)
        logger.addHandler(handler)

    return logger


def setup_logging(log_level: str | None = None) -> None:
    """
    Configure application logging.

    Args:
        log_level: Override log level from settings
    """
    level = getattr(logging, log_level or settings.log_level)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    if settings.log_to_file:
        logging.getLogger().addHandler(
            create_rotating_file_handler(settings.log_file_path, level=level)
        )

    if settings.chart_log_to_file:
        setup_chart_logging(settings.chart_log_file_path)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.info(
        f"QueryCharts logging initialized at {logging.getLevelName(level)} level "
        f"(file: {'on' if settings.log_to_file else 'off'}, "
        f"chart log: {settings.chart_log_file_path if settings.chart_log_to_file else 'off'})"
    )


def get_logger(name: str) -> logging.Logger:
    """Logger for a module (typically ``__name__``)"""
    return logging.getLogger(name)
