"""Logging configuration for renovation.

Provides structured logging using structlog with JSON output for production
and plain console output for development.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any

import structlog

from renovation.core.exceptions import ConfigurationError
from renovation.core.settings import get_settings

# Log file location
LOG_DIR = Path(__file__).parent.parent.parent / "logs"
LOG_FILE = LOG_DIR / "renovation.log"

_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

# Module-level state for lazy initialization
_configured: bool = False


def configure_logging(
    level: str | None = None,
    json_output: bool | None = None,
) -> structlog.BoundLogger:
    """Configure structured logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to settings.
        json_output: If True, output JSON format. Defaults to settings.

    Returns:
        Configured logger instance.

    Raises:
        ConfigurationError: If the level is not a known logging level.
    """
    global _configured

    # Skip if already configured (idempotent)
    if _configured:
        return structlog.get_logger()

    settings = get_settings()
    if level is None:
        level = "DEBUG" if settings.debug_mode else settings.log_level
    log_level = level.upper()
    if log_level not in _LEVELS:
        raise ConfigurationError(f"Unknown log level '{level}'")
    numeric_level = getattr(logging, log_level)

    if json_output is None:
        json_output = settings.json_logs

    # 1. Configure Standard Library Logging (Handlers)
    handlers: list[logging.Handler] = [
        logging.StreamHandler(sys.stderr),
    ]

    # Only add file handler if not in test mode
    if not os.environ.get("PYTEST_CURRENT_TEST"):
        try:
            LOG_DIR.mkdir(exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                str(LOG_FILE), maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
            )
            handlers.append(file_handler)
        except OSError:
            # Console logging still works without a log file
            pass

    logging.basicConfig(
        format="%(message)s",
        level=numeric_level,
        handlers=handlers,
        force=True,
    )

    # 2. Configure Structlog Processors
    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    # 3. Configure Structlog to wrap Stdlib
    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    _configured = True
    return structlog.get_logger()


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a logger instance, optionally bound to a specific name.

    Logging is configured lazily on first call.
    """
    if not _configured:
        configure_logging()

    logger = structlog.get_logger()
    if name:
        return logger.bind(logger_name=name)
    return logger
