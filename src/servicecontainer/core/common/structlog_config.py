"""
Structured logging configuration.

This module provides utilities for configuring and using structured logging.
"""

from __future__ import annotations

import logging
from enum import Enum

import structlog


class LogFormat(str, Enum):
    """Log format options."""

    JSON = "json"
    CONSOLE = "console"
    PLAIN = "plain"


def configure_logging(
    log_format: LogFormat = LogFormat.CONSOLE, level: int = logging.INFO
) -> None:
    """Configure structlog to render through the standard library.

    Args:
        log_format: Output format for structured events
        level: Minimum level passed to the standard library root logger
    """
    if log_format == LogFormat.JSON:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    elif log_format == LogFormat.CONSOLE:
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.KeyValueRenderer(key_order=["event"])

    logging.basicConfig(format="%(message)s", level=level)
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger.

    Args:
        name: Optional logger name

    Returns:
        A structured logger
    """
    return structlog.get_logger(name)  # type: ignore
