"""
Centralized logging configuration for the billing system.

This module provides standardized logging configuration using structlog
for all components. Everything that logs should go through these helpers
so statement generation is recorded with consistent structured fields.
"""
import logging
import sys
from typing import Any, Optional, TextIO

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure structlog for the entire application.

    Statement text is written to stdout by the scripts, so log entries
    default to stderr.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, one JSON object per entry; otherwise console format
        stream: Destination for log output (defaults to stderr)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        stream=stream or sys.stderr,
        format="%(message)s",
        force=True,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if format_json
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_billing_logger(name: str, **context: Any) -> FilteringBoundLogger:
    """
    Get a logger bound to the billing subsystem.

    Args:
        name: Logger name (typically __name__)
        **context: Extra key/value pairs bound to every entry

    Returns:
        Configured structlog logger for statement generation
    """
    return get_logger(name).bind(subsystem="billing", **context)
