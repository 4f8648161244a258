"""
Logging Setup - Employee Expertise Cube
expertise_cube/core/logging_config.py

Configures stdlib logging and structlog from Settings.LOG_LEVEL / LOG_FORMAT.
"""

import logging
import sys

import structlog

from expertise_cube.config import Settings


def configure_logging(settings: Settings) -> None:
    """Configure structlog renderers and the stdlib root logger."""
    level = getattr(logging, settings.LOG_LEVEL)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )

    if settings.LOG_FORMAT == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )
