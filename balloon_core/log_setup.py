"""
Balloon Logging
===============
structlog configuration for applications embedding the library.

The library itself only calls structlog.get_logger(); this helper is
for callers that don't configure structlog themselves.
"""

import logging
import sys

import structlog

from . import config


def configure_logging(level: str = config.LOG_LEVEL, json_output: bool = False) -> None:
    """
    Configure structlog and the stdlib root logger.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: Render JSON lines instead of console output
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level)

    renderer = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )
