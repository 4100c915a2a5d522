"""
structlog setup for the command-line tools.
"""

import logging
import sys

import structlog

from navs13.config.settings import Settings


def configure_logging(settings: Settings) -> None:
    """
    Configure structlog from settings.

    Log lines go to stderr so they never mix with identifiers printed on stdout.
    """
    level = getattr(logging, settings.log_level)

    if settings.log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
