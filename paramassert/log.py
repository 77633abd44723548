"""Structured logging setup for assertion diagnostics."""

import logging
from typing import Optional

import structlog

from paramassert.config import Settings, get_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure structlog for diagnostic output.

    Console rendering is used while debugging; JSON lines otherwise, or when
    LOG_JSON is set explicitly.
    """
    settings = settings or get_settings()
    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    if not isinstance(level, int):
        level = logging.INFO

    use_console = settings.DEBUG and not settings.LOG_JSON
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if use_console else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if settings.DEBUG else level
        ),
    )
