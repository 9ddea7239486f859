"""Structured logging setup (structlog)."""

from __future__ import annotations

import logging
import sys

import structlog

_configured = False


def configure_logging(level: str | None = None, json: bool | None = None) -> None:
    """Configure structlog processors once for the whole process.

    Falls back to ``settings.log_level`` / ``settings.log_json`` when
    arguments are omitted.
    """
    global _configured
    from betlytics.config import settings

    level = (level or settings.log_level).upper()
    json = settings.log_json if json is None else json
    renderer = (
        structlog.processors.JSONRenderer()
        if json
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )
    _configured = True


def get_logger(name: str | None = None) -> structlog.typing.FilteringBoundLogger:
    """Return a bound logger, configuring structlog on first use."""
    if not _configured:
        configure_logging()
    return structlog.get_logger(name)
