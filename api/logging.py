"""Structured logging configuration."""

import logging
import sys
from typing import Any

import structlog

from api.config import get_settings

# Third-party loggers that are too chatty at INFO
NOISY_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


def setup_logging(log_level: str | None = None, json_logs: bool | None = None) -> None:
    """
    Configure structured logging with structlog.

    Args:
        log_level: Override for the configured log level
        json_logs: Force JSON (True) or console (False) rendering; defaults to
            JSON in production
    """
    settings = get_settings()

    level_name = (log_level or settings.log_level).upper()
    level = getattr(logging, level_name, logging.INFO)
    if json_logs is None:
        json_logs = settings.is_production

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if json_logs:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=sys.stdout.isatty(),
                exception_formatter=structlog.dev.plain_traceback,
            )
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
