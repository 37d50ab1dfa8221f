"""
Structured logging using structlog.

``setup_logging`` reads the ``logging`` settings section; ``configure_logging``
takes the level and format directly so tools and tests can redirect output.
Formats: ``json`` (one object per line) or ``console`` (colored, for humans).
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Any

import structlog
from structlog.types import Processor

from adtracker.common.config import get_settings

LOG_FORMATS = ("json", "console")


def build_processors(fmt: str) -> list[Processor]:
    """Processor chain for ``fmt``, ending with its renderer."""
    if fmt not in LOG_FORMATS:
        raise ValueError(f"Unknown log format: {fmt!r}")

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if fmt == "json":
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    return processors


def configure_logging(level: str, fmt: str, stream: IO[str] | None = None) -> None:
    """Route structlog and stdlib logging to ``stream`` (stdout by default)."""
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level!r}")

    structlog.configure(
        processors=build_processors(fmt),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=True,
    )

    # uvicorn logs through the standard library
    logging.basicConfig(
        format="%(message)s",
        stream=stream or sys.stdout,
        level=numeric_level,
    )


def setup_logging() -> None:
    """Configure logging from the active settings."""
    settings = get_settings()
    configure_logging(settings.logging.level, settings.logging.format)


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Logger bound with ``logger_name`` when ``name`` is given."""
    logger = structlog.get_logger()
    if name:
        logger = logger.bind(logger_name=name)
    return logger


def log_context(**kwargs: Any) -> None:
    """
    Add context variables to all subsequent log messages in the current context.

    Usage:
        log_context(request_id="abc123")
        logger.info("Ad created")  # carries request_id
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    structlog.contextvars.clear_contextvars()


setup_logging()
