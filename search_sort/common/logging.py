"""Structured logging configuration.

Call ``configure_logging(log_level, log_format)`` once at startup, then acquire
loggers with ``get_logger(__name__)``.
"""

import logging
import sys
from typing import Any, Literal

import structlog
from structlog.stdlib import LoggerFactory, add_logger_name

LogFormat = Literal["console", "json"]


def configure_logging(log_level: str = "WARNING", log_format: LogFormat = "console") -> None:
    """Configure structlog on top of the standard library logger.

    ``log_format`` is ``json`` for machines and ``console`` for humans. Logs go to
    stderr so they never mix with command output.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, log_level.upper()),
        force=True,
    )

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_logger_name,
    ]
    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
