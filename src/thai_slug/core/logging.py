"""Structured logging for the thai-slug command line.

Library modules log through ``logging.getLogger(__name__)`` and stay silent
until :func:`setup_logging` installs a handler. After that, their records
and the CLI's own structlog events share one renderer.
"""

import logging
import sys
from typing import Any, TextIO

import structlog

from thai_slug.core.config import get_settings

# Run for structlog events and for records from plain stdlib loggers
_SHARED_PROCESSORS: list[Any] = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
]


def _renderer(log_format: str) -> Any:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)


def setup_logging(level: str | None = None, stream: TextIO | None = None) -> None:
    """Configure structured logging with structlog.

    Args:
        level: Optional level override; defaults to ``Settings.log_level``.
        stream: Output stream; defaults to stderr, since slugs go to stdout.
    """
    settings = get_settings()

    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_SHARED_PROCESSORS,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(settings.log_format),
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel((level or settings.log_level).upper())


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
