"""Logging setup for semvalue.

Loggers wrap standard library loggers, so events from the library obey the
host application's logging configuration and stay silent by default. The
``semvalue`` command calls :func:`setup_logging` to send them to stderr.
"""

import logging
import sys
from enum import Enum

import structlog


class LogLevel(str, Enum):
    """Log level names accepted by setup_logging."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
    structlog.dev.ConsoleRenderer(
        colors=False,
        exception_formatter=structlog.dev.plain_traceback,
    ),
]


def setup_logging(level: LogLevel | str = LogLevel.WARNING) -> None:
    """Configure the standard library root logger.

    Args:
        level: A LogLevel, or its name in any case.

    Raises:
        ValueError: If the level name is unknown.
    """
    if not isinstance(level, LogLevel):
        try:
            level = LogLevel(level.upper())
        except ValueError as e:
            raise ValueError(f"Unknown log level: {level}") from e

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.value),
        force=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger backed by a standard library logger.

    Args:
        name: Logger name (typically ``__name__``).

    Returns:
        A structlog logger.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )
