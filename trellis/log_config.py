"""Structured logging configuration using structlog.

Library modules obtain their logger with ``structlog.get_logger(__name__)``
and never configure output themselves. An embedding application may call
:func:`configure_logging` once at startup to route ``trellis`` events
through the standard library ``trellis`` logger.

Example:
    >>> from trellis.log_config import configure_logging
    >>> configure_logging(level="DEBUG", json_logs=False)
    >>> dijkstra(root)  # Emits dijkstra_completed at debug level
"""

import logging
import sys
from typing import Any, TextIO

import structlog

HANDLER_NAME = "trellis"


def configure_logging(
    level: str = "INFO",
    json_logs: bool = True,
    stream: TextIO | None = None,
) -> None:
    """Configure structlog and attach a handler to the ``trellis`` logger.

    The root logger is left alone. Calling this again replaces the handler
    installed by the previous call.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: If True, render JSON lines; if False, use the console renderer
        stream: Output stream for the handler, stderr by default

    Raises:
        ValueError: If an invalid log level is provided
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        msg = f"Invalid log level: {level}"
        raise ValueError(msg)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(message)s"))

    library_logger = logging.getLogger("trellis")
    for existing in list(library_logger.handlers):
        if existing.get_name() == HANDLER_NAME:
            library_logger.removeHandler(existing)
    library_logger.addHandler(handler)
    library_logger.setLevel(numeric_level)

    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger, typically for ``__name__``."""
    return structlog.get_logger(name)
