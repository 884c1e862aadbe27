"""Centralized structured logging configuration using structlog.

This module configures structlog for the adjgraph package with JSON or
console output, timestamps and correlation IDs.
Graph mutations and traversals emit debug events, so DEBUG level shows every
edge change and search result.

Example:
    >>> from adjgraph.log_config import configure_logging, get_logger
    >>> configure_logging(level="DEBUG", json_logs=False)
    >>> logger = get_logger(__name__)
    >>> logger.info("graph_loaded", num_vertices=5, num_edges=4)
"""

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from adjgraph.config import LoggingConfig


def configure_logging(level: str = "INFO", json_logs: bool = True) -> None:
    """Configure structlog for the adjgraph package.

    Sets up structlog with processors for timestamps, log levels, stack info,
    and JSON rendering. Also configures the standard library logging to work
    with structlog.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: If True, use JSONRenderer; if False, use ConsoleRenderer for development

    Raises:
        ValueError: If an invalid log level is provided
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        msg = f"Invalid log level: {level}"
        raise ValueError(msg)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=numeric_level,
    )
    logging.getLogger().setLevel(numeric_level)

    processors: list[Any] = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.MODULE,
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ],
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.contextvars.merge_contextvars,
    ]

    if json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            ),
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging_from_config(config: "LoggingConfig") -> None:
    """Configure logging from a LoggingConfig section.

    Args:
        config: Validated logging settings

    Example:
        >>> from adjgraph.config import get_config
        >>> configure_logging_from_config(get_config().logging)
    """
    configure_logging(level=config.level, json_logs=config.json_logs)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a configured structlog logger.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Returns:
        A configured structlog BoundLogger instance
    """
    return structlog.get_logger(name)


def bind_correlation_id(correlation_id: str) -> None:
    """Bind a correlation ID to the logging context.

    Every subsequent log message in the current context carries the
    correlation_id, which ties together the events of one batch of graph
    operations.

    Args:
        correlation_id: Unique identifier for correlating related log entries
    """
    structlog.contextvars.bind_contextvars(correlation_id=correlation_id)


def unbind_correlation_id() -> None:
    """Remove the correlation ID from the logging context."""
    structlog.contextvars.unbind_contextvars("correlation_id")

