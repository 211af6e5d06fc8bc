"""Centralized structured logging configuration using structlog.

Configures structlog on top of the standard library logging module with
timestamps, log levels, callsite information and context variables, rendered
either as JSON lines or as colored console output. Logs are written to stderr
by default so that stdout carries only algorithm results.

Example:
    >>> from graph_algorithms.log_config import configure_logging, get_logger
    >>> configure_logging(level="INFO")
    >>> logger = get_logger(__name__)
    >>> logger.info("dijkstra_started", source=0, vertex_count=5)
"""

import logging
import sys
from typing import Any, TextIO

import structlog


def configure_logging(
    level: str = "INFO",
    json_logs: bool = True,
    stream: TextIO | None = None,
) -> None:
    """Configure structlog for the graph engine.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: If True, use JSONRenderer; if False, use ConsoleRenderer
        stream: Where log lines go; defaults to sys.stderr

    Raises:
        ValueError: If an invalid log level is provided
    """
    # Reject unknown level names up front
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        msg = f"Invalid log level: {level}"
        raise ValueError(msg)

    # Route structlog through stdlib logging, replacing earlier handlers
    logging.basicConfig(
        format="%(message)s",
        stream=stream or sys.stderr,
        level=numeric_level,
        force=True,
    )

    # Processors run in order on every event dict
    processors: list[Any] = [
        # Level name (info, warning, ...)
        structlog.stdlib.add_log_level,
        # ISO 8601 timestamp
        structlog.processors.TimeStamper(fmt="iso"),
        # Module, function and line of the logging call
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.MODULE,
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ],
        ),
        # Render stack and exception info when present
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        # run_id and anything bound with bind_context
        structlog.contextvars.merge_contextvars,
    ]

    # Final renderer
    if json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=False,
                exception_formatter=structlog.dev.plain_traceback,
            ),
        )

    # Not cached, so a later configure_logging call takes effect
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a configured structlog logger.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Returns:
        A configured structlog BoundLogger instance
    """
    return structlog.get_logger(name)


def bind_run_id(run_id: str) -> None:
    """Bind a run ID to the logging context.

    Every log line emitted afterwards in the current context carries the ID,
    which ties together the lines produced by one algorithm invocation.

    Args:
        run_id: Unique identifier for the run
    """
    structlog.contextvars.bind_contextvars(run_id=run_id)


def unbind_run_id() -> None:
    """Remove the run ID from the logging context."""
    structlog.contextvars.unbind_contextvars("run_id")


def bind_context(**kwargs: Any) -> None:
    """Bind arbitrary context variables to the logging context.

    Example:
        >>> bind_context(algorithm="bfs", source=0)
        >>> logger.info("run_started")  # Will include algorithm and source
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def unbind_context(*keys: str) -> None:
    """Remove specific context variables from the logging context."""
    structlog.contextvars.unbind_contextvars(*keys)


def clear_context() -> None:
    """Clear all context variables from the logging context."""
    structlog.contextvars.clear_contextvars()
