"""Centralized structured logging configuration using structlog.

structlog renders events either as JSON or in the development console
format, and hands them to the standard library ``logging`` module so that
handlers (including pytest's ``caplog``) see every event.

Example:
    >>> from shortest_paths.log_config import configure_logging, get_logger
    >>> configure_logging(level="INFO")
    >>> logger = get_logger(__name__)
    >>> logger.info("solver_started", source="s")
"""

import logging
import sys
from typing import Any

import structlog


def _build_processors(json_logs: bool) -> list[Any]:
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=False,
                exception_formatter=structlog.dev.plain_traceback,
            ),
        )
    return processors


def configure_logging(level: str = "WARNING", json_logs: bool = False) -> None:
    """Configure structlog and the standard library logger behind it.

    Logs go to stderr so that stdout carries only the solver output.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: If True, use JSONRenderer; otherwise the console renderer

    Raises:
        ValueError: If an invalid log level is provided
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        msg = f"Invalid log level: {level}"
        raise ValueError(msg)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=numeric_level,
    )
    logging.getLogger().setLevel(numeric_level)

    structlog.configure(
        processors=_build_processors(json_logs),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Returns:
        A structlog logger bound to the current configuration
    """
    return structlog.get_logger(name)


def bind_run_context(**values: Any) -> None:
    """Attach values (e.g. ``run_id``, ``algorithm``, ``source``) to every
    subsequent log event in the current context.
    """
    structlog.contextvars.bind_contextvars(**values)


def clear_run_context() -> None:
    """Drop all values bound with ``bind_run_context``."""
    structlog.contextvars.clear_contextvars()
