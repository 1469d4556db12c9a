"""
Centralized logging configuration for daycount.

All modules log through structlog. The date model itself only emits
debug-level records describing rejected input; it never logs an error
in place of raising it.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None,
    cache_loggers: bool = True
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
        cache_loggers: Cache bound loggers on first use; tests that
            reconfigure structlog afterwards pass False
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=cache_loggers,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def log_rejected_input(
    logger: FilteringBoundLogger,
    field: str,
    raw_value: Any,
    error: Exception,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a rejected input value with standardized format.

    Callers re-raise ``error`` afterwards.

    Args:
        logger: Structlog logger instance
        field: Which field was rejected (date, year, month, day)
        raw_value: The value as supplied by the caller
        error: The validation error about to be raised
        context: Additional context data
    """
    bound_logger = logger.bind(
        field=field,
        raw_value=raw_value,
        error_type=type(error).__name__,
        reason=str(error),
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.debug("Input rejected")
