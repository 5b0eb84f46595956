"""
Centralized logging configuration for the pattern catalogue.

All modules log through structlog. Log output goes to stderr so that it
never interleaves with the lines an example prints to stdout.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "WARNING",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stderr,
        format="%(message)s",
        force=True,
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
        cache_logger_on_first_use=True,
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


def get_pattern_logger(name: str, pattern: str) -> FilteringBoundLogger:
    """
    Get a logger bound to one pattern example.

    Args:
        name: Logger name (typically __name__)
        pattern: Catalogue name of the pattern, e.g. "observer"

    Returns:
        Structlog logger carrying subsystem and pattern context
    """
    return structlog.get_logger(name, subsystem="patterns", pattern=pattern)


def log_example_result(
    logger: FilteringBoundLogger,
    example_name: str,
    succeeded: bool,
    duration_ms: int,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log the outcome of one example run with standardized format.

    Args:
        logger: Structlog logger instance
        example_name: Catalogue name of the example
        succeeded: Whether the example completed without raising
        duration_ms: Wall-clock duration of the run
        context: Additional context data
    """
    bound_logger = logger.bind(
        example=example_name,
        result="OK" if succeeded else "FAILED",
        duration_ms=duration_ms,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if succeeded:
        bound_logger.info("Example finished")
    else:
        bound_logger.error("Example failed")
