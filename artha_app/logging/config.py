"""
Centralized logging configuration for the investment comparison engine.

This module provides standardized logging configuration using structlog
for all components. The projection engine itself never logs; the rate
providers, narrative generator and service façade log through the
helpers defined here.
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
        stream=sys.stdout,
        format="%(message)s"
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
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

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


def get_rates_logger(name: str) -> FilteringBoundLogger:
    """Get a logger bound to the rate supply subsystem."""
    return get_logger(name).bind(subsystem="rates")


def get_narrative_logger(name: str) -> FilteringBoundLogger:
    """Get a logger bound to the narrative generation subsystem."""
    return get_logger(name).bind(subsystem="narrative")


def log_rate_source(
    logger: FilteringBoundLogger,
    source: str,
    instrument_count: int,
    fallback: bool,
    reason: Optional[str] = None
) -> None:
    """
    Log which source supplied the quotes for a comparison.

    Args:
        logger: Structlog logger instance
        source: Name of the provider that produced the quotes
        instrument_count: Number of quotes supplied
        fallback: Whether the quotes came from a fallback provider
        reason: Why the fallback was used, if it was
    """
    bound_logger = logger.bind(
        rate_source=source,
        instrument_count=instrument_count,
        fallback=fallback,
    )

    if fallback:
        bound_logger.warning("Using fallback investment rates", reason=reason)
    else:
        bound_logger.info("Investment rates supplied")


def log_comparison(
    logger: FilteringBoundLogger,
    best_instrument: str,
    instrument_count: int,
    horizon_years: int,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log the outcome of a ranking with standardized format.

    Args:
        logger: Structlog logger instance
        best_instrument: Id of the top-ranked instrument
        instrument_count: Number of instruments ranked
        horizon_years: Projection horizon
        context: Additional context data
    """
    bound_logger = logger.bind(
        best_instrument=best_instrument,
        instrument_count=instrument_count,
        horizon_years=horizon_years,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("Investment comparison ranked")
