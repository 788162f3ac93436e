"""
structlog setup and the valuation event helpers.

Library code only emits events; applications decide on levels and rendering
by calling configure_logging (or configure_logging_from_params) once at
startup.
"""
import logging
import sys
from datetime import date
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger

from ..config.defaults import LoggingParams


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
) -> None:
    """
    Route valuation events through stdlib logging on stdout.

    Args:
        level: Minimum level name for valuation events, case-insensitive
        format_json: Render events as JSON lines instead of key=value text
        include_timestamp: Stamp each event with an ISO timestamp
    """
    logging.basicConfig(stream=sys.stdout, format="%(message)s")
    logging.getLogger().setLevel(level.upper())

    processors: list = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.format_exc_info,
    ]
    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))
    processors.append(_renderer(format_json))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def _renderer(format_json: bool) -> Any:
    if format_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)


def configure_logging_from_params(params: LoggingParams, **kwargs: Any) -> None:
    """Configure logging from the logging section of a loaded configuration."""
    configure_logging(level=params.level, format_json=params.format_json, **kwargs)


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_valuation_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the valuation subsystem.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structlog logger carrying valuation context
    """
    return get_logger(name).bind(subsystem="valuation")


def log_evaluation(
    logger: FilteringBoundLogger,
    kind: str,
    on: date,
    outcome: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log the outcome of a contract evaluation with standardized fields.

    Args:
        logger: Structlog logger instance
        kind: Combinator kind at the root of the evaluated contract
        on: Evaluation date
        outcome: "ok" for a produced value process, otherwise the error name
        context: Additional context data
    """
    bound_logger = logger.bind(
        root_kind=kind,
        evaluation_date=on.isoformat(),
        outcome=outcome,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if outcome == "ok":
        bound_logger.debug("contract_evaluated")
    else:
        bound_logger.warning("contract_evaluation_failed")
