"""
Logging configuration and utilities for contract valuation.
"""
from .config import (
    configure_logging,
    configure_logging_from_params,
    get_logger,
    get_valuation_logger,
    log_evaluation,
)

__all__ = [
    "configure_logging",
    "configure_logging_from_params",
    "get_logger",
    "get_valuation_logger",
    "log_evaluation",
]
