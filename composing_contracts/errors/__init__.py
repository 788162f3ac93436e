"""
Error classification for contract valuation.

Construction of contracts is total and never raises. Every failure originates
in evaluation and is surfaced as one of the exceptions below, never mixed into
a value process.
"""

from .configuration import ConfigurationError
from .valuation import (
    MissingMarketDataError,
    UnsupportedCombinatorError,
    ValuationError,
)

__all__ = [
    # Valuation Errors
    "ValuationError",
    "UnsupportedCombinatorError",
    "MissingMarketDataError",
    # Configuration Errors
    "ConfigurationError",
]
