"""
Valuation error classifications.

These exceptions represent evaluation paths that cannot produce a meaningful
value: combinators without evaluation semantics, and market data that is
unavailable for a requested currency pair or date. Neither is retried.
"""

from datetime import date
from typing import Any, Dict, Optional


class ValuationError(Exception):
    """Base class for failures raised while evaluating a contract."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class UnsupportedCombinatorError(ValuationError):
    """A combinator, observable or extension point has no evaluation rule."""

    def __init__(self, message: str, kind: Optional[str] = None,
                 evaluation_date: Optional[date] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.kind = kind
        self.evaluation_date = evaluation_date


class MissingMarketDataError(ValuationError):
    """A rate lookup failed for the requested currency pair or date."""

    def __init__(self, message: str, from_currency: Optional[str] = None,
                 to_currency: Optional[str] = None, on: Optional[date] = None,
                 **kwargs):
        super().__init__(message, **kwargs)
        self.from_currency = from_currency
        self.to_currency = to_currency
        self.on = on
