"""
Observables: quantities resolved at an evaluation date and used to scale payoffs.
"""

from dataclasses import dataclass
from datetime import date
from typing import Union

from .currency import Currency


@dataclass(frozen=True)
class Constant:
    """A fixed scalar, resolved to its value on every date."""
    value: float


@dataclass(frozen=True)
class ExchangeRate:
    """Market rate converting one unit of from_currency into to_currency."""
    from_currency: Currency
    to_currency: Currency


@dataclass(frozen=True)
class Time:
    """A date literal used as a value."""
    at: date


Observable = Union[Constant, ExchangeRate, Time]
