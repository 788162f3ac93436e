"""
Interest-rate models and the discounting extension point.
"""

from dataclasses import dataclass
from datetime import date
from typing import Protocol

from ..errors import UnsupportedCombinatorError
from .process import ValueProcess


class InterestRateModel(Protocol):
    """Single-point rate lookup."""

    def interest_rate(self, on: date) -> float: ...


@dataclass(frozen=True)
class FixedInterestRate:
    """The same annual rate on every date."""
    rate: float

    def interest_rate(self, on: date) -> float:
        return self.rate


def disc(quantity: float, on: date, model: InterestRateModel) -> ValueProcess:
    """
    Discount a payoff due on the given date to present value.

    Discounting needs a stochastic rate lattice that this package does not
    provide, so every call fails explicitly instead of guessing a curve.

    Raises:
        UnsupportedCombinatorError: always
    """
    raise UnsupportedCombinatorError(
        "Discounting is not supported",
        kind="disc",
        evaluation_date=on,
        context={"quantity": quantity, "model": type(model).__name__},
    )
