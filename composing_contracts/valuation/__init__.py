"""Valuation engine: value processes, market collaborators and the evaluator."""

from .evaluator import ContractEvaluator, evaluate
from .interest_rate import FixedInterestRate, InterestRateModel, disc
from .market import MarketData, StaticMarketData, exch
from .process import ValueProcess
from .result import ValuationResult
from .value_space import ScalarValueSpace, ValueSpace

__all__ = [
    "ContractEvaluator",
    "evaluate",
    "ValueProcess",
    "ValuationResult",
    "MarketData",
    "StaticMarketData",
    "exch",
    "InterestRateModel",
    "FixedInterestRate",
    "disc",
    "ValueSpace",
    "ScalarValueSpace",
]
