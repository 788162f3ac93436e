"""Pytest configuration and shared fixtures."""

from datetime import date

import pytest

from composing_contracts.library import zero_coupon_bond
from composing_contracts.models import Currency
from composing_contracts.valuation import ContractEvaluator, StaticMarketData


@pytest.fixture
def maturity() -> date:
    """Maturity date of the sample bond."""
    return date(2030, 1, 1)


@pytest.fixture
def sample_bond(maturity):
    """USD zero-coupon bond paying 100 at maturity."""
    return zero_coupon_bond(maturity, 100.0, Currency.USD)


@pytest.fixture
def sample_market() -> StaticMarketData:
    """FX snapshot with a flat EURUSD quote and dated GBPUSD fixings."""
    return StaticMarketData({
        (Currency.EUR, Currency.USD): 1.1,
        (Currency.GBP, Currency.USD): {
            date(2030, 1, 1): 1.25,
            date(2031, 1, 1): 1.3,
        },
    })


@pytest.fixture
def evaluator() -> ContractEvaluator:
    """Evaluator with default configuration and no market data."""
    return ContractEvaluator()


@pytest.fixture
def market_evaluator(sample_market) -> ContractEvaluator:
    """Evaluator backed by the sample market snapshot."""
    return ContractEvaluator(market=sample_market)
