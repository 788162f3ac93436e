"""
End-to-end valuation properties of composed contracts.
"""

from concurrent.futures import ThreadPoolExecutor
from datetime import date, timedelta

import pytest

from composing_contracts.errors import UnsupportedCombinatorError
from composing_contracts.library import zero_coupon_bond
from composing_contracts.models import (
    Constant,
    Currency,
    and_,
    anytime,
    get,
    give,
    one,
    or_,
    scale,
    then,
    truncate,
    zero,
)
from composing_contracts.valuation import ContractEvaluator

T1 = date(2026, 6, 30)
T2 = date(2029, 12, 31)


def simple_payoffs():
    """Contracts without deferred legs."""
    return [
        zero(),
        one(Currency.USD),
        scale(one(Currency.USD), 42.0),
        give(scale(one(Currency.USD), 3.0)),
        and_(one(Currency.USD), scale(one(Currency.USD), 2.0)),
        or_(zero(), give(one(Currency.USD))),
    ]


@pytest.fixture
def bond_1():
    return zero_coupon_bond(T1, 50.0, Currency.USD)


@pytest.fixture
def bond_2():
    return zero_coupon_bond(T2, 80.0, Currency.USD)


class TestTruncationBoundary:

    @pytest.mark.parametrize("contract", simple_payoffs())
    def test_truncate_is_transparent_on_expiry(self, evaluator, contract):
        assert evaluator.evaluate(truncate(contract, T1), T1) == evaluator.evaluate(contract, T1)

    @pytest.mark.parametrize("contract", simple_payoffs())
    def test_truncate_is_void_the_day_after(self, evaluator, contract):
        after = T1 + timedelta(days=1)
        assert evaluator.evaluate(truncate(contract, T1), after) == {after: 0.0}


class TestAlgebraicLaws:

    @pytest.mark.parametrize("on", [date(2024, 1, 1), T1, T2, date(2035, 1, 1)])
    def test_give_is_involutive(self, evaluator, bond_1, bond_2, on):
        for contract in (bond_1, get(bond_2), and_(bond_1, give(bond_2))):
            assert evaluator.evaluate(give(give(contract)), on) == evaluator.evaluate(contract, on)

    def test_and_is_commutative(self, evaluator, bond_1, bond_2):
        on = date(2025, 1, 1)
        pairs = [(bond_1, bond_2), (get(bond_1), bond_2), (get(bond_1), get(bond_2))]

        for c1, c2 in pairs:
            left = evaluator.evaluate(and_(c1, c2), on)
            right = evaluator.evaluate(and_(c2, c1), on)
            assert set(left.items()) == set(right.items())

    def test_scale_distributes_over_and(self, evaluator, bond_1, bond_2):
        on = date(2025, 1, 1)
        k = 2.5
        v1 = evaluator.evaluate(bond_1, on)[on]
        v2 = evaluator.evaluate(bond_2, on)[on]

        scaled = evaluator.evaluate(scale(and_(bond_1, bond_2), Constant(k)), on)

        assert scaled[on] == pytest.approx(k * (v1 + v2))

    def test_or_selects_the_larger_bond(self, evaluator, bond_1, bond_2):
        on = date(2025, 1, 1)
        assert evaluator.evaluate(or_(bond_1, bond_2), on) == {on: 80.0}
        assert evaluator.evaluate(or_(bond_2, bond_1), on) == {on: 80.0}


class TestThenSplice:

    @pytest.mark.parametrize("on", [date(2024, 1, 1), T1])
    def test_first_leg_while_live(self, evaluator, bond_1, bond_2, on):
        assert evaluator.evaluate(then(bond_1, bond_2), on) == evaluator.evaluate(bond_1, on)

    @pytest.mark.parametrize("on", [T1 + timedelta(days=1), date(2028, 1, 1), T2])
    def test_second_leg_after_first_expires(self, evaluator, bond_1, bond_2, on):
        assert evaluator.evaluate(then(bond_1, bond_2), on) == evaluator.evaluate(bond_2, on)


class TestGetCollapse:

    @pytest.mark.parametrize("on", [date(2020, 1, 1), date(2025, 5, 5), T2])
    def test_get_yields_notional_at_maturity(self, evaluator, bond_2, on):
        assert evaluator.evaluate(get(bond_2), on) == {T2: 80.0}


class TestZeroCouponBondScenario:

    def test_at_maturity(self, evaluator, sample_bond):
        assert evaluator.evaluate(sample_bond, date(2030, 1, 1)) == {date(2030, 1, 1): 100.0}

    def test_after_maturity(self, evaluator, sample_bond):
        assert evaluator.evaluate(sample_bond, date(2031, 1, 1)) == {date(2031, 1, 1): 0.0}

    def test_foreign_bond_converted_to_home_currency(self, market_evaluator):
        bond = zero_coupon_bond(date(2030, 1, 1), 100.0, Currency.GBP)
        process = market_evaluator.evaluate(bond, date(2030, 1, 1))

        assert process[date(2030, 1, 1)] == pytest.approx(125.0)


class TestUnsupportedPaths:

    @pytest.mark.parametrize("contract", simple_payoffs())
    def test_anytime_always_raises(self, evaluator, contract):
        with pytest.raises(UnsupportedCombinatorError):
            evaluator.evaluate(anytime(contract), T1)


class TestConcurrentEvaluation:

    def test_shared_tree_valued_in_parallel(self, bond_1, bond_2):
        evaluator = ContractEvaluator()
        portfolio = and_(then(bond_1, bond_2), or_(get(bond_1), give(bond_2)))
        dates = [date(2024, 1, 1) + timedelta(days=90 * i) for i in range(40)]

        sequential = [evaluator.evaluate(portfolio, on) for on in dates]
        with ThreadPoolExecutor(max_workers=8) as pool:
            parallel = list(pool.map(lambda on: evaluator.evaluate(portfolio, on), dates))

        assert parallel == sequential
