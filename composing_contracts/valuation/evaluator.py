"""
Valuation engine.

Maps a contract and an evaluation date to a value process by a post-order
walk over the combinator tree. Each combinator has exactly one rule;
combinators or observables without evaluation semantics raise
UnsupportedCombinatorError and failed market lookups raise
MissingMarketDataError. Neither is ever folded into the returned process.

The evaluator holds no per-call state, so one instance may value the same
shared tree on different dates concurrently.
"""

from datetime import date
from types import GeneratorType
from typing import Callable, Generator, Optional, Union

from ..config.defaults import DefaultConfig, get_default_config
from ..errors import UnsupportedCombinatorError, ValuationError
from ..logging.config import get_valuation_logger, log_evaluation
from ..models.combinator import (
    And,
    AnyTime,
    Combinator,
    Get,
    Give,
    One,
    Or,
    Scale,
    Then,
    Truncate,
    Zero,
    horizon,
)
from ..models.contract import Contract
from ..models.currency import Currency
from ..models.observable import Constant, ExchangeRate, Observable, Time
from .interest_rate import FixedInterestRate, InterestRateModel, disc
from .market import MarketData, StaticMarketData
from .process import ValueProcess
from .result import ValuationResult
from .value_space import ScalarValueSpace, ValueSpace

logger = get_valuation_logger(__name__)

# Per-call memo of structural horizons, keyed by node identity
HorizonMemo = dict[int, Optional[date]]

# A (node, date) valuation request, and a composite rule in progress
Request = tuple[Combinator, date]
Step = Generator[Request, ValueProcess, ValueProcess]


class ContractEvaluator:
    """
    Values contracts on a given date.

    Manages the evaluation collaborators:
    home currency, market data, interest-rate model and value space.
    """

    def __init__(
        self,
        config: Optional[DefaultConfig] = None,
        market: Optional[MarketData] = None,
        value_space: Optional[ValueSpace] = None,
        interest_rate_model: Optional[InterestRateModel] = None,
    ) -> None:
        self.config = config or get_default_config()
        self.home_currency = Currency.parse(self.config.valuation.home_currency)
        self.or_missing_side = self.config.valuation.or_missing_side

        if market is None and self.config.market_data.fx_rates:
            market = StaticMarketData.from_config(self.config.market_data.fx_rates)
        self.market = market

        self.values: ValueSpace = value_space or ScalarValueSpace()
        self.interest_rate_model = interest_rate_model or FixedInterestRate(
            self.config.interest_rate.fixed_rate
        )

        self._rules: dict[type, Callable[[Combinator, date, HorizonMemo], Union[ValueProcess, Step]]] = {
            Zero: self._eval_zero,
            One: self._eval_one,
            Give: self._eval_give,
            And: self._eval_and,
            Or: self._eval_or,
            Truncate: self._eval_truncate,
            Then: self._eval_then,
            Scale: self._eval_scale,
            Get: self._eval_get,
            AnyTime: self._eval_anytime,
        }

    def evaluate(self, contract: Union[Contract, Combinator], on: date) -> ValueProcess:
        """
        Evaluate a contract on the given date.

        Args:
            contract: Contract handle, or a bare combinator node
            on: Evaluation date

        Returns:
            Fresh value process owned by the caller

        Raises:
            UnsupportedCombinatorError: AnyTime, Time observables, discounting,
                or a foreign currency with no market data configured
            MissingMarketDataError: an exchange-rate lookup failed
        """
        root = contract.root if isinstance(contract, Contract) else contract

        try:
            process = self._eval(root, on, {})
        except ValuationError as e:
            log_evaluation(logger, _kind_name(root), on, type(e).__name__,
                           context={"message": str(e), **e.context})
            raise

        log_evaluation(logger, _kind_name(root), on, "ok",
                       context={"dates": len(process), "horizon": _iso(process.horizon())})
        return process

    def try_evaluate(self, contract: Union[Contract, Combinator], on: date) -> ValuationResult:
        """Evaluate without raising valuation errors; failures come back tagged."""
        try:
            return ValuationResult.ok(self.evaluate(contract, on))
        except ValuationError as e:
            return ValuationResult.failure(e)

    def discount(self, quantity: float, on: date) -> ValueProcess:
        """Discount a payoff with the configured interest-rate model."""
        return disc(quantity, on, self.interest_rate_model)

    def _eval(self, root: Combinator, on: date, horizons: HorizonMemo) -> ValueProcess:
        """
        Post-order walk over the tree on an explicit stack.

        Leaf rules return a process directly. Composite rules are generators:
        each yields a (child, date) request and is resumed with the child's
        process, so tree depth is not limited by the interpreter stack.
        Results are memoized per node and date, so a subtree shared within the
        tree is valued once per date.
        """
        results: dict[tuple[int, date], ValueProcess] = {}
        frames: list[tuple[tuple[int, date], Step]] = []
        request: Optional[Request] = (root, on)
        reply: Optional[ValueProcess] = None

        while True:
            if request is not None:
                node, at = request
                key = (id(node), at)
                if key in results:
                    reply = results[key]
                else:
                    outcome = self._apply(node, at, horizons)
                    if isinstance(outcome, GeneratorType):
                        frames.append((key, outcome))
                        reply = None
                    else:
                        results[key] = reply = outcome
                request = None

            if not frames:
                return reply

            key, frame = frames[-1]
            try:
                request = frame.send(reply)
            except StopIteration as done:
                frames.pop()
                results[key] = reply = done.value

    def _apply(self, node: Combinator, on: date, horizons: HorizonMemo) -> Union[ValueProcess, Step]:
        rule = self._rules.get(type(node))
        if rule is None:
            raise UnsupportedCombinatorError(
                f"No evaluation rule for {type(node).__name__}",
                kind=getattr(getattr(node, "kind", None), "value", None),
                evaluation_date=on,
            )
        return rule(node, on, horizons)

    def _eval_zero(self, node: Zero, on: date, horizons: HorizonMemo) -> ValueProcess:
        return ValueProcess.point(on, self.values.zero())

    def _eval_one(self, node: One, on: date, horizons: HorizonMemo) -> ValueProcess:
        unit = self.values.unit()
        if node.currency == self.home_currency:
            return ValueProcess.point(on, unit)

        if self.market is None:
            raise UnsupportedCombinatorError(
                f"Cannot value one {node.currency.value} in {self.home_currency.value} "
                "without market data",
                kind=node.kind.value,
                evaluation_date=on,
            )
        rate = self.market.exchange_rate(node.currency, self.home_currency, on)
        return ValueProcess.point(on, self.values.scale(unit, rate))

    def _eval_give(self, node: Give, on: date, horizons: HorizonMemo) -> Step:
        process = yield node.sub, on
        return process.map_values(self.values.negate)

    def _eval_and(self, node: And, on: date, horizons: HorizonMemo) -> Step:
        left = yield node.left, on
        right = yield node.right, on
        return left.merge_with(right, self.values.add)

    def _eval_or(self, node: Or, on: date, horizons: HorizonMemo) -> Step:
        left = yield node.left, on
        right = yield node.right, on
        merged = left.merge_with(right, self.values.maximum)

        if self.or_missing_side == "zero":
            # Lone dates are compared against the empty alternative
            for lone in left.keys() ^ right.keys():
                merged[lone] = self.values.maximum(merged[lone], self.values.zero())

        return merged

    def _eval_truncate(self, node: Truncate, on: date, horizons: HorizonMemo) -> Step:
        if on > node.expiry:
            return ValueProcess.point(on, self.values.zero())
        process = yield node.sub, on
        return process

    def _eval_then(self, node: Then, on: date, horizons: HorizonMemo) -> Step:
        first = yield node.first, on
        if not first:
            return first

        expiry = horizon(node.first, horizons)
        if expiry is None:
            expiry = first.horizon()
        if on > expiry:
            second = yield node.second, on
            # The live second leg wins on dates both legs define
            return first.merge_with(second, lambda _, live: live)

        return first

    def _eval_scale(self, node: Scale, on: date, horizons: HorizonMemo) -> Step:
        factor = self._observe(node.observable, on)
        process = yield node.sub, on
        return process.map_values(lambda value: self.values.scale(value, factor))

    def _eval_get(self, node: Get, on: date, horizons: HorizonMemo) -> Step:
        expiry = horizon(node.sub, horizons)
        # Deferred: the sub-contract's value as observed at its horizon
        at = expiry if expiry is not None and expiry > on else on
        process = yield node.sub, at
        return process.terminal()

    def _eval_anytime(self, node: AnyTime, on: date, horizons: HorizonMemo) -> ValueProcess:
        raise UnsupportedCombinatorError(
            "AnyTime has no evaluation rule; early-exercise pricing is not supported",
            kind=node.kind.value,
            evaluation_date=on,
        )

    def _observe(self, observable: Observable, on: date) -> float:
        """Resolve an observable on the given date."""
        if isinstance(observable, Constant):
            return observable.value

        if isinstance(observable, ExchangeRate):
            if self.market is None:
                raise UnsupportedCombinatorError(
                    "ExchangeRate observable requires market data",
                    kind="exchange_rate",
                    evaluation_date=on,
                )
            return self.market.exchange_rate(observable.from_currency, observable.to_currency, on)

        if isinstance(observable, Time):
            raise UnsupportedCombinatorError(
                "Time observable has no resolver",
                kind="time",
                evaluation_date=on,
            )

        raise UnsupportedCombinatorError(
            f"Unknown observable {type(observable).__name__}",
            kind="observable",
            evaluation_date=on,
        )


def evaluate(
    contract: Union[Contract, Combinator],
    on: date,
    market: Optional[MarketData] = None,
    config: Optional[DefaultConfig] = None,
) -> ValueProcess:
    """Evaluate a contract with a one-off evaluator."""
    return ContractEvaluator(config=config, market=market).evaluate(contract, on)


def _iso(on: Optional[date]) -> Optional[str]:
    return on.isoformat() if on is not None else None


def _kind_name(root: Combinator) -> str:
    kind = getattr(root, "kind", None)
    return kind.value if kind is not None else type(root).__name__
