"""
Market data collaborators.

The evaluator resolves currencies and exchange-rate observables through a
MarketData object. StaticMarketData is an in-memory snapshot of FX quotes,
either flat spot rates or per-date fixings, built directly or from the
merged configuration.
"""

from datetime import date
from typing import Any, Mapping, Optional, Protocol, Union

from ..config.validation import ConfigValidator
from ..errors import MissingMarketDataError
from ..models.currency import Currency
from .process import ValueProcess

Quote = Union[float, Mapping[date, float]]


class MarketData(Protocol):
    """Exchange-rate resolver."""

    def exchange_rate(self, from_currency: Currency, to_currency: Currency, on: date) -> float:
        """Units of to_currency received for one unit of from_currency on the given date."""
        ...


def parse_pair(pair: str) -> tuple[Currency, Currency]:
    """Split a pair code such as "EURUSD" into its two currencies."""
    if not isinstance(pair, str) or len(pair) != 6:
        raise ValueError(f"Currency pair must be six letters, got {pair!r}")
    return Currency.parse(pair[:3]), Currency.parse(pair[3:])


class StaticMarketData:
    """
    Immutable-style FX snapshot keyed by (from, to) currency pair.

    A quote for a pair is either a flat rate used on every date or a mapping
    of fixing date to rate. Lookups try the direct quote, then the inverse
    quote. with_rate returns a new snapshot and leaves this one unchanged.
    Every rate must be strictly positive; anything else raises ValueError at
    construction time.
    """

    def __init__(self, rates: Optional[Mapping[tuple[Currency, Currency], Quote]] = None) -> None:
        self._rates: dict[tuple[Currency, Currency], Quote] = {}
        for (from_currency, to_currency), quote in (rates or {}).items():
            key = (Currency.parse(from_currency), Currency.parse(to_currency))
            self._rates[key] = dict(quote) if isinstance(quote, Mapping) else quote

        errors = ConfigValidator.validate_fx_rates(
            {f"{pair[0].value}{pair[1].value}": quote for pair, quote in self._rates.items()}
        )
        if errors:
            details = "; ".join(f"{err.field}: {err.message} (got: {err.value!r})" for err in errors)
            raise ValueError(f"Invalid FX quotes: {details}")

    @classmethod
    def from_config(cls, fx_rates: Mapping[str, Any]) -> "StaticMarketData":
        """Build from a pair-code table such as {"EURUSD": 1.1}."""
        return cls({parse_pair(pair): quote for pair, quote in fx_rates.items()})

    def with_rate(self, from_currency: Currency, to_currency: Currency,
                  quote: Quote) -> "StaticMarketData":
        """Return a new snapshot with the given pair added or replaced."""
        rates = dict(self._rates)
        rates[(from_currency, to_currency)] = quote
        return StaticMarketData(rates)

    def pairs(self) -> list[tuple[Currency, Currency]]:
        return sorted(self._rates)

    def exchange_rate(self, from_currency: Currency, to_currency: Currency, on: date) -> float:
        if from_currency == to_currency:
            return 1.0

        direct = self._lookup(from_currency, to_currency, on)
        if direct is not None:
            return direct

        inverse = self._lookup(to_currency, from_currency, on)
        if inverse is not None:
            return 1.0 / inverse

        raise MissingMarketDataError(
            f"No {from_currency.value}/{to_currency.value} rate for {on.isoformat()}",
            from_currency=from_currency.value,
            to_currency=to_currency.value,
            on=on,
        )

    def _lookup(self, from_currency: Currency, to_currency: Currency, on: date) -> Optional[float]:
        quote = self._rates.get((from_currency, to_currency))
        if quote is None:
            return None
        if isinstance(quote, dict):
            fixing = quote.get(on)
            return float(fixing) if fixing is not None else None
        return float(quote)


def exch(market: MarketData, home_currency: Currency, foreign_currency: Currency,
         on: date) -> ValueProcess:
    """
    Value, in home_currency, of one unit of foreign_currency on the given date.

    Args:
        market: Exchange-rate resolver
        home_currency: Currency values are expressed in
        foreign_currency: Currency being converted
        on: Observation date

    Returns:
        Single-entry value process {on: rate}
    """
    return ValueProcess.point(on, market.exchange_rate(foreign_currency, home_currency, on))
