"""Default configuration parameters for contract valuation."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ValuationParams:
    """Evaluator behaviour parameters."""
    home_currency: str = "USD"                       # Currency values are expressed in
    or_missing_side: str = "keep"                    # "keep" lone Or values, or compare with "zero"


@dataclass(frozen=True)
class InterestRateParams:
    """Interest-rate model parameters."""
    fixed_rate: float = 0.0                          # Flat annual rate


@dataclass(frozen=True)
class MarketDataParams:
    """Static market data snapshot."""
    # Pair code ("EURUSD") -> spot rate, or -> {date: fixing}
    fx_rates: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    valuation: ValuationParams
    interest_rate: InterestRateParams
    market_data: MarketDataParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        valuation=ValuationParams(),
        interest_rate=InterestRateParams(),
        market_data=MarketDataParams(),
        logging=LoggingParams(),
    )
