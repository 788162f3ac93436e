#!/usr/bin/env python3
"""
Basic Usage Example - Composing Contracts

This script demonstrates composing and valuing contracts. It shows how to:
- Build bonds and options from combinators
- Value them on several dates
- Convert foreign-currency payoffs with a market snapshot
- Detect unsupported contract shapes without exceptions

Run: python examples/basic_usage.py
"""

from datetime import date

from composing_contracts.config.defaults import LoggingParams
from composing_contracts.library import european_option, zero_coupon_bond
from composing_contracts.logging import configure_logging_from_params
from composing_contracts.models import Currency, anytime, give, then
from composing_contracts.valuation import ContractEvaluator, StaticMarketData


def print_process(label: str, process) -> None:
    """Print a value process one date per line."""
    print(f"   {label}:")
    for on, value in sorted(process.items()):
        print(f"     {on.isoformat()}  {value:10.4f}")


def main():
    """Run the basic usage demo."""
    configure_logging_from_params(LoggingParams(level="WARNING"))

    print("Composing Contracts - Basic Usage Demo")
    print("=" * 60)

    market = StaticMarketData({
        (Currency.EUR, Currency.USD): 1.1,
        (Currency.GBP, Currency.USD): {date(2030, 1, 1): 1.25},
    })
    evaluator = ContractEvaluator(market=market)

    print("1. A USD zero-coupon bond paying 100 on 2030-01-01")
    bond = zero_coupon_bond(date(2030, 1, 1), 100.0, Currency.USD)
    for on in (date(2029, 1, 1), date(2030, 1, 1), date(2031, 1, 1)):
        print_process(f"valued on {on.isoformat()}", evaluator.evaluate(bond, on))
    print()

    print("2. Options on the bond, exercisable on 2029-12-01")
    call = european_option(date(2029, 12, 1), bond)
    short = european_option(date(2029, 12, 1), give(bond))
    print_process("option to receive", evaluator.evaluate(call, date(2029, 1, 1)))
    print_process("option to pay", evaluator.evaluate(short, date(2029, 1, 1)))
    print()

    print("3. A GBP bond rolling into a EUR bond")
    gbp_bond = zero_coupon_bond(date(2030, 1, 1), 100.0, Currency.GBP)
    eur_bond = zero_coupon_bond(date(2035, 1, 1), 100.0, Currency.EUR)
    roll = then(gbp_bond, eur_bond)
    for on in (date(2030, 1, 1), date(2032, 1, 1)):
        print_process(f"valued on {on.isoformat()}", evaluator.evaluate(roll, on))
    print()

    print("4. Unsupported shapes come back as tagged failures")
    result = evaluator.try_evaluate(anytime(bond), date(2029, 1, 1))
    print(f"   success={result.success} error={result.error_kind}: {result.error}")
    print()

    print("Demo completed successfully!")


if __name__ == "__main__":
    main()
