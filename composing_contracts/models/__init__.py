"""
Contract algebra module.

Immutable combinator trees and the fluent builder used to compose them.
Follows functional programming principles with frozen dataclasses.
"""

from .combinator import CombinatorKind
from .contract import (
    Contract,
    and_,
    anytime,
    give,
    get,
    one,
    or_,
    scale,
    then,
    truncate,
    zero,
)
from .currency import Currency
from .observable import Constant, ExchangeRate, Observable, Time

__all__ = [
    "Currency",
    "Constant",
    "ExchangeRate",
    "Observable",
    "Time",
    "CombinatorKind",
    "Contract",
    "zero",
    "one",
    "give",
    "and_",
    "or_",
    "truncate",
    "then",
    "scale",
    "get",
    "anytime",
]
