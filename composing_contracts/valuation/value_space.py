"""
Arithmetic over process values.

The evaluator never touches values directly; it goes through a ValueSpace.
ScalarValueSpace treats every value as an already-resolved float. A
stochastic evaluator supplies its own space over random variables.
"""

from typing import Protocol, TypeVar

V = TypeVar("V")


class ValueSpace(Protocol[V]):
    """Operations the evaluator needs on values."""

    def zero(self) -> V: ...

    def unit(self) -> V: ...

    def negate(self, value: V) -> V: ...

    def add(self, a: V, b: V) -> V: ...

    def maximum(self, a: V, b: V) -> V: ...

    def scale(self, value: V, factor: float) -> V: ...


class ScalarValueSpace:
    """Point-valued (float) values."""

    def zero(self) -> float:
        return 0.0

    def unit(self) -> float:
        return 1.0

    def negate(self, value: float) -> float:
        return -value

    def add(self, a: float, b: float) -> float:
        return a + b

    def maximum(self, a: float, b: float) -> float:
        return max(a, b)

    def scale(self, value: float, factor: float) -> float:
        return value * factor
