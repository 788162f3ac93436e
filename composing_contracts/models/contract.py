"""
Contract handle and fluent builder.

A Contract owns, by shared reference, the root of a combinator tree. Every
builder operation wraps the existing root in a new node and returns a new
Contract, so composition is total, allocation-only and never copies subtrees.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional, Union

from . import combinator as node
from .combinator import ZERO, Combinator, depth, horizon, iter_nodes
from .currency import Currency
from .observable import Constant, Observable


@dataclass(frozen=True, eq=False)
class Contract:
    """Opaque, immutable handle on a combinator tree."""

    root: Combinator = ZERO

    @classmethod
    def zero(cls) -> "Contract":
        """The contract with no rights and no obligations."""
        return cls(ZERO)

    @classmethod
    def one(cls, currency: Union[Currency, str]) -> "Contract":
        """
        Receive one unit of currency now.

        Total for Currency values. A currency code string is accepted as a
        convenience and parsed case-insensitively; an unsupported code raises
        ValueError before any contract is built.
        """
        return cls(node.One(Currency.parse(currency)))

    def give(self) -> "Contract":
        return Contract(node.Give(self.root))

    def and_(self, other: "Contract") -> "Contract":
        return Contract(node.And(self.root, other.root))

    def or_(self, other: "Contract") -> "Contract":
        return Contract(node.Or(self.root, other.root))

    def truncate(self, expiry: date) -> "Contract":
        return Contract(node.Truncate(expiry, self.root))

    def then(self, other: "Contract") -> "Contract":
        return Contract(node.Then(self.root, other.root))

    def scale(self, observable: Union[Observable, float]) -> "Contract":
        """Multiply every payoff by observable; plain numbers become Constant."""
        if isinstance(observable, (int, float)):
            observable = Constant(float(observable))
        return Contract(node.Scale(observable, self.root))

    def get(self) -> "Contract":
        return Contract(node.Get(self.root))

    def anytime(self) -> "Contract":
        return Contract(node.AnyTime(self.root))

    def __neg__(self) -> "Contract":
        return self.give()

    def __and__(self, other: "Contract") -> "Contract":
        return self.and_(other)

    def __or__(self, other: "Contract") -> "Contract":
        return self.or_(other)

    @property
    def kind(self) -> node.CombinatorKind:
        """Kind of the root combinator."""
        return self.root.kind

    def node_count(self) -> int:
        """Number of distinct nodes in the tree."""
        return sum(1 for _ in iter_nodes(self.root))

    def depth(self) -> int:
        return depth(self.root)

    def horizon(self) -> Optional[date]:
        """Latest live date, None when the contract never expires."""
        return horizon(self.root)

    def __repr__(self) -> str:
        return f"Contract(kind={self.kind.value}, nodes={self.node_count()})"


def zero() -> Contract:
    return Contract.zero()


def one(currency: Union[Currency, str]) -> Contract:
    return Contract.one(currency)


def give(c: Contract) -> Contract:
    return c.give()


def and_(c1: Contract, c2: Contract) -> Contract:
    return c1.and_(c2)


def or_(c1: Contract, c2: Contract) -> Contract:
    return c1.or_(c2)


def truncate(c: Contract, expiry: date) -> Contract:
    return c.truncate(expiry)


def then(c1: Contract, c2: Contract) -> Contract:
    return c1.then(c2)


def scale(c: Contract, observable: Union[Observable, float]) -> Contract:
    return c.scale(observable)


def get(c: Contract) -> Contract:
    return c.get()


def anytime(c: Contract) -> Contract:
    return c.anytime()
