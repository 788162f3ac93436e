"""
Combinator tree nodes.

This module defines the private representation behind Contract: a closed set
of immutable node types. Children are held by reference, so composing
contracts shares existing subtrees instead of copying them. Nodes compare by
identity, which keeps equality and hashing O(1) however large a tree grows.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Callable, ClassVar, Iterator, Optional, TypeVar, Union

from .currency import Currency
from .observable import Observable


class CombinatorKind(str, Enum):
    """Names of the combinator variants."""
    ZERO = "zero"
    ONE = "one"
    GIVE = "give"
    AND = "and"
    OR = "or"
    TRUNCATE = "truncate"
    THEN = "then"
    SCALE = "scale"
    GET = "get"
    ANYTIME = "anytime"


@dataclass(frozen=True, eq=False)
class Zero:
    """No rights and no obligations."""
    kind: ClassVar[CombinatorKind] = CombinatorKind.ZERO


@dataclass(frozen=True, eq=False)
class One:
    """Receive one unit of currency now."""
    currency: Currency
    kind: ClassVar[CombinatorKind] = CombinatorKind.ONE


@dataclass(frozen=True, eq=False)
class Give:
    """Rights and obligations of sub, inverted."""
    sub: "Combinator"
    kind: ClassVar[CombinatorKind] = CombinatorKind.GIVE


@dataclass(frozen=True, eq=False)
class And:
    """Hold both left and right."""
    left: "Combinator"
    right: "Combinator"
    kind: ClassVar[CombinatorKind] = CombinatorKind.AND


@dataclass(frozen=True, eq=False)
class Or:
    """Hold whichever of left and right the holder chooses."""
    left: "Combinator"
    right: "Combinator"
    kind: ClassVar[CombinatorKind] = CombinatorKind.OR


@dataclass(frozen=True, eq=False)
class Truncate:
    """sub, void after expiry (expiry itself is still live)."""
    expiry: date
    sub: "Combinator"
    kind: ClassVar[CombinatorKind] = CombinatorKind.TRUNCATE


@dataclass(frozen=True, eq=False)
class Then:
    """first while it is live, then second once first has expired."""
    first: "Combinator"
    second: "Combinator"
    kind: ClassVar[CombinatorKind] = CombinatorKind.THEN


@dataclass(frozen=True, eq=False)
class Scale:
    """sub with every payoff multiplied by observable."""
    observable: Observable
    sub: "Combinator"
    kind: ClassVar[CombinatorKind] = CombinatorKind.SCALE


@dataclass(frozen=True, eq=False)
class Get:
    """Rights of sub, deferred to the end of its horizon."""
    sub: "Combinator"
    kind: ClassVar[CombinatorKind] = CombinatorKind.GET


@dataclass(frozen=True, eq=False)
class AnyTime:
    """sub, exercisable at any time up to its horizon."""
    sub: "Combinator"
    kind: ClassVar[CombinatorKind] = CombinatorKind.ANYTIME


Combinator = Union[Zero, One, Give, And, Or, Truncate, Then, Scale, Get, AnyTime]

ZERO = Zero()

T = TypeVar("T")


def children(node: Combinator) -> tuple:
    """Direct sub-combinators of node, left to right."""
    if isinstance(node, (And, Or)):
        return (node.left, node.right)
    if isinstance(node, Then):
        return (node.first, node.second)
    if isinstance(node, (Give, Truncate, Scale, Get, AnyTime)):
        return (node.sub,)
    return ()


def iter_nodes(root: Combinator) -> Iterator[Combinator]:
    """Yield every distinct node reachable from root exactly once."""
    seen: set[int] = set()
    stack = [root]
    while stack:
        node = stack.pop()
        if id(node) in seen:
            continue
        seen.add(id(node))
        yield node
        stack.extend(reversed(children(node)))


def fold(root: Combinator, fn: Callable[[Combinator, tuple], T],
         memo: Optional[dict[int, T]] = None) -> T:
    """
    Post-order fold over the tree, visiting each distinct node once.

    fn receives a node and the folded results of its children. Iterative, so
    tree depth is not limited by the interpreter stack. Pass memo to reuse
    results across several folds over overlapping trees.
    """
    results: dict[int, T] = {} if memo is None else memo
    stack = [(root, False)]
    while stack:
        current, expanded = stack.pop()
        if id(current) in results:
            continue
        subs = children(current)
        if expanded:
            results[id(current)] = fn(current, tuple(results[id(child)] for child in subs))
            continue
        stack.append((current, True))
        stack.extend((child, False) for child in subs if id(child) not in results)
    return results[id(root)]


def depth(root: Combinator) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    return fold(root, lambda _, levels: 1 + max(levels, default=0))


def _latest(dates: tuple) -> Optional[date]:
    # None means unbounded and dominates
    if any(d is None for d in dates):
        return None
    return max(dates)


def _horizon_of(current: Combinator, sub_horizons: tuple) -> Optional[date]:
    if isinstance(current, (Zero, One)):
        return None
    if isinstance(current, Truncate):
        (sub_horizon,) = sub_horizons
        if sub_horizon is None:
            return current.expiry
        return min(current.expiry, sub_horizon)
    if isinstance(current, (And, Or, Then)):
        return _latest(sub_horizons)
    (sub_horizon,) = sub_horizons
    return sub_horizon


def horizon(root: Combinator, memo: Optional[dict[int, Optional[date]]] = None) -> Optional[date]:
    """
    Latest date on which the contract is live, None when unbounded.

    Truncate bounds its child; And, Or and Then live as long as their
    longest-lived operand; every other wrapper inherits its child's horizon.
    """
    return fold(root, _horizon_of, memo)
