"""
Value processes: the result type of contract evaluation.

A ValueProcess maps calendar dates to the value of a contract observed on that
date. The value type is a parameter so that a point-valued evaluator and a
future distribution-valued one can share the same algebra.
"""

from datetime import date
from typing import Callable, Dict, Optional, TypeVar

V = TypeVar("V")


class ValueProcess(Dict[date, V]):
    """Mapping of date -> value. Compares equal to a plain dict with the same items."""

    @classmethod
    def point(cls, on: date, value: V) -> "ValueProcess[V]":
        """Single-entry process."""
        return cls({on: value})

    @classmethod
    def empty(cls) -> "ValueProcess[V]":
        return cls()

    def horizon(self) -> Optional[date]:
        """Latest date with a defined value, None when empty."""
        return max(self) if self else None

    def terminal(self) -> "ValueProcess[V]":
        """Collapse to the value at the horizon only."""
        expiry = self.horizon()
        if expiry is None:
            return ValueProcess()
        return ValueProcess.point(expiry, self[expiry])

    def map_values(self, fn: Callable[[V], V]) -> "ValueProcess[V]":
        return ValueProcess({on: fn(value) for on, value in self.items()})

    def merge_with(
        self,
        other: "ValueProcess[V]",
        combine: Callable[[V, V], V],
    ) -> "ValueProcess[V]":
        """
        Union of both processes.

        Dates present on both sides are combined with combine(self_value,
        other_value); dates present on one side keep their value unchanged.
        """
        merged = ValueProcess(self)
        for on, value in other.items():
            if on in merged:
                merged[on] = combine(merged[on], value)
            else:
                merged[on] = value
        return merged

    def __repr__(self) -> str:
        items = ", ".join(f"{on.isoformat()}: {value!r}" for on, value in sorted(self.items()))
        return f"ValueProcess({{{items}}})"
