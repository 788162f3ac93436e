"""Currency labels used to tag unit payments and exchange rates."""

from enum import Enum
from typing import Union


class Currency(str, Enum):
    """Supported currencies."""
    USD = "USD"
    GBP = "GBP"
    EUR = "EUR"
    JPY = "JPY"
    CHF = "CHF"

    @classmethod
    def parse(cls, value: Union[str, "Currency"]) -> "Currency":
        """Resolve a currency code, case-insensitively."""
        if isinstance(value, Currency):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Currency code must be a string, got {type(value).__name__}")
        try:
            return cls(value.strip().upper())
        except ValueError:
            raise ValueError(f"Unsupported currency: {value!r}") from None
