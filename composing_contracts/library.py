"""
Derived contract constructors.

Common instruments expressed purely in terms of the primitive combinators.
"""

from datetime import date

from .models.contract import Contract, get, one, or_, scale, truncate, zero
from .models.currency import Currency
from .models.observable import Constant


def zero_coupon_bond(maturity: date, notional: float, currency: Currency) -> Contract:
    """
    Pay notional units of currency, live up to and including maturity.

    Args:
        maturity: Last date on which the bond is live
        notional: Amount paid
        currency: Currency of the payment

    Returns:
        truncate(scale(one(currency), Constant(notional)), maturity)
    """
    return truncate(scale(one(currency), Constant(notional)), maturity)


def european_option(exercise_date: date, underlying: Contract) -> Contract:
    """
    Right, but not obligation, to acquire underlying on exercise_date.

    Args:
        exercise_date: The single date on which the option may be exercised
        underlying: Contract received on exercise

    Returns:
        get(truncate(or_(zero(), underlying), exercise_date))
    """
    return get(truncate(or_(zero(), underlying), exercise_date))
