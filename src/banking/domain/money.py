"""
Money Handling Utilities

All amounts are Decimal with two fractional digits. Floats are converted
through str() so that 0.1 stays 0.1.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_EVEN
from typing import Optional


CENT = Decimal("0.01")
ZERO = Decimal("0.00")


def as_money(value) -> Decimal:
    """
    Normalize a number to Decimal with 2 fractional digits.

    Uses banker's rounding. Raises InvalidOperation for values that
    are not finite numbers.
    """
    return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_EVEN)


def positive_amount(value) -> Optional[Decimal]:
    """
    Return the normalized amount when it is a finite number above zero.

    Returns None for zero, negatives, infinities, NaN and anything that
    does not parse as a number.
    """
    try:
        raw = Decimal(str(value))
        if not raw.is_finite():
            return None
        amount = as_money(raw)
    except (InvalidOperation, ValueError, TypeError):
        # unparsable, or too many digits to hold cents
        return None
    if amount <= ZERO:
        return None
    return amount
