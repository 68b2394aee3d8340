"""
Money arithmetic for order and invoice totals.
All amounts are Decimal rounded half-up to cents.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Tuple, Union

from bakery_crm.core.config import settings

CENTS = Decimal("0.01")

Number = Union[Decimal, int, float, str]


def to_money(value: Number) -> Decimal:
    """Coerce a number to a 2-place Decimal."""
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def tax_rate() -> Decimal:
    return Decimal(str(settings.TAX_RATE))


def line_total(quantity: Number, unit_price: Number) -> Decimal:
    """quantity * unit_price, rounded to cents."""
    return to_money(Decimal(str(quantity)) * Decimal(str(unit_price)))


def compute_totals(line_totals: Iterable[Number], rate: Decimal = None) -> Tuple[Decimal, Decimal, Decimal]:
    """
    Compute (subtotal, tax, total) for a set of line totals.
    
    total is always subtotal + tax, so the two never drift apart by rounding.
    """
    rate = tax_rate() if rate is None else rate
    subtotal = to_money(sum((Decimal(str(amount)) for amount in line_totals), Decimal("0")))
    tax = to_money(subtotal * rate)
    return subtotal, tax, subtotal + tax
