"""Money helpers

Monetary values are Decimal end to end and stored with scale 2.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Union

MONEY_SCALE = Decimal("0.01")
ZERO = Decimal("0.00")

Number = Union[int, float, str, Decimal]


def to_money(value: Number) -> Decimal:
    """
    Convert a number to a Decimal rounded to 2 places (half up)

    Floats are converted through str() so binary representation
    error never reaches the stored value.
    """
    if isinstance(value, float):
        value = str(value)
    return Decimal(value).quantize(MONEY_SCALE, rounding=ROUND_HALF_UP)


def line_total(quantity: int, unit_price: Number) -> Decimal:
    """quantity * unit_price at money scale"""
    return to_money(Decimal(quantity) * to_money(unit_price))


def sum_totals(totals: Iterable[Decimal]) -> Decimal:
    return to_money(sum(totals, ZERO))


# Largest value a Numeric(10, 2) column holds
MAX_AMOUNT = Decimal("99999999.99")
MAX_QUANTITY = 1_000_000


def fits_amount_column(value: Decimal) -> bool:
    return to_money(value) <= MAX_AMOUNT
