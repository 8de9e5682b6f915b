from .base import BaseModel, UTCDateTime, utc_now
from .money import (
    MONEY_SCALE,
    MAX_AMOUNT,
    MAX_QUANTITY,
    to_money,
    line_total,
    sum_totals,
    fits_amount_column,
)
from .line_item import LineItem
from .invoice import Invoice, PaymentStatus

__all__ = [
    "BaseModel",
    "UTCDateTime",
    "utc_now",
    "MONEY_SCALE",
    "MAX_AMOUNT",
    "MAX_QUANTITY",
    "to_money",
    "line_total",
    "sum_totals",
    "fits_amount_column",
    "LineItem",
    "Invoice",
    "PaymentStatus",
]
