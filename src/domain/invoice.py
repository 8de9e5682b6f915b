"""Invoice Domain Entity

Billing aggregate presented to a client. Holds line items (see LineItem)
and the stored total derived from them.
"""

from datetime import datetime, date as calendar_date
from decimal import Decimal
from enum import Enum
from typing import Any, ClassVar, Dict, Iterable, Optional, Tuple
from sqlmodel import Field, Column, Index
from sqlalchemy import BigInteger, Integer, Numeric, String, Date
from src.domain.base import BaseModel, UTCDateTime, utc_now
from src.domain.line_item import LineItem
from src.domain.money import sum_totals


class PaymentStatus(str, Enum):
    """Payment status types (no enforced transitions)"""
    PENDING = "pending"
    PAID = "paid"
    OVERDUE = "overdue"


class Invoice(BaseModel, table=True):
    """
    Invoice - Billing aggregate for a client

    Domain Rules:
    - total_amount is the sum of all line_items.total
    - payment_status starts as pending unless given explicitly
    - overdue is never computed, only set explicitly
    - created_at is immutable, updated_at changes on update and mark-paid
    - due_date may precede date
    """

    __tablename__ = "invoices"
    __table_args__ = (
        Index('ix_invoices_payment_status', 'payment_status'),
        Index('ix_invoices_created_at', 'created_at'),
        {"sqlite_autoincrement": True},
    )

    # Scalar fields a patch is allowed to overwrite
    PATCHABLE_FIELDS: ClassVar[Tuple[str, ...]] = ("client_name", "date", "due_date", "payment_status")

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True),
        description="Unique invoice identifier (auto-increment)"
    )

    client_name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Name of the billed client"
    )

    date: calendar_date = Field(
        sa_column=Column(Date, nullable=False),
        description="Invoice date"
    )

    due_date: calendar_date = Field(
        sa_column=Column(Date, nullable=False),
        description="Payment due date"
    )

    payment_status: PaymentStatus = Field(
        default=PaymentStatus.PENDING,
        description="Payment status (pending, paid, overdue)"
    )

    total_amount: Decimal = Field(
        default=Decimal("0.00"),
        sa_column=Column(Numeric(10, 2), nullable=False),
        description="Total invoice amount (precision: 10,2)"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(UTCDateTime(), nullable=False),
        description="Invoice creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(UTCDateTime(), nullable=False),
        description="Last update timestamp"
    )

    def recalculate_total(self, line_items: Iterable[LineItem]) -> Decimal:
        """Set total_amount from the given line items and return it"""
        self.total_amount = sum_totals(item.total for item in line_items)
        return self.total_amount

    def apply_changes(self, changes: Dict[str, Any]) -> None:
        """
        Merge a patch of scalar fields into the invoice

        Args:
            changes: Mapping of field name to new value. Only names in
                PATCHABLE_FIELDS are accepted.

        Raises:
            ValueError: If a field is not patchable
        """
        unknown = set(changes) - set(self.PATCHABLE_FIELDS)
        if unknown:
            raise ValueError(f"Fields not patchable: {', '.join(sorted(unknown))}")

        for field_name, value in changes.items():
            setattr(self, field_name, value)

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": 1,
                "client_name": "Acme",
                "date": "2024-01-15",
                "due_date": "2024-02-15",
                "payment_status": "pending",
                "total_amount": 2505.00,
                "created_at": "2024-01-15T00:00:00Z",
                "updated_at": "2024-01-15T00:00:00Z"
            }
        }
