"""Line Item Domain Entity

One billable entry (description x quantity x unit price) of an invoice.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import BigInteger, CheckConstraint, ForeignKey, Integer, Numeric, String
from src.domain.base import BaseModel, UTCDateTime, utc_now
from src.domain.money import Number, line_total, to_money


class LineItem(BaseModel, table=True):
    """
    Line Item - Billable entry owned by exactly one invoice

    Domain Rules:
    - Each line item belongs to exactly one invoice (deleted with it)
    - quantity >= 1
    - total = quantity * unit_price
    """

    __tablename__ = "line_items"
    __table_args__ = (
        Index('ix_line_items_invoice_id', 'invoice_id'),
        CheckConstraint('quantity >= 1', name='line_item_quantity_positive'),
        CheckConstraint('unit_price >= 0', name='line_item_unit_price_non_negative'),
        # never reuse ids of deleted rows
        {"sqlite_autoincrement": True},
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True),
        description="Unique line item identifier (auto-increment)"
    )

    invoice_id: int = Field(
        sa_column=Column(BigInteger, ForeignKey("invoices.id", ondelete="CASCADE"), nullable=False),
        description="Foreign key to Invoice"
    )

    description: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Line item description (e.g., 'Web development')"
    )

    quantity: int = Field(
        sa_column=Column(Integer, nullable=False),
        description="Number of units (>= 1)"
    )

    unit_price: Decimal = Field(
        sa_column=Column(Numeric(10, 2), nullable=False),
        description="Price per unit (precision: 10,2)"
    )

    total: Decimal = Field(
        sa_column=Column(Numeric(10, 2), nullable=False),
        description="Line total (quantity * unit_price)"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(UTCDateTime(), nullable=False),
        description="Line item creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(UTCDateTime(), nullable=False),
        description="Last update timestamp"
    )

    @classmethod
    def build(
        cls,
        description: str,
        quantity: int,
        unit_price: Number,
        invoice_id: Optional[int] = None,
    ) -> "LineItem":
        """Create an unsaved line item with its total computed"""
        return cls(
            invoice_id=invoice_id,
            description=description,
            quantity=quantity,
            unit_price=to_money(unit_price),
            total=line_total(quantity, unit_price),
        )

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": 1,
                "invoice_id": 1,
                "description": "Web development",
                "quantity": 10,
                "unit_price": 150.50,
                "total": 1505.00,
                "created_at": "2024-01-15T00:00:00Z",
                "updated_at": "2024-01-15T00:00:00Z"
            }
        }
