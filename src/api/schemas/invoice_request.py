"""Request schemas for Invoice API

Pydantic models for validating incoming HTTP requests.
"""

from datetime import date as calendar_date
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator, model_validator

from src.domain.invoice import PaymentStatus
from src.domain.money import MAX_AMOUNT, MAX_QUANTITY, fits_amount_column, line_total, sum_totals


class LineItemRequestSchema(BaseModel):
    """Line item of a create request"""

    description: str = Field(
        ...,
        min_length=1,
        description="Description (required, non-empty)"
    )

    quantity: int = Field(
        ...,
        gt=0,
        le=MAX_QUANTITY,
        description="Quantity (positive integer)"
    )

    unit_price: Decimal = Field(
        ...,
        gt=0,
        max_digits=10,
        decimal_places=2,
        description="Unit price (must be > 0, at most 2 decimal places)"
    )

    @field_validator('description')
    @classmethod
    def validate_description(cls, v):
        """Ensure description is not only whitespace"""
        if not v.strip():
            raise ValueError("Description is required")
        return v

    @model_validator(mode='after')
    def validate_total(self):
        if not fits_amount_column(line_total(self.quantity, self.unit_price)):
            raise ValueError(f"Line total must not exceed {MAX_AMOUNT}")
        return self


class CreateInvoiceRequestSchema(BaseModel):
    """
    Request schema for creating an invoice

    Used for POST /invoices endpoint.
    """

    client_name: str = Field(
        ...,
        min_length=1,
        description="Client name (required, non-empty)"
    )

    date: calendar_date = Field(
        ...,
        description="Invoice date (YYYY-MM-DD)"
    )

    due_date: calendar_date = Field(
        ...,
        description="Due date (YYYY-MM-DD)"
    )

    line_items: List[LineItemRequestSchema] = Field(
        ...,
        min_length=1,
        description="At least one line item is required"
    )

    payment_status: PaymentStatus = Field(
        default=PaymentStatus.PENDING,
        description="Initial payment status"
    )

    @field_validator('client_name')
    @classmethod
    def validate_client_name(cls, v):
        """Ensure client name is not only whitespace"""
        if not v.strip():
            raise ValueError("Client name is required")
        return v

    @model_validator(mode='after')
    def validate_total_amount(self):
        total = sum_totals(line_total(item.quantity, item.unit_price) for item in self.line_items)
        if not fits_amount_column(total):
            raise ValueError(f"Invoice total must not exceed {MAX_AMOUNT}")
        return self

    class Config:
        json_schema_extra = {
            "example": {
                "client_name": "Acme",
                "date": "2024-01-15",
                "due_date": "2024-02-15",
                "line_items": [
                    {"description": "Development", "quantity": 10, "unit_price": 150.50},
                    {"description": "Design", "quantity": 5, "unit_price": 200.00}
                ]
            }
        }


class UpdateLineItemRequestSchema(BaseModel):
    """Line item of an update request (all fields optional)"""

    id: Optional[int] = Field(default=None, description="Ignored")
    description: Optional[str] = Field(default=None, min_length=1)
    quantity: Optional[int] = Field(default=None, gt=0, le=MAX_QUANTITY)
    unit_price: Optional[Decimal] = Field(default=None, gt=0, max_digits=10, decimal_places=2)

    @field_validator('description')
    @classmethod
    def validate_description(cls, v):
        if v is not None and not v.strip():
            raise ValueError("Description is required")
        return v

    def effective_total(self) -> Optional[Decimal]:
        if self.description is None:
            return None
        quantity = self.quantity if self.quantity is not None else 1
        unit_price = self.unit_price if self.unit_price is not None else Decimal("0")
        return line_total(quantity, unit_price)


class UpdateInvoiceRequestSchema(BaseModel):
    """
    Request schema for updating an invoice

    Used for PATCH /invoices/{invoice_id}. Omitted fields are left unchanged.
    """

    client_name: Optional[str] = Field(default=None, min_length=1)
    date: Optional[calendar_date] = Field(default=None)
    due_date: Optional[calendar_date] = Field(default=None)
    payment_status: Optional[PaymentStatus] = Field(default=None)
    line_items: Optional[List[UpdateLineItemRequestSchema]] = Field(
        default=None,
        description="Replaces all line items when present (an empty list clears them)"
    )

    @field_validator('client_name')
    @classmethod
    def validate_client_name(cls, v):
        """Ensure a supplied client name is not only whitespace"""
        if v is not None and not v.strip():
            raise ValueError("Client name is required")
        return v

    @model_validator(mode='after')
    def validate_total_amount(self):
        """Every replacement line and their sum must fit the stored money precision"""
        if self.line_items:
            totals = [t for t in (entry.effective_total() for entry in self.line_items) if t is not None]
            if not all(fits_amount_column(t) for t in totals):
                raise ValueError(f"Line total must not exceed {MAX_AMOUNT}")
            if not fits_amount_column(sum_totals(totals)):
                raise ValueError(f"Invoice total must not exceed {MAX_AMOUNT}")
        return self

    class Config:
        json_schema_extra = {
            "example": {
                "client_name": "Acme Corp",
                "payment_status": "overdue"
            }
        }
