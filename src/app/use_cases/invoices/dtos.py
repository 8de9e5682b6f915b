"""Data Transfer Objects for Invoice Use Cases

Pydantic models for command inputs and response outputs.
Command DTOs carry the input constraints, so an invalid command raises
pydantic.ValidationError before any use case code runs.
"""

from datetime import datetime, date as calendar_date
from decimal import Decimal
from typing import Annotated, Any, Dict, List, Optional
from pydantic import BaseModel, Field, PlainSerializer, field_validator, model_validator

from src.domain.invoice import Invoice, PaymentStatus
from src.domain.line_item import LineItem
from src.domain.money import MAX_AMOUNT, MAX_QUANTITY, fits_amount_column, line_total, sum_totals

# Decimal in Python, JSON number on the wire
Money = Annotated[
    Decimal,
    PlainSerializer(lambda value: float(value), return_type=float, when_used="json"),
]


class LineItemInputDTO(BaseModel):
    """
    Line item of a new invoice

    Used as input to CreateInvoice use case.
    """

    description: str = Field(
        ...,
        min_length=1,
        description="What is being billed (required, non-empty)"
    )

    quantity: int = Field(
        ...,
        ge=1,
        le=MAX_QUANTITY,
        description="Number of units (integer >= 1)"
    )

    unit_price: Decimal = Field(
        ...,
        gt=0,
        max_digits=10,
        decimal_places=2,
        description="Price per unit (must be > 0, at most 2 decimal places)"
    )

    @field_validator("description")
    @classmethod
    def validate_description(cls, v):
        """Reject whitespace-only descriptions"""
        if v is not None and not v.strip():
            raise ValueError("Description must not be blank")
        return v

    @model_validator(mode="after")
    def validate_total(self):
        """Line total must fit the stored money precision"""
        if not fits_amount_column(line_total(self.quantity, self.unit_price)):
            raise ValueError(f"Line total must not exceed {MAX_AMOUNT}")
        return self

    class Config:
        json_schema_extra = {
            "example": {
                "description": "Development",
                "quantity": 10,
                "unit_price": "150.50"
            }
        }


class CreateInvoiceCommandDTO(BaseModel):
    """
    Command DTO for creating an invoice with its line items

    Used as input to CreateInvoice use case.
    """

    client_name: str = Field(
        ...,
        min_length=1,
        description="Client name (required, non-empty)"
    )

    date: calendar_date = Field(
        ...,
        description="Invoice date"
    )

    due_date: calendar_date = Field(
        ...,
        description="Payment due date (may precede date)"
    )

    line_items: List[LineItemInputDTO] = Field(
        ...,
        min_length=1,
        description="At least one line item is required"
    )

    payment_status: PaymentStatus = Field(
        default=PaymentStatus.PENDING,
        description="Initial payment status (default: pending)"
    )

    @field_validator("client_name")
    @classmethod
    def validate_client_name(cls, v):
        """Reject whitespace-only client names"""
        if v is not None and not v.strip():
            raise ValueError("Client name must not be blank")
        return v

    @model_validator(mode="after")
    def validate_total_amount(self):
        """Invoice total must fit the stored money precision"""
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
                    {"description": "Development", "quantity": 10, "unit_price": "150.50"},
                    {"description": "Design", "quantity": 5, "unit_price": "200.00"}
                ],
                "payment_status": "pending"
            }
        }


class UpdateLineItemDTO(BaseModel):
    """
    Line item of an invoice update

    Every field is optional. Entries without a description are dropped,
    a missing quantity becomes 1 and a missing unit_price becomes 0.
    The id is accepted but ignored: updated line items are always new rows.
    """

    id: Optional[int] = Field(
        default=None,
        description="Ignored; replacement always creates new line items"
    )

    description: Optional[str] = Field(
        default=None,
        min_length=1,
        description="What is being billed"
    )

    quantity: Optional[int] = Field(
        default=None,
        ge=1,
        le=MAX_QUANTITY,
        description="Number of units (integer >= 1, default 1)"
    )

    unit_price: Optional[Decimal] = Field(
        default=None,
        gt=0,
        max_digits=10,
        decimal_places=2,
        description="Price per unit (> 0, at most 2 decimal places, default 0)"
    )

    @field_validator("description")
    @classmethod
    def validate_description(cls, v):
        """Reject whitespace-only descriptions"""
        if v is not None and not v.strip():
            raise ValueError("Description must not be blank")
        return v

    @model_validator(mode="after")
    def validate_total(self):
        """Line total must fit the stored money precision"""
        total = self.effective_total()
        if total is not None and not fits_amount_column(total):
            raise ValueError(f"Line total must not exceed {MAX_AMOUNT}")
        return self

    def effective_quantity(self) -> int:
        return self.quantity if self.quantity is not None else 1

    def effective_unit_price(self) -> Decimal:
        return self.unit_price if self.unit_price is not None else Decimal("0")

    def effective_total(self) -> Optional[Decimal]:
        """Total of the replacement line item, or None if it will be dropped"""
        if self.description is None:
            return None
        return line_total(self.effective_quantity(), self.effective_unit_price())

    def to_line_item(self, invoice_id: int) -> Optional[LineItem]:
        """Build the replacement line item, or None if it has no description"""
        if self.description is None:
            return None

        return LineItem.build(
            invoice_id=invoice_id,
            description=self.description,
            quantity=self.effective_quantity(),
            unit_price=self.effective_unit_price(),
        )


class UpdateInvoiceCommandDTO(BaseModel):
    """
    Command DTO for a partial invoice update (patch)

    Only fields the caller actually supplied are applied. Supplying
    line_items, even as an empty list, replaces the whole set.
    """

    invoice_id: int = Field(
        ...,
        description="Invoice to update"
    )

    client_name: Optional[str] = Field(
        default=None,
        min_length=1,
        description="New client name"
    )

    date: Optional[calendar_date] = Field(
        default=None,
        description="New invoice date"
    )

    due_date: Optional[calendar_date] = Field(
        default=None,
        description="New due date"
    )

    payment_status: Optional[PaymentStatus] = Field(
        default=None,
        description="New payment status"
    )

    line_items: Optional[List[UpdateLineItemDTO]] = Field(
        default=None,
        description="Replacement line items (omit to keep the current ones)"
    )

    @field_validator("client_name")
    @classmethod
    def validate_client_name(cls, v):
        """Reject whitespace-only client names"""
        if v is not None and not v.strip():
            raise ValueError("Client name must not be blank")
        return v

    @model_validator(mode="after")
    def validate_total_amount(self):
        """Recomputed invoice total must fit the stored money precision"""
        if self.line_items:
            totals = [entry.effective_total() for entry in self.line_items]
            total = sum_totals(t for t in totals if t is not None)
            if not fits_amount_column(total):
                raise ValueError(f"Invoice total must not exceed {MAX_AMOUNT}")
        return self

    def scalar_changes(self) -> Dict[str, Any]:
        """Scalar fields that were supplied with a value"""
        return {
            name: getattr(self, name)
            for name in Invoice.PATCHABLE_FIELDS
            if name in self.model_fields_set and getattr(self, name) is not None
        }

    @property
    def replaces_line_items(self) -> bool:
        return "line_items" in self.model_fields_set and self.line_items is not None

    class Config:
        json_schema_extra = {
            "example": {
                "invoice_id": 1,
                "client_name": "Acme Corp",
                "line_items": [
                    {"description": "Development", "quantity": 12, "unit_price": "150.50"}
                ]
            }
        }


class LineItemDTO(BaseModel):
    """Line item as returned to callers"""

    id: int = Field(..., description="Line item ID")
    invoice_id: int = Field(..., description="Owning invoice ID")
    description: str = Field(..., description="What is being billed")
    quantity: int = Field(..., description="Number of units")
    unit_price: Money = Field(..., description="Price per unit")
    total: Money = Field(..., description="quantity * unit_price")

    @classmethod
    def from_entity(cls, line_item: LineItem) -> "LineItemDTO":
        return cls(
            id=line_item.id,
            invoice_id=line_item.invoice_id,
            description=line_item.description,
            quantity=line_item.quantity,
            unit_price=line_item.unit_price,
            total=line_item.total,
        )


class InvoiceResponseDTO(BaseModel):
    """
    Response DTO for an invoice without its line items

    Returned by ListInvoices and MarkInvoicePaid.
    """

    id: int = Field(
        ...,
        description="Invoice ID"
    )

    client_name: str = Field(
        ...,
        description="Client name"
    )

    date: calendar_date = Field(
        ...,
        description="Invoice date"
    )

    due_date: calendar_date = Field(
        ...,
        description="Payment due date"
    )

    payment_status: str = Field(
        ...,
        description="Payment status (pending, paid, overdue)"
    )

    total_amount: Money = Field(
        ...,
        description="Sum of all line item totals"
    )

    created_at: datetime = Field(
        ...,
        description="Creation timestamp"
    )

    updated_at: datetime = Field(
        ...,
        description="Last update timestamp"
    )

    @classmethod
    def from_entity(cls, invoice: Invoice) -> "InvoiceResponseDTO":
        return cls(**_invoice_fields(invoice))

    class Config:
        json_schema_extra = {
            "example": {
                "id": 1,
                "client_name": "Acme",
                "date": "2024-01-15",
                "due_date": "2024-02-15",
                "payment_status": "pending",
                "total_amount": 2505.00,
                "created_at": "2024-01-15T10:00:00Z",
                "updated_at": "2024-01-15T10:00:00Z"
            }
        }


class InvoiceDetailResponseDTO(InvoiceResponseDTO):
    """
    Response DTO for an invoice with its line items

    Returned by CreateInvoice, GetInvoice and UpdateInvoice.
    """

    line_items: List[LineItemDTO] = Field(
        default_factory=list,
        description="Current line items of the invoice"
    )

    @classmethod
    def from_entities(
        cls, invoice: Invoice, line_items: List[LineItem]
    ) -> "InvoiceDetailResponseDTO":
        return cls(
            **_invoice_fields(invoice),
            line_items=[LineItemDTO.from_entity(item) for item in line_items],
        )


class ListInvoicesResponseDTO(BaseModel):
    """Response DTO for ListInvoices (newest first)"""

    invoices: List[InvoiceResponseDTO] = Field(
        default_factory=list,
        description="Invoices ordered by creation time, newest first"
    )

    count: int = Field(
        ...,
        description="Number of invoices returned"
    )


class DeleteInvoiceResponseDTO(BaseModel):
    """Response DTO for DeleteInvoice"""

    success: bool = Field(
        ...,
        description="True if an invoice was deleted, False if it did not exist"
    )


class PrintInvoiceResponseDTO(BaseModel):
    """Response DTO for PrintInvoice"""

    invoice_id: int = Field(..., description="Invoice ID")
    file_name: str = Field(..., description="Suggested download file name")
    pdf_base64: str = Field(..., description="Base64-encoded PDF document")
    generated_at: datetime = Field(..., description="Generation timestamp")


def _invoice_fields(invoice: Invoice) -> Dict[str, Any]:
    return {
        "id": invoice.id,
        "client_name": invoice.client_name,
        "date": invoice.date,
        "due_date": invoice.due_date,
        "payment_status": PaymentStatus(invoice.payment_status).value,
        "total_amount": invoice.total_amount,
        "created_at": invoice.created_at,
        "updated_at": invoice.updated_at,
    }
