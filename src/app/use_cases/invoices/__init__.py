"""Invoice use cases"""
from .create_invoice import CreateInvoice
from .get_invoice import GetInvoice
from .list_invoices import ListInvoices
from .update_invoice import UpdateInvoice
from .mark_invoice_paid import MarkInvoicePaid
from .delete_invoice import DeleteInvoice
from .print_invoice import PrintInvoice
from .dtos import (
    LineItemInputDTO,
    CreateInvoiceCommandDTO,
    UpdateLineItemDTO,
    UpdateInvoiceCommandDTO,
    LineItemDTO,
    InvoiceResponseDTO,
    InvoiceDetailResponseDTO,
    ListInvoicesResponseDTO,
    DeleteInvoiceResponseDTO,
    PrintInvoiceResponseDTO,
)

__all__ = [
    "CreateInvoice",
    "GetInvoice",
    "ListInvoices",
    "UpdateInvoice",
    "MarkInvoicePaid",
    "DeleteInvoice",
    "PrintInvoice",
    "LineItemInputDTO",
    "CreateInvoiceCommandDTO",
    "UpdateLineItemDTO",
    "UpdateInvoiceCommandDTO",
    "LineItemDTO",
    "InvoiceResponseDTO",
    "InvoiceDetailResponseDTO",
    "ListInvoicesResponseDTO",
    "DeleteInvoiceResponseDTO",
    "PrintInvoiceResponseDTO",
]
