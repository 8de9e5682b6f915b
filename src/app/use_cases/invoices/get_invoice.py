"""GetInvoice Use Case

Retrieves one invoice with its line items.
"""

from typing import Optional
from libs.result import Result, Return
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.line_item_repository import LineItemRepository
from .dtos import InvoiceDetailResponseDTO


class GetInvoice:
    """
    Get Invoice Use Case

    Read-only. A missing invoice is a normal outcome here: the result
    is ok with a None value, never an error.
    """

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        line_item_repo: LineItemRepository,
    ):
        self.invoice_repo = invoice_repo
        self.line_item_repo = line_item_repo

    async def execute(self, invoice_id: int) -> Result[Optional[InvoiceDetailResponseDTO]]:
        """
        Execute get invoice operation

        Args:
            invoice_id: Invoice ID

        Returns:
            Result with the invoice and its line items, or None if not found
        """
        invoice = await self.invoice_repo.get_by_id(invoice_id)

        if not invoice:
            return Return.ok(None)

        line_items = await self.line_item_repo.get_by_invoice_id(invoice.id)

        return Return.ok(InvoiceDetailResponseDTO.from_entities(invoice, line_items))
