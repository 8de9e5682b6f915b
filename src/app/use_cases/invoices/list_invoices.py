"""ListInvoices Use Case

Lists all invoices, most recently created first.
"""

from libs.result import Result, Return
from src.app.repositories.invoice_repository import InvoiceRepository
from .dtos import InvoiceResponseDTO, ListInvoicesResponseDTO


class ListInvoices:
    """
    List Invoices Use Case

    Returns invoices without line items. No invoices is an empty list,
    not an error.
    """

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(self) -> Result[ListInvoicesResponseDTO]:
        invoices = await self.invoice_repo.list_all()

        invoice_dtos = [InvoiceResponseDTO.from_entity(invoice) for invoice in invoices]

        return Return.ok(
            ListInvoicesResponseDTO(
                invoices=invoice_dtos,
                count=len(invoice_dtos),
            )
        )
