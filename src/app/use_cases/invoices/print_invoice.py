"""PrintInvoice Use Case

Renders the printable (PDF) view of an invoice.
"""

import base64
import logging
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.line_item_repository import LineItemRepository
from src.app.services.pdf_service import PdfService
from src.domain.base import utc_now
from .dtos import PrintInvoiceResponseDTO

logger = logging.getLogger(__name__)


class PrintInvoice:
    """
    Use Case: Print invoice

    Business Rules:
    1. Invoice must exist
    2. Any payment status can be printed
    3. The VAT note is fixed text; no tax is computed

    Flow:
    1. Retrieve invoice and its line items
    2. Generate PDF using PDF service
    3. Return PDF as base64
    """

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        line_item_repo: LineItemRepository,
        pdf_service: PdfService,
        company_name: str,
        company_address: str,
        vat_note: str,
    ):
        self.invoice_repo = invoice_repo
        self.line_item_repo = line_item_repo
        self.pdf_service = pdf_service
        self.company_name = company_name
        self.company_address = company_address
        self.vat_note = vat_note

    async def execute(self, invoice_id: int) -> Result[PrintInvoiceResponseDTO]:
        """
        Execute invoice printing

        Args:
            invoice_id: Invoice ID to print

        Returns:
            Result[PrintInvoiceResponseDTO]: Success with PDF or error
        """
        try:
            # Step 1: Retrieve invoice and line items
            invoice = await self.invoice_repo.get_by_id(invoice_id)

            if not invoice:
                return Return.err(
                    Error(
                        code="INVOICE_NOT_FOUND",
                        message=f"Invoice with ID {invoice_id} not found",
                        reason="Invoice does not exist",
                    )
                )

            line_items = await self.line_item_repo.get_by_invoice_id(invoice_id)

            # Step 2: Generate PDF
            pdf_bytes = self.pdf_service.generate_invoice(
                invoice=invoice,
                line_items=line_items,
                company_name=self.company_name,
                company_address=self.company_address,
                vat_note=self.vat_note,
            )

            # Step 3: Build response
            return Return.ok(
                PrintInvoiceResponseDTO(
                    invoice_id=invoice.id,
                    file_name=f"invoice_{invoice.id}.pdf",
                    pdf_base64=base64.b64encode(pdf_bytes).decode("utf-8"),
                    generated_at=utc_now(),
                )
            )

        except Exception as e:
            logger.exception("Failed to print invoice %s", invoice_id)
            return Return.err(
                Error(
                    code="PRINT_INVOICE_FAILED",
                    message="Failed to print invoice",
                    reason=str(e),
                )
            )
