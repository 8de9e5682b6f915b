"""MarkInvoicePaid Use Case

Sets an invoice's payment status to paid.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.invoice import PaymentStatus
from .dtos import InvoiceResponseDTO

logger = logging.getLogger(__name__)


class MarkInvoicePaid:
    """
    Use Case: Mark invoice as paid

    Business Rules:
    1. Invoice must exist
    2. Only payment_status and updated_at change; line items and
       total_amount are untouched
    3. Allowed from any status (no transition rules)
    """

    def __init__(self, uow: UnitOfWork, invoice_repo: InvoiceRepository):
        self.uow = uow
        self.invoice_repo = invoice_repo

    async def execute(self, invoice_id: int) -> Result[InvoiceResponseDTO]:
        """
        Execute mark-paid

        Args:
            invoice_id: Invoice ID

        Returns:
            Result[InvoiceResponseDTO]: Success with invoice (no line items) or error
        """
        try:
            invoice = await self.invoice_repo.update_status(invoice_id, PaymentStatus.PAID)

            if not invoice:
                return Return.err(
                    Error(
                        code="INVOICE_NOT_FOUND",
                        message=f"Invoice with ID {invoice_id} not found",
                        reason="Invoice does not exist",
                    )
                )

            await self.uow.commit()

            logger.info("Marked invoice %s as paid", invoice.id)

            return Return.ok(InvoiceResponseDTO.from_entity(invoice))

        except Exception as e:
            logger.exception("Failed to mark invoice %s as paid", invoice_id)
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="MARK_INVOICE_PAID_FAILED",
                    message="Failed to mark invoice as paid",
                    reason=str(e),
                )
            )
