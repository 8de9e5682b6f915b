"""DeleteInvoice Use Case

Deletes an invoice and all of its line items.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_repository import InvoiceRepository
from .dtos import DeleteInvoiceResponseDTO

logger = logging.getLogger(__name__)


class DeleteInvoice:
    """
    Use Case: Delete invoice

    Idempotent: deleting a missing invoice is not an error, the
    response just reports success=False.
    """

    def __init__(self, uow: UnitOfWork, invoice_repo: InvoiceRepository):
        self.uow = uow
        self.invoice_repo = invoice_repo

    async def execute(self, invoice_id: int) -> Result[DeleteInvoiceResponseDTO]:
        try:
            deleted = await self.invoice_repo.delete(invoice_id)

            if deleted:
                await self.uow.commit()
                logger.info("Deleted invoice %s", invoice_id)

            return Return.ok(DeleteInvoiceResponseDTO(success=deleted))

        except Exception as e:
            logger.exception("Failed to delete invoice %s", invoice_id)
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="DELETE_INVOICE_FAILED",
                    message="Failed to delete invoice",
                    reason=str(e),
                )
            )
