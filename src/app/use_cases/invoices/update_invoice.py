"""UpdateInvoice Use Case

Applies a partial update to an invoice. Supplied line items replace
the existing set as a whole.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.line_item_repository import LineItemRepository
from .dtos import UpdateInvoiceCommandDTO, InvoiceDetailResponseDTO

logger = logging.getLogger(__name__)


class UpdateInvoice:
    """
    Use Case: Update invoice

    Business Rules:
    1. Invoice must exist (checked before any write)
    2. Only supplied scalar fields are overwritten
    3. Supplied line_items (even empty) fully replace the current ones;
       new IDs are always assigned
    4. Line item entries without a description are dropped; missing
       quantity defaults to 1 and missing unit_price to 0
    5. total_amount is recomputed only when line_items are supplied
    6. updated_at is always refreshed

    Flow:
    1. Load invoice
    2. Merge scalar changes
    3. Replace line items and recompute total (if supplied)
    4. Save invoice
    5. Commit transaction
    6. Return full invoice with current line items
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        line_item_repo: LineItemRepository,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.line_item_repo = line_item_repo

    async def execute(self, command: UpdateInvoiceCommandDTO) -> Result[InvoiceDetailResponseDTO]:
        """
        Execute invoice update

        Args:
            command: UpdateInvoiceCommandDTO with invoice_id and supplied fields

        Returns:
            Result[InvoiceDetailResponseDTO]: Success with updated invoice or error
        """
        try:
            # Step 1: Load invoice
            invoice = await self.invoice_repo.get_by_id(command.invoice_id)

            if not invoice:
                return Return.err(
                    Error(
                        code="INVOICE_NOT_FOUND",
                        message=f"Invoice with ID {command.invoice_id} not found",
                        reason="Invoice does not exist",
                    )
                )

            # Step 2: Merge scalar changes
            invoice.apply_changes(command.scalar_changes())

            # Step 3: Replace line items
            if command.replaces_line_items:
                await self.line_item_repo.delete_by_invoice_id(invoice.id)

                replacements = [
                    line_item
                    for line_item in (
                        entry.to_line_item(invoice.id) for entry in command.line_items
                    )
                    if line_item is not None
                ]
                dropped = len(command.line_items) - len(replacements)
                if dropped:
                    logger.info(
                        "Dropped %d line items without description from invoice %s",
                        dropped,
                        invoice.id,
                    )

                line_items = await self.line_item_repo.create_many(replacements)
                invoice.recalculate_total(line_items)
            else:
                line_items = await self.line_item_repo.get_by_invoice_id(invoice.id)

            # Step 4: Save invoice (refreshes updated_at)
            updated_invoice = await self.invoice_repo.update(invoice)

            # Step 5: Commit transaction
            await self.uow.commit()

            logger.info("Updated invoice %s", updated_invoice.id)

            # Step 6: Build response
            return Return.ok(
                InvoiceDetailResponseDTO.from_entities(updated_invoice, line_items)
            )

        except Exception as e:
            logger.exception("Failed to update invoice %s", command.invoice_id)
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="UPDATE_INVOICE_FAILED",
                    message="Failed to update invoice",
                    reason=str(e),
                )
            )
