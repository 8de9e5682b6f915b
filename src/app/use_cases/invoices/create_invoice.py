"""CreateInvoice Use Case

Creates an invoice together with its line items in one unit of work.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.line_item_repository import LineItemRepository
from src.domain.invoice import Invoice
from src.domain.line_item import LineItem
from .dtos import CreateInvoiceCommandDTO, InvoiceDetailResponseDTO

logger = logging.getLogger(__name__)


class CreateInvoice:
    """
    Use Case: Create invoice with line items

    Business Rules:
    1. Each line item total = quantity * unit_price
    2. Invoice total_amount = sum of line item totals
    3. Invoice and line items are written atomically (single commit)
    4. payment_status defaults to pending

    Input constraints (non-empty client name and line items, quantity >= 1,
    unit_price > 0) are enforced by CreateInvoiceCommandDTO, so nothing
    invalid ever reaches this use case.

    Flow:
    1. Build line items with computed totals
    2. Build invoice with the summed total
    3. Persist invoice, then line items with the new invoice ID
    4. Commit transaction
    5. Return full invoice with line items
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

    async def execute(self, command: CreateInvoiceCommandDTO) -> Result[InvoiceDetailResponseDTO]:
        """
        Execute invoice creation

        Args:
            command: CreateInvoiceCommandDTO with client, dates and line items

        Returns:
            Result[InvoiceDetailResponseDTO]: Success with invoice details or error
        """
        try:
            # Step 1: Build line items (invoice_id assigned after insert)
            line_items = [
                LineItem.build(
                    description=item.description,
                    quantity=item.quantity,
                    unit_price=item.unit_price,
                )
                for item in command.line_items
            ]

            # Step 2: Build invoice with derived total
            invoice = Invoice(
                client_name=command.client_name,
                date=command.date,
                due_date=command.due_date,
                payment_status=command.payment_status,
            )
            invoice.recalculate_total(line_items)

            # Step 3: Persist invoice and line items
            created_invoice = await self.invoice_repo.create(invoice)

            for line_item in line_items:
                line_item.invoice_id = created_invoice.id

            created_line_items = await self.line_item_repo.create_many(line_items)

            # Step 4: Commit transaction
            await self.uow.commit()

            logger.info(
                "Created invoice %s for %s with %d line items, total %s",
                created_invoice.id,
                created_invoice.client_name,
                len(created_line_items),
                created_invoice.total_amount,
            )

            # Step 5: Build response
            return Return.ok(
                InvoiceDetailResponseDTO.from_entities(created_invoice, created_line_items)
            )

        except Exception as e:
            logger.exception("Failed to create invoice for %s", command.client_name)
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="CREATE_INVOICE_FAILED",
                    message="Failed to create invoice",
                    reason=str(e),
                )
            )
