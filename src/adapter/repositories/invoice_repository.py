"""SQLAlchemy Invoice Repository Implementation

Implements invoice persistence using SQLAlchemy async session.
"""

from typing import Optional, List
from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.base import utc_now
from src.domain.invoice import Invoice, PaymentStatus
from src.domain.line_item import LineItem


class SqlAlchemyInvoiceRepository(InvoiceRepository):
    """
    SQLAlchemy implementation of InvoiceRepository

    Uses async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, invoice: Invoice) -> Invoice:
        self.session.add(invoice)
        await self.session.flush()
        await self.session.refresh(invoice)
        return invoice

    async def get_by_id(self, invoice_id: int) -> Optional[Invoice]:
        statement = select(Invoice).where(Invoice.id == invoice_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def list_all(self) -> List[Invoice]:
        # id breaks ties between invoices created within the same timestamp
        statement = select(Invoice).order_by(Invoice.created_at.desc(), Invoice.id.desc())
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def update(self, invoice: Invoice) -> Invoice:
        invoice.updated_at = utc_now()
        self.session.add(invoice)
        await self.session.flush()
        await self.session.refresh(invoice)
        return invoice

    async def update_status(
        self, invoice_id: int, payment_status: PaymentStatus
    ) -> Optional[Invoice]:
        invoice = await self.get_by_id(invoice_id)
        if not invoice:
            return None

        invoice.payment_status = payment_status
        return await self.update(invoice)

    async def delete(self, invoice_id: int) -> bool:
        """
        Delete an invoice together with its line items

        Line items are removed explicitly as well so no orphans remain on
        backends where the foreign key cascade is not enforced.
        """
        await self.session.execute(
            delete(LineItem).where(LineItem.invoice_id == invoice_id)
        )
        result = await self.session.execute(
            delete(Invoice).where(Invoice.id == invoice_id)
        )
        await self.session.flush()
        return result.rowcount > 0
