"""Invoice Repository Interface

Defines the contract for invoice persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Optional, List
from src.domain.invoice import Invoice, PaymentStatus


class InvoiceRepository(ABC):
    """
    Repository interface for Invoice persistence

    Implementations write within the caller's unit of work and never
    commit on their own.
    """

    @abstractmethod
    async def create(self, invoice: Invoice) -> Invoice:
        """
        Create a new invoice

        Args:
            invoice: Invoice entity to persist

        Returns:
            Created Invoice with generated ID
        """
        pass

    @abstractmethod
    async def get_by_id(self, invoice_id: int) -> Optional[Invoice]:
        """
        Retrieve invoice by ID

        Args:
            invoice_id: Invoice ID

        Returns:
            Invoice if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_all(self) -> List[Invoice]:
        """
        Retrieve all invoices, most recently created first

        Returns:
            List of invoices (empty if none exist)
        """
        pass

    @abstractmethod
    async def update(self, invoice: Invoice) -> Invoice:
        """
        Update an existing invoice and refresh its updated_at

        Args:
            invoice: Invoice entity with updated values

        Returns:
            Updated Invoice
        """
        pass

    @abstractmethod
    async def update_status(
        self, invoice_id: int, payment_status: PaymentStatus
    ) -> Optional[Invoice]:
        """
        Set the payment status of an invoice

        Args:
            invoice_id: Invoice ID
            payment_status: New payment status

        Returns:
            Updated Invoice, or None if it does not exist
        """
        pass

    @abstractmethod
    async def delete(self, invoice_id: int) -> bool:
        """
        Delete an invoice together with its line items

        Args:
            invoice_id: Invoice ID

        Returns:
            True if an invoice was deleted, False if none existed
        """
        pass
