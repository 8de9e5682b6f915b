"""PDF Generation Service Interface

Defines the contract for rendering printable invoices.
"""

from abc import ABC, abstractmethod
from typing import List
from src.domain.invoice import Invoice
from src.domain.line_item import LineItem


class PdfService(ABC):
    """
    Service interface for PDF generation

    Provides the print view of an invoice.
    """

    @abstractmethod
    def generate_invoice(
        self,
        invoice: Invoice,
        line_items: List[LineItem],
        company_name: str,
        company_address: str,
        vat_note: str,
    ) -> bytes:
        """
        Generate a printable invoice PDF

        Args:
            invoice: Invoice aggregate
            line_items: Line items of the invoice
            company_name: Issuer name shown in the header
            company_address: Issuer address shown in the header
            vat_note: Fixed VAT note printed under the total

        Returns:
            PDF document as bytes
        """
        pass
