from .invoice_repository import SqlAlchemyInvoiceRepository
from .line_item_repository import SqlAlchemyLineItemRepository

__all__ = [
    "SqlAlchemyInvoiceRepository",
    "SqlAlchemyLineItemRepository",
]
