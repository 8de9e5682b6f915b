from .unit_of_work import UnitOfWork
from .pdf_service import PdfService

__all__ = [
    "UnitOfWork",
    "PdfService",
]
