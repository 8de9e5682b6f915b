"""Invoice API Routes

FastAPI routes for invoice operations: create, list, view, edit,
mark-paid, delete and print.
"""

import base64
from fastapi import APIRouter, Depends, status
from fastapi.responses import Response
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.api.error import ClientError
from src.api.schemas.invoice_request import CreateInvoiceRequestSchema, UpdateInvoiceRequestSchema
from src.app.use_cases.invoices.dtos import (
    CreateInvoiceCommandDTO,
    UpdateInvoiceCommandDTO,
    InvoiceResponseDTO,
    InvoiceDetailResponseDTO,
    ListInvoicesResponseDTO,
    DeleteInvoiceResponseDTO,
)
from src.app.use_cases.invoices.create_invoice import CreateInvoice
from src.app.use_cases.invoices.get_invoice import GetInvoice
from src.app.use_cases.invoices.list_invoices import ListInvoices
from src.app.use_cases.invoices.update_invoice import UpdateInvoice
from src.app.use_cases.invoices.mark_invoice_paid import MarkInvoicePaid
from src.app.use_cases.invoices.delete_invoice import DeleteInvoice
from src.app.use_cases.invoices.print_invoice import PrintInvoice
from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.adapter.repositories.line_item_repository import SqlAlchemyLineItemRepository
from src.adapter.services.pdf_service import ReportLabPdfService
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session
from libs.result import Error

router = APIRouter(prefix="/invoices", tags=["Invoices"])

NOT_FOUND_RESPONSE = {
    404: {
        "description": "Invoice not found",
        "content": {
            "application/json": {
                "example": {
                    "error": {
                        "code": "INVOICE_NOT_FOUND",
                        "message": "Invoice with ID 123 not found"
                    }
                }
            }
        }
    }
}


@router.post(
    "",
    response_model=InvoiceDetailResponseDTO,
    status_code=status.HTTP_201_CREATED,
)
async def create_invoice(
    request: CreateInvoiceRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Create an invoice with its line items.

    The line item totals and the invoice `total_amount` are computed by
    the server; invoice and line items are stored atomically.

    **Example request:**
    ```json
    {
      "client_name": "Acme",
      "date": "2024-01-15",
      "due_date": "2024-02-15",
      "line_items": [
        {"description": "Development", "quantity": 10, "unit_price": 150.50},
        {"description": "Design", "quantity": 5, "unit_price": 200.00}
      ]
    }
    ```

    **Returns:**
    - 201: Invoice created (total_amount 2505.00 for the example)
    - 422: Invalid request parameters
    """
    uow = SqlAlchemyUnitOfWork(session)
    invoice_repo = SqlAlchemyInvoiceRepository(session)
    line_item_repo = SqlAlchemyLineItemRepository(session)

    command = CreateInvoiceCommandDTO(**request.model_dump())

    use_case = CreateInvoice(uow, invoice_repo, line_item_repo)
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value


@router.get(
    "",
    response_model=ListInvoicesResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def list_invoices(session: AsyncSession = Depends(get_session)):
    """
    List all invoices (without line items), newest first.
    """
    use_case = ListInvoices(SqlAlchemyInvoiceRepository(session))
    result = await use_case.execute()

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value


@router.get(
    "/{invoice_id}",
    response_model=InvoiceDetailResponseDTO,
    status_code=status.HTTP_200_OK,
    responses=NOT_FOUND_RESPONSE,
)
async def get_invoice(
    invoice_id: int,
    session: AsyncSession = Depends(get_session)
):
    """
    Get one invoice with its line items.

    **Returns:**
    - 200: Invoice found
    - 404: Invoice not found
    """
    use_case = GetInvoice(
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyLineItemRepository(session),
    )
    result = await use_case.execute(invoice_id)

    if result.is_err():
        raise ClientError.from_error(result.error)

    if result.value is None:
        raise ClientError.from_error(
            Error(
                code="INVOICE_NOT_FOUND",
                message=f"Invoice with ID {invoice_id} not found",
            )
        )

    return result.value


@router.patch(
    "/{invoice_id}",
    response_model=InvoiceDetailResponseDTO,
    status_code=status.HTTP_200_OK,
    responses=NOT_FOUND_RESPONSE,
)
async def update_invoice(
    invoice_id: int,
    request: UpdateInvoiceRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Partially update an invoice.

    Only fields present in the body are changed. When `line_items` is
    present it replaces all existing line items (an empty list removes
    them) and the total is recomputed.

    **Returns:**
    - 200: Invoice updated
    - 404: Invoice not found
    - 422: Invalid request parameters
    """
    uow = SqlAlchemyUnitOfWork(session)
    invoice_repo = SqlAlchemyInvoiceRepository(session)
    line_item_repo = SqlAlchemyLineItemRepository(session)

    # exclude_unset keeps "omitted" distinct from "supplied"
    command = UpdateInvoiceCommandDTO(
        invoice_id=invoice_id,
        **request.model_dump(exclude_unset=True),
    )

    use_case = UpdateInvoice(uow, invoice_repo, line_item_repo)
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value


@router.post(
    "/{invoice_id}/mark-paid",
    response_model=InvoiceResponseDTO,
    status_code=status.HTTP_200_OK,
    responses=NOT_FOUND_RESPONSE,
)
async def mark_invoice_paid(
    invoice_id: int,
    session: AsyncSession = Depends(get_session)
):
    """
    Mark an invoice as paid.

    **Returns:**
    - 200: Invoice marked as paid
    - 404: Invoice not found
    """
    use_case = MarkInvoicePaid(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyInvoiceRepository(session),
    )
    result = await use_case.execute(invoice_id)

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value


@router.delete(
    "/{invoice_id}",
    response_model=DeleteInvoiceResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def delete_invoice(
    invoice_id: int,
    session: AsyncSession = Depends(get_session)
):
    """
    Delete an invoice and all of its line items.

    Deleting a missing invoice is not an error: `success` is false.
    """
    use_case = DeleteInvoice(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyInvoiceRepository(session),
    )
    result = await use_case.execute(invoice_id)

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value


@router.get(
    "/{invoice_id}/print",
    responses={
        200: {
            "content": {"application/pdf": {}},
            "description": "PDF document"
        },
        **NOT_FOUND_RESPONSE,
    }
)
async def print_invoice(
    invoice_id: int,
    session: AsyncSession = Depends(get_session)
):
    """
    Print an invoice as a PDF document.

    **Returns:**
    - 200: PDF file
    - 404: Invoice not found
    """
    use_case = PrintInvoice(
        invoice_repo=SqlAlchemyInvoiceRepository(session),
        line_item_repo=SqlAlchemyLineItemRepository(session),
        pdf_service=ReportLabPdfService(),
        company_name=ApplicationConfig.COMPANY_NAME,
        company_address=ApplicationConfig.COMPANY_ADDRESS,
        vat_note=ApplicationConfig.PRINT_VAT_NOTE,
    )
    result = await use_case.execute(invoice_id)

    if result.is_err():
        raise ClientError.from_error(result.error)

    pdf_bytes = base64.b64decode(result.value.pdf_base64)

    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f"inline; filename={result.value.file_name}"
        }
    )
