"""Unit tests for GetInvoice and ListInvoices use cases"""

import pytest
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.invoices.get_invoice import GetInvoice
from src.app.use_cases.invoices.list_invoices import ListInvoices
from src.domain.invoice import Invoice
from src.domain.line_item import LineItem


def make_invoice(invoice_id, client_name, created_at):
    return Invoice(
        id=invoice_id,
        client_name=client_name,
        date=date(2024, 1, 15),
        due_date=date(2024, 2, 15),
        total_amount=Decimal("50.00"),
        created_at=created_at,
        updated_at=created_at,
    )


@pytest.fixture
def mock_invoice_repo():
    return MagicMock()


@pytest.fixture
def mock_line_item_repo():
    return MagicMock()


@pytest.mark.asyncio
class TestGetInvoice:
    async def test_returns_invoice_with_line_items(self, mock_invoice_repo, mock_line_item_repo):
        # Arrange
        invoice = make_invoice(1, "Acme", datetime.now(timezone.utc))
        line_item = LineItem.build(invoice_id=1, description="Dev", quantity=2, unit_price=Decimal("25.00"))
        line_item.id = 10
        mock_invoice_repo.get_by_id = AsyncMock(return_value=invoice)
        mock_line_item_repo.get_by_invoice_id = AsyncMock(return_value=[line_item])

        # Act
        result = await GetInvoice(mock_invoice_repo, mock_line_item_repo).execute(1)

        # Assert
        assert result.is_ok()
        assert result.value.id == 1
        assert len(result.value.line_items) == 1
        assert result.value.line_items[0].total == Decimal("50.00")
        mock_line_item_repo.get_by_invoice_id.assert_called_once_with(1)

    async def test_missing_invoice_is_none_not_error(self, mock_invoice_repo, mock_line_item_repo):
        # Arrange
        mock_invoice_repo.get_by_id = AsyncMock(return_value=None)
        mock_line_item_repo.get_by_invoice_id = AsyncMock()

        # Act
        result = await GetInvoice(mock_invoice_repo, mock_line_item_repo).execute(999)

        # Assert
        assert result.is_ok()
        assert result.value is None
        mock_line_item_repo.get_by_invoice_id.assert_not_called()


@pytest.mark.asyncio
class TestListInvoices:
    async def test_returns_repository_order(self, mock_invoice_repo):
        # Arrange
        now = datetime.now(timezone.utc)
        mock_invoice_repo.list_all = AsyncMock(
            return_value=[
                make_invoice(3, "C", now),
                make_invoice(2, "B", now - timedelta(minutes=1)),
                make_invoice(1, "A", now - timedelta(minutes=2)),
            ]
        )

        # Act
        result = await ListInvoices(mock_invoice_repo).execute()

        # Assert
        assert result.is_ok()
        assert [invoice.client_name for invoice in result.value.invoices] == ["C", "B", "A"]
        assert result.value.count == 3
        assert not hasattr(result.value.invoices[0], "line_items")

    async def test_empty(self, mock_invoice_repo):
        # Arrange
        mock_invoice_repo.list_all = AsyncMock(return_value=[])

        # Act
        result = await ListInvoices(mock_invoice_repo).execute()

        # Assert
        assert result.is_ok()
        assert result.value.invoices == []
        assert result.value.count == 0
