"""Unit tests for DeleteInvoice use case"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.invoices.delete_invoice import DeleteInvoice


@pytest.fixture
def mock_invoice_repo():
    return MagicMock()


@pytest.fixture
def delete_use_case(mock_uow, mock_invoice_repo):
    return DeleteInvoice(uow=mock_uow, invoice_repo=mock_invoice_repo)


@pytest.mark.asyncio
class TestDeleteInvoice:
    async def test_existing_invoice(self, delete_use_case, mock_invoice_repo, mock_uow):
        # Arrange
        mock_invoice_repo.delete = AsyncMock(return_value=True)

        # Act
        result = await delete_use_case.execute(1)

        # Assert
        assert result.is_ok()
        assert result.value.success is True
        mock_uow.commit.assert_called_once()

    async def test_missing_invoice_is_not_an_error(self, delete_use_case, mock_invoice_repo, mock_uow):
        # Arrange
        mock_invoice_repo.delete = AsyncMock(return_value=False)

        # Act
        result = await delete_use_case.execute(999)

        # Assert
        assert result.is_ok()
        assert result.value.success is False
        mock_uow.commit.assert_not_called()

    async def test_rollback_on_exception(self, delete_use_case, mock_invoice_repo, mock_uow):
        # Arrange
        mock_invoice_repo.delete = AsyncMock(side_effect=Exception("Database error"))

        # Act
        result = await delete_use_case.execute(1)

        # Assert
        assert result.is_err()
        assert result.error.code == "DELETE_INVOICE_FAILED"
        mock_uow.rollback.assert_called_once()
