"""Unit tests for mapping use case errors to HTTP responses"""

import json
import pytest
from unittest.mock import MagicMock

from pydantic import ValidationError

from libs.result import Error
from src.api.error import ClientError, client_error_handler, command_validation_error_handler
from src.app.use_cases.invoices.dtos import UpdateInvoiceCommandDTO


class TestClientErrorMapping:
    @pytest.mark.parametrize(
        "code, expected_status",
        [
            ("INVOICE_NOT_FOUND", 404),
            ("CREATE_INVOICE_FAILED", 500),
            ("UPDATE_INVOICE_FAILED", 500),
            ("INVALID_STATUS", 400),
        ],
    )
    def test_status_from_code(self, code, expected_status):
        error = ClientError.from_error(Error(code=code, message="boom"))

        assert error.status_code == expected_status
        assert error.error.code == code

    @pytest.mark.asyncio
    async def test_handler_renders_error_envelope(self):
        # Arrange
        request = MagicMock()
        request.url.path = "/invoices/1"
        exc = ClientError.from_error(
            Error(code="INVOICE_NOT_FOUND", message="Invoice with ID 1 not found")
        )

        # Act
        response = await client_error_handler(request, exc)

        # Assert
        assert response.status_code == 404
        assert json.loads(response.body) == {
            "error": {"code": "INVOICE_NOT_FOUND", "message": "Invoice with ID 1 not found"}
        }

    @pytest.mark.asyncio
    async def test_command_validation_error_is_422(self):
        # Arrange
        request = MagicMock()
        with pytest.raises(ValidationError) as exc_info:
            UpdateInvoiceCommandDTO(
                invoice_id=1,
                line_items=[{"description": "Dev", "unit_price": "0.004"}],
            )

        # Act
        response = await command_validation_error_handler(request, exc_info.value)

        # Assert
        assert response.status_code == 422
        detail = json.loads(response.body)["detail"]
        assert detail[0]["loc"][:2] == ["line_items", 0]
