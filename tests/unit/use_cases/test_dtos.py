"""Unit tests for invoice command DTO validation and patch handling"""

import json
import pytest
from datetime import date
from decimal import Decimal
from pydantic import ValidationError

from src.app.use_cases.invoices.dtos import (
    CreateInvoiceCommandDTO,
    UpdateInvoiceCommandDTO,
    UpdateLineItemDTO,
    InvoiceDetailResponseDTO,
)
from src.domain.invoice import Invoice, PaymentStatus
from src.domain.line_item import LineItem
from src.domain.money import MAX_AMOUNT, MAX_QUANTITY


def create_payload(**overrides):
    payload = {
        "client_name": "Acme",
        "date": "2024-01-15",
        "due_date": "2024-02-15",
        "line_items": [{"description": "Dev", "quantity": 10, "unit_price": "150.50"}],
    }
    payload.update(overrides)
    return payload


class TestCreateInvoiceCommandValidation:
    def test_valid_command_defaults_to_pending(self):
        command = CreateInvoiceCommandDTO(**create_payload())

        assert command.payment_status == PaymentStatus.PENDING
        assert command.date == date(2024, 1, 15)
        assert command.line_items[0].unit_price == Decimal("150.50")

    def test_explicit_payment_status(self):
        command = CreateInvoiceCommandDTO(**create_payload(payment_status="overdue"))

        assert command.payment_status == PaymentStatus.OVERDUE

    def test_empty_line_items_rejected(self):
        with pytest.raises(ValidationError):
            CreateInvoiceCommandDTO(**create_payload(line_items=[]))

    @pytest.mark.parametrize("client_name", ["", "   "])
    def test_blank_client_name_rejected(self, client_name):
        with pytest.raises(ValidationError):
            CreateInvoiceCommandDTO(**create_payload(client_name=client_name))

    @pytest.mark.parametrize(
        "line_item",
        [
            {"description": "", "quantity": 1, "unit_price": "1.00"},
            {"description": "Dev", "quantity": 0, "unit_price": "1.00"},
            {"description": "Dev", "quantity": -2, "unit_price": "1.00"},
            {"description": "Dev", "quantity": 1.5, "unit_price": "1.00"},
            {"description": "Dev", "quantity": 1, "unit_price": "0"},
            {"description": "Dev", "quantity": 1, "unit_price": "-5.00"},
        ],
    )
    def test_invalid_line_item_rejected(self, line_item):
        with pytest.raises(ValidationError):
            CreateInvoiceCommandDTO(**create_payload(line_items=[line_item]))

    def test_unknown_payment_status_rejected(self):
        with pytest.raises(ValidationError):
            CreateInvoiceCommandDTO(**create_payload(payment_status="cancelled"))


class TestUpdateInvoiceCommandPatch:
    def test_only_supplied_fields_are_changes(self):
        command = UpdateInvoiceCommandDTO(invoice_id=1, client_name="Globex")

        assert command.scalar_changes() == {"client_name": "Globex"}
        assert command.replaces_line_items is False

    def test_all_scalar_fields(self):
        command = UpdateInvoiceCommandDTO(
            invoice_id=1,
            client_name="Globex",
            date=date(2024, 3, 1),
            due_date=date(2024, 3, 31),
            payment_status="paid",
        )

        assert command.scalar_changes() == {
            "client_name": "Globex",
            "date": date(2024, 3, 1),
            "due_date": date(2024, 3, 31),
            "payment_status": PaymentStatus.PAID,
        }

    def test_empty_line_items_list_is_a_replacement(self):
        command = UpdateInvoiceCommandDTO(invoice_id=1, line_items=[])

        assert command.replaces_line_items is True
        assert command.scalar_changes() == {}

    def test_explicit_none_is_ignored(self):
        command = UpdateInvoiceCommandDTO(invoice_id=1, client_name=None, line_items=None)

        assert command.scalar_changes() == {}
        assert command.replaces_line_items is False

    def test_blank_client_name_rejected(self):
        with pytest.raises(ValidationError):
            UpdateInvoiceCommandDTO(invoice_id=1, client_name=" ")

    def test_invalid_supplied_line_item_values_rejected(self):
        with pytest.raises(ValidationError):
            UpdateInvoiceCommandDTO(
                invoice_id=1,
                line_items=[{"description": "Dev", "quantity": 0}],
            )


class TestUpdateLineItemDefaults:
    def test_missing_quantity_defaults_to_one(self):
        line_item = UpdateLineItemDTO(description="Dev", unit_price=Decimal("10.00")).to_line_item(7)

        assert line_item.quantity == 1
        assert line_item.total == Decimal("10.00")
        assert line_item.invoice_id == 7

    def test_missing_unit_price_defaults_to_zero(self):
        line_item = UpdateLineItemDTO(description="Dev", quantity=4).to_line_item(7)

        assert line_item.unit_price == Decimal("0.00")
        assert line_item.total == Decimal("0.00")

    def test_missing_description_is_dropped(self):
        assert UpdateLineItemDTO(quantity=2, unit_price=Decimal("5.00")).to_line_item(7) is None

    def test_id_is_ignored(self):
        line_item = UpdateLineItemDTO(id=99, description="Dev", quantity=1, unit_price=1).to_line_item(7)

        assert line_item.id is None


class TestResponseSerialization:
    def test_money_serializes_as_json_numbers(self):
        invoice = Invoice(
            id=1,
            client_name="Acme",
            date=date(2024, 1, 15),
            due_date=date(2024, 2, 15),
            total_amount=Decimal("2505.00"),
        )
        line_item = LineItem.build(
            invoice_id=1, description="Dev", quantity=10, unit_price=Decimal("150.50")
        )
        line_item.id = 1

        dto = InvoiceDetailResponseDTO.from_entities(invoice, [line_item])
        data = json.loads(dto.model_dump_json())

        assert data["total_amount"] == 2505.0
        assert data["line_items"][0]["unit_price"] == 150.5
        assert data["line_items"][0]["total"] == 1505.0
        assert data["payment_status"] == "pending"
        # Python side keeps Decimal
        assert dto.total_amount == Decimal("2505.00")

    def test_largest_storable_amount_is_exact_on_the_wire(self):
        invoice = Invoice(
            id=1,
            client_name="Acme",
            date=date(2024, 1, 15),
            due_date=date(2024, 2, 15),
            total_amount=MAX_AMOUNT,
        )

        raw = InvoiceDetailResponseDTO.from_entities(invoice, []).model_dump_json()

        assert '"total_amount":99999999.99' in raw
        assert Decimal(str(json.loads(raw)["total_amount"])) == MAX_AMOUNT


class TestMoneyPrecisionValidation:
    @pytest.mark.parametrize("unit_price", ["0.004", 0.004, "10.005", "0.001"])
    def test_sub_cent_price_rejected_on_create(self, unit_price):
        line_items = [{"description": "Dev", "quantity": 1000, "unit_price": unit_price}]

        with pytest.raises(ValidationError):
            CreateInvoiceCommandDTO(**create_payload(line_items=line_items))

    @pytest.mark.parametrize("unit_price", ["0.004", 0.004, "10.005"])
    def test_sub_cent_price_rejected_on_update(self, unit_price):
        with pytest.raises(ValidationError):
            UpdateInvoiceCommandDTO(
                invoice_id=1,
                line_items=[{"description": "Dev", "quantity": 1000, "unit_price": unit_price}],
            )

    def test_two_decimal_float_price_accepted(self):
        line_items = [{"description": "Dev", "quantity": 3, "unit_price": 33.33}]

        command = CreateInvoiceCommandDTO(**create_payload(line_items=line_items))

        assert command.line_items[0].unit_price == Decimal("33.33")

    def test_price_above_column_precision_rejected(self):
        line_items = [{"description": "Dev", "quantity": 1, "unit_price": "100000000.00"}]

        with pytest.raises(ValidationError):
            CreateInvoiceCommandDTO(**create_payload(line_items=line_items))

    def test_quantity_above_limit_rejected(self):
        line_items = [{"description": "Dev", "quantity": MAX_QUANTITY + 1, "unit_price": "1.00"}]

        with pytest.raises(ValidationError):
            CreateInvoiceCommandDTO(**create_payload(line_items=line_items))

    def test_line_total_above_limit_rejected(self):
        line_items = [{"description": "Dev", "quantity": 1000, "unit_price": "100000.00"}]

        with pytest.raises(ValidationError):
            CreateInvoiceCommandDTO(**create_payload(line_items=line_items))

    def test_invoice_total_above_limit_rejected(self):
        line_items = [
            {"description": "Dev", "quantity": 1, "unit_price": "60000000.00"},
            {"description": "Design", "quantity": 1, "unit_price": "60000000.00"},
        ]

        with pytest.raises(ValidationError):
            CreateInvoiceCommandDTO(**create_payload(line_items=line_items))

    def test_invoice_total_at_limit_accepted(self):
        line_items = [{"description": "Dev", "quantity": 1, "unit_price": str(MAX_AMOUNT)}]

        command = CreateInvoiceCommandDTO(**create_payload(line_items=line_items))

        assert command.line_items[0].unit_price == MAX_AMOUNT

    def test_update_total_above_limit_rejected(self):
        with pytest.raises(ValidationError):
            UpdateInvoiceCommandDTO(
                invoice_id=1,
                line_items=[
                    {"description": "Dev", "unit_price": "60000000.00"},
                    {"description": "Design", "unit_price": "60000000.00"},
                ],
            )

    def test_update_dropped_entries_do_not_count(self):
        command = UpdateInvoiceCommandDTO(
            invoice_id=1,
            line_items=[
                {"description": "Dev", "unit_price": "60000000.00"},
                {"quantity": 1, "unit_price": "60000000.00"},
            ],
        )

        assert command.replaces_line_items
