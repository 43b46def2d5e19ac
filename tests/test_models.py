from decimal import Decimal
from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from invoice_export.models import Invoice, InvoiceLine, InvoiceStatus


def test_invoice_accepts_camel_case_payload() -> None:
    invoice = Invoice.model_validate(
        {
            "invoiceNumber": "INV-7",
            "invoiceDate": "2024-05-01",
            "customerName": "Globex",
            "taxOffice": "North",
            "taxNumber": "99",
            "status": "ISSUED",
            "lineItems": [{"name": "Support", "quantity": 2, "unitPrice": "15.5", "vatRate": 8}],
        }
    )
    assert invoice.invoice_number == "INV-7"
    assert invoice.status is InvoiceStatus.ISSUED
    assert invoice.line_items[0].unit_price == Decimal("15.5")
    assert invoice.line_items[0].line_total == Decimal("31.0")
    assert invoice.line_items[0].vat_amount == Decimal("2.48")


def test_invoice_defaults_are_empty() -> None:
    invoice = Invoice()
    assert invoice.invoice_number == ""
    assert invoice.customer_address == ""
    assert invoice.line_items == []
    assert invoice.status is InvoiceStatus.DRAFT
    assert invoice.currency == "USD"
    assert invoice.due_date is None


def test_none_text_becomes_empty_string() -> None:
    invoice = Invoice(invoice_number=None, customer_name=None, line_items=None)
    assert invoice.invoice_number == ""
    assert invoice.customer_name == ""
    assert invoice.line_items == []

    line = InvoiceLine(name=None, quantity=None, unit_price="", vat_rate=None)
    assert line.name == ""
    assert line.line_total == Decimal("0")


def test_numeric_invoice_number_and_dates_become_text() -> None:
    from datetime import date

    invoice = Invoice(invoice_number=1001, invoice_date=date(2024, 2, 29), due_date=date(2024, 3, 30))
    assert invoice.invoice_number == "1001"
    assert invoice.invoice_date == "2024-02-29"
    assert invoice.due_date == "2024-03-30"


def test_invoice_from_attribute_object() -> None:
    source = SimpleNamespace(
        invoice_number="INV-9",
        invoice_date="2024-06-01",
        customer_name="Initech",
        line_items=[SimpleNamespace(name="Stapler", description="", quantity=3, unit_price=4, vat_rate=0)],
    )
    invoice = Invoice.model_validate(source)
    assert invoice.customer_name == "Initech"
    assert invoice.line_items[0].line_total == Decimal("12")


def test_unknown_status_is_rejected() -> None:
    with pytest.raises(ValidationError):
        Invoice(status="PAID")
