from __future__ import annotations

import pytest

from invoice_export.models import Invoice, InvoiceLine


@pytest.fixture()
def sample_invoice() -> Invoice:
    return Invoice(
        invoice_number="INV-2024-0001",
        invoice_date="2024-03-15",
        customer_name="Acme Trading Ltd",
        customer_address="12 Harbour Road, Springfield",
        tax_office="Springfield Central",
        tax_number="1234567890",
        line_items=[
            InvoiceLine(name="Consulting", description="Onsite day rate", quantity=6, unit_price=450, vat_rate=20),
            InvoiceLine(name="Travel", quantity=1, unit_price=900, vat_rate=20),
        ],
        notes="Payable within 30 days",
    )
