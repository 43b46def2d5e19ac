from __future__ import annotations

import base64
from types import SimpleNamespace

import pytest

from invoice_export.models import Invoice
from invoice_export.renderer import (
    InvoicePayloadError,
    MinimalPDFRenderer,
    UnknownTemplateError,
    coerce_invoice,
    get_renderer,
    render_invoice_to_pdf_base64,
    render_invoice_to_pdf_bytes,
)
from invoice_export.services.invoice_pdf import encode


def test_renderer_matches_encoder(sample_invoice: Invoice) -> None:
    assert render_invoice_to_pdf_bytes(sample_invoice) == encode(sample_invoice)


def test_mapping_payloads_with_either_key_style(sample_invoice: Invoice) -> None:
    camel = sample_invoice.model_dump(by_alias=True)
    snake = sample_invoice.model_dump()
    expected = encode(sample_invoice)

    assert render_invoice_to_pdf_bytes(camel) == expected
    assert render_invoice_to_pdf_bytes(snake) == expected


def test_attribute_payload() -> None:
    payload = SimpleNamespace(
        invoice_number="INV-3",
        invoice_date="2024-01-02",
        customer_name="Umbrella",
        line_items=[SimpleNamespace(name="Filters", quantity=2, unit_price=5, vat_rate=10)],
    )
    invoice = coerce_invoice(payload)
    assert invoice.invoice_number == "INV-3"
    assert b"Filters | Qty 2 x 5.00 | VAT 10% | 10.00" in render_invoice_to_pdf_bytes(payload)


def test_invalid_payload_raises_payload_error() -> None:
    with pytest.raises(InvoicePayloadError):
        coerce_invoice({"lineItems": [{"quantity": "many"}]})
    with pytest.raises(InvoicePayloadError):
        coerce_invoice(None)


def test_unknown_template() -> None:
    with pytest.raises(UnknownTemplateError) as excinfo:
        get_renderer("fancy")
    assert excinfo.value.template_id == "fancy"

    with pytest.raises(UnknownTemplateError):
        MinimalPDFRenderer().render(Invoice(), "fancy")


def test_base64_round_trips_to_pdf(sample_invoice: Invoice) -> None:
    encoded = render_invoice_to_pdf_base64(sample_invoice, "minimal")
    assert base64.b64decode(encoded) == encode(sample_invoice)
    assert MinimalPDFRenderer.media_type == "application/pdf"
