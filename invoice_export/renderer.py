from __future__ import annotations

import base64
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from .models import Invoice
from .renderer_interface import InvoiceRenderer
from .services.invoice_pdf import DEFAULT_LAYOUT, PageLayout, encode

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE_ID = "minimal"


class InvoicePayloadError(ValueError):
    """Raised when a payload cannot be read as an invoice."""


class UnknownTemplateError(LookupError):
    def __init__(self, template_id: str) -> None:
        super().__init__(f"Unknown invoice template: {template_id}")
        self.template_id = template_id


def coerce_invoice(payload: Any) -> Invoice:
    """
    Accepts an ``Invoice``, a mapping with camelCase or snake_case keys, or any
    object exposing the invoice fields as attributes.
    """
    if isinstance(payload, Invoice):
        return payload
    if payload is None:
        raise InvoicePayloadError("No invoice given")
    try:
        if isinstance(payload, Mapping):
            return Invoice.model_validate(dict(payload))
        return Invoice.model_validate(payload, from_attributes=True)
    except ValidationError as exc:
        raise InvoicePayloadError(f"Invalid invoice payload: {exc.error_count()} error(s)") from exc


class MinimalPDFRenderer(InvoiceRenderer):
    media_type = "application/pdf"

    def __init__(self, layout: PageLayout = DEFAULT_LAYOUT) -> None:
        self.layout = layout

    def render(self, invoice: Any, template_id: str | None = None) -> bytes:
        if template_id not in (None, "", DEFAULT_TEMPLATE_ID):
            raise UnknownTemplateError(template_id)
        inv = coerce_invoice(invoice)
        pdf_bytes = encode(inv, self.layout)
        logger.debug(
            "Rendered invoice %r with %d line item(s) into %d bytes",
            inv.invoice_number,
            len(inv.line_items),
            len(pdf_bytes),
        )
        return pdf_bytes


_RENDERERS: dict[str, InvoiceRenderer] = {DEFAULT_TEMPLATE_ID: MinimalPDFRenderer()}


def get_renderer(template_id: str | None = None) -> InvoiceRenderer:
    key = template_id or DEFAULT_TEMPLATE_ID
    renderer = _RENDERERS.get(key)
    if renderer is None:
        raise UnknownTemplateError(key)
    return renderer


def render_invoice_to_pdf_bytes(invoice: Any, template_id: str | None = None) -> bytes:
    return get_renderer(template_id).render(invoice, template_id)


def render_invoice_to_pdf_base64(invoice: Any, template_id: str | None = None) -> str:
    return base64.b64encode(render_invoice_to_pdf_bytes(invoice, template_id)).decode("ascii")
