from __future__ import annotations

import base64
import logging
import os

from fastapi import FastAPI, HTTPException, Response

from .env import env_int, load_env
from .invoice_calculations import calculate_invoice_totals
from .invoice_numbering import build_invoice_filename
from .logging_setup import setup_logging
from .models import Invoice
from .renderer import UnknownTemplateError, get_renderer
from .renderer_interface import InvoiceRenderer

logger = logging.getLogger(__name__)

load_env()

app = FastAPI(title="Invoice Export")


def _renderer_or_404(template: str | None) -> InvoiceRenderer:
    try:
        return get_renderer(template)
    except UnknownTemplateError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@app.get("/api/health")
def health() -> dict:
    return {"status": "ok"}


@app.post("/api/invoices/pdf")
def invoice_pdf(invoice: Invoice, template: str | None = None) -> Response:
    renderer = _renderer_or_404(template)
    pdf_bytes = renderer.render(invoice, template)
    filename = build_invoice_filename(invoice.invoice_number)
    logger.info("Exported invoice %r as %s (%d bytes)", invoice.invoice_number, filename, len(pdf_bytes))
    headers = {"Content-Disposition": f'attachment; filename="{filename}"'}
    return Response(content=pdf_bytes, media_type=renderer.media_type, headers=headers)


@app.post("/api/invoices/pdf/base64")
def invoice_pdf_base64(invoice: Invoice, template: str | None = None) -> dict:
    pdf_bytes = _renderer_or_404(template).render(invoice, template)
    return {
        "filename": build_invoice_filename(invoice.invoice_number),
        "content": base64.b64encode(pdf_bytes).decode("ascii"),
    }


@app.post("/api/invoices/totals")
def invoice_totals(invoice: Invoice) -> dict:
    return calculate_invoice_totals(invoice.line_items).as_strings()


def run() -> None:
    import uvicorn

    setup_logging(extra_loggers=("uvicorn",))
    host = os.getenv("INVOICE_EXPORT_HOST", "0.0.0.0")
    port = env_int("INVOICE_EXPORT_PORT", 8000)
    logger.info("Starting invoice export service on %s:%d", host, port)
    # uvicorn logs through the handlers installed above
    uvicorn.run(app, host=host, port=port, log_config=None)


if __name__ == "__main__":
    run()
