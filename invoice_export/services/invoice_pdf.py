# invoice_export/services/invoice_pdf.py
"""
Minimal single-page PDF writer for invoices.

The file is assembled by hand: a header, five objects (catalog, page tree,
page, content stream, font), a cross-reference table pointing at the exact
byte offset of every object, and a trailer. No rendering library is involved.

Known limitation: lines are never wrapped and there is only one page, so a
long invoice runs off the bottom edge.
"""
from __future__ import annotations

from dataclasses import dataclass

from ..invoice_calculations import (
    calculate_invoice_totals,
    format_amount,
    format_number,
    unbounded_exponents,
)
from ..models import Invoice, InvoiceLine


PDF_HEADER = b"%PDF-1.4\n"

COMPANY_PLACEHOLDER_LINES = (
    "Company: Your Company Name",
    "Address: Your Company Address",
)


@dataclass(frozen=True)
class PageLayout:
    width: int = 595
    height: int = 842
    origin_x: int = 50
    origin_y: int = 800
    line_step: int = 16
    font_size: int = 12
    font_name: str = "Helvetica"


DEFAULT_LAYOUT = PageLayout()


def ascii_fold(text: str) -> str:
    return "".join(ch if " " <= ch <= "~" else "?" for ch in text)


def escape_pdf_text(text: str) -> str:
    return text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def _pdf_literal(text: str) -> str:
    # fold first so escaping only ever sees ASCII
    return escape_pdf_text(ascii_fold(text))


def _item_line(line: InvoiceLine) -> str:
    return (
        f"{line.name} | Qty {format_number(line.quantity)} x {format_amount(line.unit_price)}"
        f" | VAT {format_number(line.vat_rate)}% | {format_amount(line.line_total)}"
    )


def build_display_lines(invoice: Invoice) -> list[str]:
    totals = calculate_invoice_totals(invoice.line_items)

    lines = [
        "INVOICE",
        f"Invoice Number: {invoice.invoice_number}",
        f"Invoice Date: {invoice.invoice_date}",
        "",
        *COMPANY_PLACEHOLDER_LINES,
        "",
        f"Customer: {invoice.customer_name}",
        f"Address: {invoice.customer_address}",
        f"Tax Office: {invoice.tax_office} / Tax Number: {invoice.tax_number}",
        "",
        "Line Items:",
    ]
    with unbounded_exponents():
        lines.extend(_item_line(item) for item in invoice.line_items)
    lines.extend(
        [
            "",
            f"Subtotal: {format_amount(totals.subtotal)}",
            f"VAT Total: {format_amount(totals.vat_total)}",
            f"Grand Total: {format_amount(totals.grand_total)}",
        ]
    )
    return lines


def build_content_stream(lines: list[str], layout: PageLayout = DEFAULT_LAYOUT) -> bytes:
    ops = [
        "BT",
        f"/F1 {layout.font_size} Tf",
        f"{layout.origin_x} {layout.origin_y} Td",
    ]
    for index, text in enumerate(lines):
        if index:
            ops.append(f"0 -{layout.line_step} Td")
        ops.append(f"({_pdf_literal(text)}) Tj")
    ops.append("ET")
    return "\n".join(ops).encode("ascii")


def _objects(stream: bytes, layout: PageLayout) -> list[bytes]:
    page = (
        f"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 {layout.width} {layout.height}]"
        " /Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>"
    )
    font = f"<< /Type /Font /Subtype /Type1 /BaseFont /{layout.font_name} >>"
    return [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        page.encode("ascii"),
        b"<< /Length " + str(len(stream)).encode("ascii") + b" >>\nstream\n" + stream + b"\nendstream",
        font.encode("ascii"),
    ]


def encode(invoice: Invoice, layout: PageLayout = DEFAULT_LAYOUT) -> bytes:
    """
    Encode ``invoice`` as a single-page PDF.

    Pure and deterministic: identical invoices give identical bytes. Free text
    is folded to printable ASCII and escaped, so any string content keeps the
    file structurally valid.
    """
    stream = build_content_stream(build_display_lines(invoice), layout)

    buf = bytearray(PDF_HEADER)
    offsets: list[int] = []
    for number, body in enumerate(_objects(stream, layout), start=1):
        offsets.append(len(buf))
        buf += f"{number} 0 obj\n".encode("ascii") + body + b"\nendobj\n"

    xref_offset = len(buf)
    size = len(offsets) + 1
    buf += f"xref\n0 {size}\n".encode("ascii")
    buf += b"0000000000 65535 f \n"
    for offset in offsets:
        buf += f"{offset:010d} 00000 n \n".encode("ascii")
    buf += f"trailer\n<< /Size {size} /Root 1 0 R >>\nstartxref\n{xref_offset}\n%%EOF\n".encode("ascii")
    return bytes(buf)
