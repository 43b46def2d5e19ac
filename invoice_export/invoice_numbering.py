from __future__ import annotations

import os
import re


DEFAULT_FILENAME = "invoice.pdf"


def _sanitize_filename(value: str) -> str:
    cleaned = value.strip().replace(os.sep, "-").replace("/", "-")
    cleaned = re.sub(r"[^\w.\-]+", "_", cleaned, flags=re.ASCII)
    return cleaned.strip("._")


def build_invoice_filename(invoice_number: str | None) -> str:
    filename = _sanitize_filename(str(invoice_number or ""))
    if not filename:
        return DEFAULT_FILENAME
    if not filename.lower().endswith(".pdf"):
        filename = f"{filename}.pdf"
    return filename
