from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from invoice_export.env import load_env
from invoice_export.invoice_numbering import build_invoice_filename
from invoice_export.logging_setup import setup_logging
from invoice_export.renderer import coerce_invoice, render_invoice_to_pdf_bytes

logger = logging.getLogger("invoice_export.export")


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Write an invoice JSON file as a PDF.")
    parser.add_argument("invoice", type=Path, help="Path to the invoice JSON file")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Target PDF path (default: <invoiceNumber>.pdf next to the input)",
    )
    parser.add_argument("--template", default=None, help="Renderer template id")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> Path:
    load_env()
    setup_logging(to_file=False)
    args = _parse_args(argv)

    payload = json.loads(args.invoice.read_text(encoding="utf-8"))
    invoice = coerce_invoice(payload)
    target = args.output or args.invoice.with_name(build_invoice_filename(invoice.invoice_number))

    pdf_bytes = render_invoice_to_pdf_bytes(invoice, args.template)
    target.write_bytes(pdf_bytes)
    logger.info("Wrote %s (%d bytes)", target, len(pdf_bytes))
    return target


if __name__ == "__main__":
    main()
