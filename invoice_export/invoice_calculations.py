from __future__ import annotations

from dataclasses import dataclass
from decimal import MAX_EMAX, MIN_EMIN, Context, Decimal, ROUND_HALF_UP, getcontext, localcontext
from typing import Any, Iterable

from .models import InvoiceLine


_DECIMAL_PLACES = Decimal("0.01")


@dataclass(frozen=True)
class InvoiceTotals:
    subtotal: Decimal
    vat_total: Decimal
    grand_total: Decimal

    def as_strings(self) -> dict[str, str]:
        return {
            "subtotal": format_amount(self.subtotal),
            "vatTotal": format_amount(self.vat_total),
            "grandTotal": format_amount(self.grand_total),
        }


def _to_decimal(value: Any) -> Decimal:
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _unbounded_context(prec: int) -> Context:
    return Context(prec=prec, Emax=MAX_EMAX, Emin=MIN_EMIN)


def unbounded_exponents():
    """Decimal context for line arithmetic: quantity and rates have no upper bound."""
    return localcontext(_unbounded_context(getcontext().prec))


def _quantize(value: Decimal) -> Decimal:
    # widen precision so very large amounts still quantize
    context = _unbounded_context(max(getcontext().prec, value.adjusted() + 3))
    return value.quantize(_DECIMAL_PLACES, rounding=ROUND_HALF_UP, context=context)


def calculate_invoice_totals(lines: Iterable[InvoiceLine] | None) -> InvoiceTotals:
    """Sum line totals and VAT in line order, rounding only the final figures."""
    subtotal = Decimal("0")
    vat = Decimal("0")

    with unbounded_exponents():
        for line in lines or []:
            subtotal += line.line_total
            vat += line.vat_amount
        grand = subtotal + vat

    return InvoiceTotals(
        subtotal=_quantize(subtotal),
        vat_total=_quantize(vat),
        grand_total=_quantize(grand),
    )


def format_amount(value: Any) -> str:
    return f"{_quantize(_to_decimal(value)):.2f}"


def format_number(value: Any) -> str:
    """Print a number like a browser does: ``6`` not ``6.00``, ``1.5`` not ``1.50``."""
    number = _to_decimal(value)
    if not number.is_finite():
        return str(number)
    if number == number.to_integral_value():
        return format(number.to_integral_value(), "f")
    return format(number.normalize(), "f")
